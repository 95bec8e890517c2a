"""
Command line entry point for the evm_signature helpers.
"""
import sys
from typing import Optional

import click

from .config import settings
from .core.exceptions import EvmSignatureError
from .core.models import Data
from .core.types import Hex
from .utils.helpers import (
    create_hex_string_fixed_length,
    create_valid_address,
    is_valid_address,
    is_valid_private_key,
    method_selector,
)
from .utils.logger import logger, reset_logger, setup_logger
from .utils.units import (
    ethereum_float_to_wei_big,
    wei_big_to_ethereum_big,
    wei_big_to_ethereum_float,
)


def _fail(e: Exception) -> None:
    logger.error(f"Error: {e}")
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=str, help="Log file path")
def cli(debug: bool, log_file: Optional[str]):
    """EVM hex, address and unit helpers."""
    reset_logger()
    # the console script owns the process, so loguru's default sink goes
    logger.remove()
    logger.enable("evm_signature")
    log_level = "DEBUG" if debug else settings.LOG_LEVEL
    setup_logger(log_level=log_level, log_file=log_file)


@cli.command("check-address")
@click.argument("address", type=str)
def check_address(address: str):
    """Check that ADDRESS is a 20-byte hex address."""
    try:
        is_valid_address(address)
        click.echo(f"{address} is a valid address")
    except EvmSignatureError as e:
        _fail(e)


@cli.command("check-key")
@click.option("--key", prompt=True, hide_input=True, help="Private key (prompted if omitted)")
def check_key(key: str):
    """Check the format of a private key."""
    if is_valid_private_key(key):
        click.echo("Private key format is valid")
    else:
        click.echo("Error: private key must be 64 hexadecimal characters", err=True)
        sys.exit(1)


@cli.command("derive-address")
@click.argument("word", type=str)
@click.option("--strict/--no-strict", default=None, help="Reject input that is not one 32-byte block")
def derive_address(word: str, strict: Optional[bool]):
    """Extract the address held in a 32-byte hex WORD."""
    try:
        click.echo(create_valid_address(word, strict=strict))
    except EvmSignatureError as e:
        _fail(e)


@cli.command("pad")
@click.argument("value", type=str)
@click.option("--strict/--no-strict", default=None, help="Reject values wider than one block")
def pad(value: str, strict: Optional[bool]):
    """Left-pad a hex VALUE to one 32-byte block."""
    try:
        click.echo(create_hex_string_fixed_length(value, strict=strict))
    except EvmSignatureError as e:
        _fail(e)


@cli.command("data-hex")
@click.argument("method", type=str)
@click.argument("token_id", type=int)
def data_hex(method: str, token_id: int):
    """Build call data from a METHOD selector and a TOKEN_ID."""
    try:
        data = Data(address_contract_method=Hex.parse(method), token_id=token_id)
        click.echo(data.to_hex())
    except ValueError as e:
        _fail(e)


@cli.command("selector")
@click.argument("signature", type=str)
def selector(signature: str):
    """Print the 4-byte selector of a function SIGNATURE."""
    click.echo(method_selector(signature))


@cli.command("wei-to-eth")
@click.argument("wei", type=int)
@click.option("--exact", is_flag=True, help="Print whole ether, dropping the fraction")
def wei_to_eth(wei: int, exact: bool):
    """Convert WEI to ether."""
    if exact:
        click.echo(wei_big_to_ethereum_big(wei))
    else:
        click.echo(wei_big_to_ethereum_float(wei))


@cli.command("eth-to-wei")
@click.argument("ether", type=float)
def eth_to_wei(ether: float):
    """Convert ETHER to wei."""
    try:
        click.echo(ethereum_float_to_wei_big(ether))
    except EvmSignatureError as e:
        _fail(e)


if __name__ == "__main__":
    cli()
