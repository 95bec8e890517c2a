"""
Helpers for addresses, private keys and contract call data.
"""
from typing import Optional

from eth_utils import function_signature_to_4byte_selector

from .logger import logger
from ..config.settings import settings
from ..core.constants import Length
from ..core.exceptions import InvalidAddressError, InvalidValueError
from ..core.models import Data, pad_hex_block
from ..core.types import HEX_PREFIX, Address, Hex, PrivateKey

# "0x" followed by one 32-byte input block
ADDRESS_WORD_LENGTH = Length.HEX_PREFIX + Length.ONE_BLOCK_INPUT_VALUE


def _strict(strict: Optional[bool]) -> bool:
    return settings.STRICT_LENGTHS if strict is None else strict


def create_valid_address(address: str, strict: Optional[bool] = None) -> Address:
    """
    Create an address from a 0x-prefixed, left-padded 32-byte input block.

    Args:
        address: Hex string holding one input block, e.g. a topic or call argument
        strict: Reject inputs of the wrong length (defaults to STRICT_LENGTHS)

    Returns:
        Address: "0x" followed by the last 40 hex characters

    Raises:
        InvalidAddressError: In strict mode, if the input is not one block long
    """
    if len(address) != ADDRESS_WORD_LENGTH:
        if _strict(strict):
            raise InvalidAddressError(
                f"expected {ADDRESS_WORD_LENGTH} characters, got {len(address)}"
            )
        logger.warning(
            f"Deriving address from {len(address)} characters, expected {ADDRESS_WORD_LENGTH}"
        )

    start = Length.ONE_BLOCK_INPUT_VALUE - Length.ADDRESS + Length.HEX_PREFIX
    return Address(HEX_PREFIX + address[start:])


def is_valid_address(address: str) -> None:
    """
    Check if the address is valid.

    Raises:
        InvalidAddressError: If the address is not a 20-byte hex address
    """
    Address(address).is_valid_address()


def is_valid_private_key(private_key: str) -> bool:
    """Return True if the private key is 64 hexadecimal characters."""
    return PrivateKey(private_key).is_valid_private_key()


def create_hex_string_fixed_length(value: str, strict: Optional[bool] = None) -> Hex:
    """
    Left-pad a hex numeral with zeros to the width of one input block.

    Values already at or over the block width are returned unchanged unless
    strict mode is on.

    Raises:
        InvalidValueError: In strict mode, if the value is wider than one block
    """
    if len(value) > Length.ONE_BLOCK_INPUT_VALUE and _strict(strict):
        raise InvalidValueError(
            f"{len(value)} characters exceed one input block of {int(Length.ONE_BLOCK_INPUT_VALUE)}"
        )
    return pad_hex_block(value)


def new_data_hex(data: Data) -> Hex:
    """Build call data: the method selector followed by the padded token ID."""
    return data.to_hex()


def method_selector(signature: str) -> Hex:
    """
    Compute the 4-byte selector of a function signature.

    Args:
        signature: Canonical signature, e.g. "ownerOf(uint256)"

    Returns:
        Hex: 0x-prefixed selector
    """
    return Hex(HEX_PREFIX + function_signature_to_4byte_selector(signature).hex())
