"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner
from loguru import logger

from evm_signature.cli import cli
from evm_signature.utils.logger import reset_logger

ADDRESS = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"


@pytest.fixture
def runner():
    yield CliRunner()
    # the CLI points loguru at the runner's stderr, which is closed afterwards
    reset_logger()
    logger.disable("evm_signature")


def test_check_address(runner):
    result = runner.invoke(cli, ["check-address", ADDRESS])

    assert result.exit_code == 0
    assert f"{ADDRESS} is a valid address" in result.output


def test_check_address_invalid(runner):
    result = runner.invoke(cli, ["check-address", "0x1234"])

    assert result.exit_code == 1
    assert "Error: invalid address error" in result.output


def test_check_key(runner):
    result = runner.invoke(cli, ["check-key", "--key", "a" * 64])
    assert result.exit_code == 0

    result = runner.invoke(cli, ["check-key", "--key", "a" * 63])
    assert result.exit_code == 1


def test_check_key_prompts(runner):
    result = runner.invoke(cli, ["check-key"], input="b" * 64 + "\n")

    assert result.exit_code == 0
    assert "Private key format is valid" in result.output


def test_derive_address(runner):
    result = runner.invoke(cli, ["derive-address", "0x" + "0" * 24 + ADDRESS[2:]])

    assert result.exit_code == 0
    assert ADDRESS in result.output


def test_derive_address_strict(runner):
    result = runner.invoke(cli, ["derive-address", "--strict", "0x1234"])

    assert result.exit_code == 1
    assert "Error: invalid address error" in result.output


def test_pad(runner):
    result = runner.invoke(cli, ["pad", "ff"])

    assert result.exit_code == 0
    assert "0" * 62 + "ff" in result.output


def test_data_hex(runner):
    result = runner.invoke(cli, ["data-hex", "abcd", "1"])

    assert result.exit_code == 0
    assert "abcd" + "0" * 63 + "1" in result.output


def test_data_hex_invalid_selector(runner):
    result = runner.invoke(cli, ["data-hex", "xyz", "1"])

    assert result.exit_code == 1
    assert "Error: invalid hex" in result.output


def test_selector(runner):
    result = runner.invoke(cli, ["selector", "transfer(address,uint256)"])

    assert result.exit_code == 0
    assert "0xa9059cbb" in result.output


def test_wei_to_eth(runner):
    result = runner.invoke(cli, ["wei-to-eth", "1500000000000000000"])
    assert result.exit_code == 0
    assert "1.5" in result.output

    result = runner.invoke(cli, ["wei-to-eth", "--exact", "1500000000000000000"])
    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "1"


def test_eth_to_wei(runner):
    result = runner.invoke(cli, ["eth-to-wei", "2"])

    assert result.exit_code == 0
    assert "2000000000000000000" in result.output


def test_eth_to_wei_nan(runner):
    result = runner.invoke(cli, ["eth-to-wei", "nan"])

    assert result.exit_code == 1
    assert "Error: invalid value" in result.output
