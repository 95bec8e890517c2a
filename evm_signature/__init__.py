"""
Value types and helpers for EVM hex strings, addresses, private keys and
wei/ether amounts.
"""
from loguru import logger

from .core import (
    HEX_PREFIX,
    WEI_IN_ETHEREUM,
    Address,
    BlockTag,
    Chain,
    ChainID,
    ConfigurationError,
    Contract,
    Data,
    EvmSignatureError,
    Hex,
    InvalidAddressError,
    InvalidHexError,
    InvalidPrivateKeyError,
    InvalidValueError,
    Length,
    PrivateKey,
    PrivateKeyV,
)
from .utils import (
    create_hex_string_fixed_length,
    create_valid_address,
    ethereum_float_to_wei_big,
    is_valid_address,
    is_valid_private_key,
    method_selector,
    new_data_hex,
    wei_big_to_ethereum_big,
    wei_big_to_ethereum_float,
)

__version__ = "0.1.0"

# silent unless the application enables it
logger.disable("evm_signature")

__all__ = [
    "HEX_PREFIX",
    "WEI_IN_ETHEREUM",
    "Address",
    "BlockTag",
    "Chain",
    "ChainID",
    "ConfigurationError",
    "Contract",
    "Data",
    "EvmSignatureError",
    "Hex",
    "InvalidAddressError",
    "InvalidHexError",
    "InvalidPrivateKeyError",
    "InvalidValueError",
    "Length",
    "PrivateKey",
    "PrivateKeyV",
    "create_hex_string_fixed_length",
    "create_valid_address",
    "ethereum_float_to_wei_big",
    "is_valid_address",
    "is_valid_private_key",
    "method_selector",
    "new_data_hex",
    "wei_big_to_ethereum_big",
    "wei_big_to_ethereum_float",
]
