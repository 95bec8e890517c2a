"""
Utility package for evm_signature.
"""
from .logger import logger, reset_logger, setup_logger
from .helpers import (
    create_valid_address,
    is_valid_address,
    is_valid_private_key,
    create_hex_string_fixed_length,
    new_data_hex,
    method_selector,
)
from .units import (
    wei_big_to_ethereum_big,
    wei_big_to_ethereum_float,
    ethereum_float_to_wei_big,
)

__all__ = [
    "logger",
    "setup_logger",
    "reset_logger",
    "create_valid_address",
    "is_valid_address",
    "is_valid_private_key",
    "create_hex_string_fixed_length",
    "new_data_hex",
    "method_selector",
    "wei_big_to_ethereum_big",
    "wei_big_to_ethereum_float",
    "ethereum_float_to_wei_big",
]
