"""
Core value types, constants and errors.
"""
from .constants import (
    WEI_IN_ETHEREUM,
    BlockTag,
    Chain,
    ChainID,
    Length,
    PrivateKeyV,
)
from .exceptions import (
    ConfigurationError,
    EvmSignatureError,
    InvalidAddressError,
    InvalidHexError,
    InvalidPrivateKeyError,
    InvalidValueError,
)
from .models import Contract, Data
from .types import HEX_PREFIX, Address, Hex, PrivateKey

__all__ = [
    "WEI_IN_ETHEREUM",
    "BlockTag",
    "Chain",
    "ChainID",
    "Length",
    "PrivateKeyV",
    "ConfigurationError",
    "EvmSignatureError",
    "InvalidAddressError",
    "InvalidHexError",
    "InvalidPrivateKeyError",
    "InvalidValueError",
    "Contract",
    "Data",
    "HEX_PREFIX",
    "Address",
    "Hex",
    "PrivateKey",
]
