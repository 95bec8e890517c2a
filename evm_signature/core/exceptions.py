"""
Exceptions for the evm_signature helpers.
"""
from typing import Optional


class EvmSignatureError(Exception):
    """Base exception for all evm_signature errors."""

    message = "evm signature error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        text = f"{self.message}: {detail}" if detail else self.message
        super().__init__(text)


class InvalidAddressError(EvmSignatureError, ValueError):
    """Error when a string is not a well-formed 20-byte hex address."""

    message = "invalid address error"


class InvalidValueError(EvmSignatureError, ValueError):
    """Error when a numeric or fixed-width value cannot be produced."""

    message = "invalid value"


class InvalidHexError(EvmSignatureError, ValueError):
    """Error when a string contains non-hex characters."""

    message = "invalid hex"


class InvalidPrivateKeyError(EvmSignatureError, ValueError):
    """Error when a private key fails the format check."""

    message = "invalid private key"


class ConfigurationError(EvmSignatureError):
    """Error in configuration settings."""

    message = "configuration error"
