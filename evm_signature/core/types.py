"""
String-based value types: Hex, Address and PrivateKey.

Each type is a ``str`` subtype. Calling the type directly wraps a string
without checking it; ``parse`` is the checked constructor and is what
pydantic models use when validating fields of these types.
"""
from typing import Any

from eth_utils import is_hex_address, remove_0x_prefix, to_checksum_address
from loguru import logger
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .constants import Length
from .exceptions import InvalidAddressError, InvalidHexError, InvalidPrivateKeyError

HEX_CHARACTERS = frozenset("0123456789abcdefABCDEF")


def is_hex_character(c: str) -> bool:
    """Return True if ``c`` is a single hexadecimal digit."""
    return c in HEX_CHARACTERS


class _CheckedStr(str):
    """Base for the value types; wires ``parse`` into pydantic validation."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls.parse,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class Hex(_CheckedStr):
    """Hex-encoded string, optionally prefixed with ``0x``."""

    @classmethod
    def parse(cls, value: str) -> "Hex":
        """
        Build a hex string, enforcing the character check.

        Args:
            value: Hex digits, optionally prefixed with 0x or 0X

        Returns:
            Hex: The value, unchanged

        Raises:
            InvalidHexError: If any character after the prefix is not a hex digit
        """
        if not all(is_hex_character(c) for c in remove_0x_prefix(value)):
            logger.debug(f"Rejected hex value {value!r}")
            raise InvalidHexError(value)
        return cls(value)

    def has_prefix(self) -> bool:
        """
        Check for a leading 0x or 0X.

        Returns:
            bool: True if the string starts with the hex prefix
        """
        return self[: Length.HEX_PREFIX].lower() == "0x"


HEX_PREFIX = Hex("0x")


class Address(_CheckedStr):
    """20-byte account or contract address."""

    @classmethod
    def parse(cls, value: str) -> "Address":
        """
        Build an address, enforcing the format check.

        Args:
            value: Candidate address string

        Returns:
            Address: The address, unchanged

        Raises:
            InvalidAddressError: If the value is not a 20-byte hex address
        """
        address = cls(value)
        address.is_valid_address()
        return address

    def is_valid_address(self) -> None:
        """
        Check if the address is valid.

        Raises:
            InvalidAddressError: If the address is not a 20-byte hex address
        """
        if not is_hex_address(str(self)):
            logger.debug(f"Invalid address {str(self)!r}")
            raise InvalidAddressError(str(self))

    def to_checksum(self) -> "Address":
        """Return the EIP-55 mixed-case form of a valid address."""
        self.is_valid_address()
        return Address(to_checksum_address(str(self)))


class PrivateKey(_CheckedStr):
    """Hex-encoded 32-byte private key, without prefix."""

    @classmethod
    def parse(cls, value: str) -> "PrivateKey":
        """
        Build a private key, enforcing the format check.

        Args:
            value: 64 hex digits, without prefix

        Returns:
            PrivateKey: The key, unchanged

        Raises:
            InvalidPrivateKeyError: If the value fails the format check
        """
        key = cls(value)
        if not key.is_valid_private_key():
            # never log the key itself
            logger.debug(f"Rejected private key of length {len(value)}")
            raise InvalidPrivateKeyError()
        return key

    def is_valid_private_key(self) -> bool:
        """Format check only: 64 hex digits. The curve order is not checked."""
        if len(self) != Length.PRIVATE_KEY:
            return False
        return all(is_hex_character(c) for c in self)

    def __repr__(self) -> str:
        return "PrivateKey(***)"
