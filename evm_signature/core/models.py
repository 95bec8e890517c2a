"""
Call-data entities: Data and Contract.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .constants import INT64_MAX, INT64_MIN, Length
from .types import Address, Hex


def pad_hex_block(value: str) -> Hex:
    """Left-pad ``value`` with zeros to one input block; longer values pass through."""
    return Hex(value.rjust(Length.ONE_BLOCK_INPUT_VALUE, "0"))


class Data(BaseModel):
    """Values for the data field of a contract call."""

    model_config = ConfigDict(frozen=True)

    address_contract_method: Hex
    token_id: StrictInt = Field(..., ge=INT64_MIN, le=INT64_MAX)

    def to_hex(self) -> Hex:
        """Method selector followed by the token ID as one zero-padded hex block."""
        token_id = pad_hex_block(format(self.token_id, "x"))
        return Hex(self.address_contract_method + token_id)


class Contract(BaseModel):
    """Addresses of a contract and one of its methods."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    address: Address
    address_method: Hex = Field(..., alias="addressMethod")

    def to_json(self) -> str:
        """
        Serialize the contract to JSON.

        Returns:
            str: JSON object with the keys "address" and "addressMethod"
        """
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, raw: str) -> "Contract":
        """
        Load a contract from JSON.

        Args:
            raw: JSON object with the keys "address" and "addressMethod"

        Returns:
            Contract: The validated contract

        Raises:
            pydantic.ValidationError: If the address or method selector is malformed
        """
        return cls.model_validate_json(raw)
