"""
Enumerated constants shared by the evm_signature helpers.

Values are part of the public contract; consumers compare against the
literals, so the enums mix in ``str``/``int``.
"""
from enum import Enum, IntEnum


class Chain(str, Enum):
    """Supported chain names."""

    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    ROPSTEN = "ropsten"


class ChainID(IntEnum):
    """Numeric chain identifiers."""

    RINKEBY = 4
    MATIC = 137


class PrivateKeyV(IntEnum):
    """Signature recovery ``v`` values."""

    ZERO = 0
    ONE = 1
    TWENTY_SEVEN = 27
    TWENTY_EIGHT = 28

    def normalize(self) -> "PrivateKeyV":
        """Map the legacy 27/28 form onto the 0/1 recovery id."""
        if self >= PrivateKeyV.TWENTY_SEVEN:
            return PrivateKeyV(self - PrivateKeyV.TWENTY_SEVEN)
        return self


class Length(IntEnum):
    """Fixed lengths, in hex characters, of blockchain elements."""

    PRIVATE_KEY = 64
    # same width as PRIVATE_KEY, so this member is an alias
    ONE_BLOCK_INPUT_VALUE = 64
    TWO_BLOCK_INPUT_SIGNATURE = 130
    ADDRESS = 40
    HEX_PREFIX = 2


class BlockTag(str, Enum):
    """Block tags accepted by JSON-RPC block parameters."""

    LATEST = "latest"


# one ether = 1,000,000,000,000,000,000 wei (10^18)
WEI_IN_ETHEREUM = 10 ** 18

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
