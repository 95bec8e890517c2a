"""
Wei <-> ether conversion at the fixed 10^18 scale.
"""
import math
from typing import Union

from .logger import logger
from ..core.constants import WEI_IN_ETHEREUM
from ..core.exceptions import InvalidValueError


def wei_big_to_ethereum_big(value: int) -> int:
    """
    Convert wei to whole ether.

    Fractions of an ether are dropped (floor division, which truncates for
    non-negative values).

    Args:
        value: Value in wei

    Returns:
        int: Value in whole ether
    """
    return value // WEI_IN_ETHEREUM


def wei_big_to_ethereum_float(value: int) -> float:
    """
    Convert wei to ether as a float.

    Args:
        value: Value in wei

    Returns:
        float: Nearest float to the exact quotient; +/-inf past float range
    """
    try:
        # int / int is correctly rounded for arbitrarily large operands
        return value / WEI_IN_ETHEREUM
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def ethereum_float_to_wei_big(value: Union[int, float]) -> int:
    """
    Convert ether to wei.

    The product with 10^18 is taken in float arithmetic and rounded to the
    nearest integer.

    Args:
        value: Value in ether

    Returns:
        int: Value in wei

    Raises:
        InvalidValueError: If the value is not a number, is NaN or infinite,
            or overflows when scaled
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidValueError(f"expected int or float, got {type(value).__name__}")
    try:
        return int("%.0f" % (float(value) * WEI_IN_ETHEREUM))
    except (ValueError, OverflowError) as e:
        logger.debug(f"Cannot convert {value!r} ether to wei: {e}")
        raise InvalidValueError(str(value)) from e
