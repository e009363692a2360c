"""
Capability masks. Each output bit also carries the internal series bits it depends on, so
requesting an output is enough to make a geodesic line precompute what it needs.
"""

__all__ = ['Caps', 'contains', 'intersect', 'intersects', 'outputs', 'union']

from functools import reduce
import operator


class Caps:
    """Bit values for the quantities a geodesic calculation can produce"""

    CAP_NONE = 0
    CAP_C1 = 1 << 0
    CAP_C1p = 1 << 1
    CAP_C2 = 1 << 2
    CAP_C3 = 1 << 3
    CAP_C4 = 1 << 4
    CAP_ALL = 0x1F
    CAP_MASK = CAP_ALL

    OUT_ALL = 0x7F80
    LONG_UNROLL = 1 << 15
    OUT_MASK = OUT_ALL | LONG_UNROLL

    EMPTY = 0
    LATITUDE = 1 << 7 | CAP_NONE
    LONGITUDE = 1 << 8 | CAP_C3
    AZIMUTH = 1 << 9 | CAP_NONE
    DISTANCE = 1 << 10 | CAP_C1
    STANDARD = LATITUDE | LONGITUDE | AZIMUTH | DISTANCE
    DISTANCE_IN = 1 << 11 | CAP_C1 | CAP_C1p
    REDUCEDLENGTH = 1 << 12 | CAP_C1 | CAP_C2
    GEODESICSCALE = 1 << 13 | CAP_C1 | CAP_C2
    AREA = 1 << 14 | CAP_C4
    ALL = OUT_ALL | CAP_ALL


def union(*masks: int) -> int:
    """Combine any number of masks"""
    return reduce(operator.or_, masks, Caps.EMPTY)


def intersect(mask: int, other: int) -> int:
    """The bits common to both masks"""
    return mask & other


def contains(mask: int, caps: int) -> bool:
    """
    Test whether every bit of caps is set in mask.

    Args:
        mask:
            The mask to test

        caps:
            The required bits

    Returns:
        bool
    """
    return mask & caps == caps


def intersects(mask: int, caps: int) -> bool:
    """Test whether any bit of caps is set in mask"""
    return mask & caps != 0


def outputs(mask: int) -> int:
    """Strip the internal series bits from a mask"""
    return mask & Caps.OUT_MASK
