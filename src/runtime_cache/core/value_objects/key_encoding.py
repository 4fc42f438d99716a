"""Key encoding value object.

ONLY encoding choice - selects how raw keys are flattened to strings.

Following maximum separation architecture - one file = one purpose.
"""

from enum import Enum


class KeyEncoding(str, Enum):
    """Strategies for turning a raw key into a normalized string.

    JOINED joins sequence elements with the separator and keeps scalars as
    their ``str()``. Elements containing the separator are not escaped, so
    ``["a", "b"]`` and ``["a|b"]`` share the key ``"a|b"``.

    LENGTH_PREFIXED prefixes every segment with its length and sequences
    with their element count, so distinct raw keys never collide.
    """

    JOINED = "joined"
    LENGTH_PREFIXED = "length_prefixed"
