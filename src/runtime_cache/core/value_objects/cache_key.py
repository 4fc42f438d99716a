"""Cache key value object.

ONLY key normalization - flattens a scalar or an ordered sequence of
scalars into the string under which a runtime cache stores its value.

Following maximum separation architecture - one file = one purpose.
"""

from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import Any, Union

from ..exceptions.cache_key_invalid import CacheKeyInvalid
from .key_encoding import KeyEncoding

KEY_SEPARATOR = "|"

# Treated as scalars even though they are sequences
_SCALAR_SEQUENCES = (str, bytes, bytearray)


def _is_sequence_key(raw: Any) -> bool:
    return isinstance(raw, (list, tuple)) and not isinstance(raw, _SCALAR_SEQUENCES)


def _length_prefixed(segment: str) -> str:
    return f"{len(segment)}:{segment}"


def normalize_key(raw: Any, encoding: Union[KeyEncoding, str] = KeyEncoding.JOINED) -> str:
    """Normalize a raw key to its string form.

    Args:
        raw: A scalar, or a list/tuple of scalars
        encoding: Key encoding to apply

    Returns:
        Normalized key string

    Raises:
        CacheKeyInvalid: If the key is a mapping or a set
    """
    if isinstance(raw, (Mapping, Set)):
        raise CacheKeyInvalid.unordered(raw)

    encoding = KeyEncoding(encoding)

    if _is_sequence_key(raw):
        segments = [str(element) for element in raw]
        if encoding is KeyEncoding.LENGTH_PREFIXED:
            return f"{len(segments)}#" + "".join(_length_prefixed(s) for s in segments)
        return KEY_SEPARATOR.join(segments)

    if encoding is KeyEncoding.LENGTH_PREFIXED:
        return _length_prefixed(str(raw))
    return str(raw)


@dataclass(frozen=True)
class CacheKey:
    """Normalized cache key value object.

    Immutable wrapper around the normalized string. Two raw keys address the
    same cache slot exactly when their normalized values match.
    """

    value: str
    encoding: KeyEncoding = KeyEncoding.JOINED

    @classmethod
    def from_raw(
        cls, raw: Any, encoding: Union[KeyEncoding, str] = KeyEncoding.JOINED
    ) -> "CacheKey":
        """Create cache key from a raw scalar or sequence key."""
        encoding = KeyEncoding(encoding)
        if isinstance(raw, CacheKey):
            # The raw parts are gone, so a key cannot be re-encoded
            if raw.encoding is not encoding:
                raise CacheKeyInvalid.encoding_mismatch(raw, encoding.value)
            return raw
        return cls(normalize_key(raw, encoding), encoding)

    @classmethod
    def from_parts(
        cls, *parts: Any, encoding: Union[KeyEncoding, str] = KeyEncoding.JOINED
    ) -> "CacheKey":
        """Create cache key from positional parts treated as one sequence."""
        return cls.from_raw(list(parts), encoding)

    def __str__(self) -> str:
        """String representation."""
        return self.value
