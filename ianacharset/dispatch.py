"""
Runtime dispatch over the closed set of supported charsets.

AnyCharset selects a charset at runtime; AnyStr, AnyString, AnyCharacter and
AnyDecodeError wrap the matching per-charset value together with its tag.
Two tagged values are equal only when both the tag and the wrapped value are
equal, so identical bytes under different charsets never compare equal.
"""

from __future__ import annotations

import enum
import functools
import logging
from typing import Dict, Iterator, Optional, Tuple

from . import charset, iso8859_1, iso8859_2, iso8859_3, us_ascii, utf_8
from .charset import BufferDecodeError, BytesLike, ascii_casefold

logger = logging.getLogger(__name__)


class AnyCharset(enum.Enum):
    US_ASCII = us_ascii.Charset
    UTF_8 = utf_8.Charset
    ISO_8859_1 = iso8859_1.Charset
    ISO_8859_2 = iso8859_2.Charset
    ISO_8859_3 = iso8859_3.Charset

    @property
    def mib_enum(self) -> int:
        return self.value.MIB_ENUM

    @property
    def primary_name(self) -> str:
        return str(self.value.PRIMARY_NAME)

    @property
    def preferred_mime_name(self) -> Optional[str]:
        preferred = self.value.PREFERRED_MIME_NAME
        return None if preferred is None else str(preferred)

    def is_mime_text_suitable(self) -> bool:
        return self.value.is_mime_text_suitable()

    def aliases(self) -> Tuple[charset.Alias, ...]:
        return tuple(self.value.Alias)

    def labels(self) -> Tuple[str, ...]:
        """Every registered spelling: primary name, preferred name, aliases."""
        names = [self.primary_name]
        if self.preferred_mime_name is not None:
            names.append(self.preferred_mime_name)
        names.extend(str(alias) for alias in self.aliases())
        return tuple(dict.fromkeys(names))

    def decode(self, value: BytesLike) -> AnyStr:
        return decode_view(self, value)

    def decode_owned(self, value: BytesLike) -> AnyString:
        return decode_owned(self, value)

    @classmethod
    def lookup(cls, label: str) -> AnyCharset:
        """Resolve a registry label, matching ASCII case-insensitively."""
        try:
            return _BY_LABEL[ascii_casefold(label)]
        except KeyError:
            raise LookupError(f"unknown charset: {label}") from None

    @classmethod
    def from_mib(cls, mib_enum: int) -> AnyCharset:
        for selector in cls:
            if selector.mib_enum == mib_enum:
                return selector
        raise LookupError(f"unknown MIBenum: {mib_enum}")


_RANK = {selector: rank for rank, selector in enumerate(AnyCharset)}
_BY_CHARSET = {selector.value: selector for selector in AnyCharset}
_BY_LABEL: Dict[str, AnyCharset] = {
    ascii_casefold(label): selector
    for selector in AnyCharset
    for label in selector.labels()
}


def _selector(selector) -> AnyCharset:
    if isinstance(selector, AnyCharset):
        return selector
    return AnyCharset(selector)


@functools.total_ordering
class _Tagged:
    __slots__ = ("charset", "value")

    _member: str

    def __init__(self, value) -> None:
        tag = _BY_CHARSET.get(getattr(value, "charset", None))
        if tag is None or not isinstance(value, getattr(tag.value, self._member)):
            raise TypeError(f"{type(self).__name__} cannot wrap {value!r}")
        self.charset = tag
        self.value = value

    def __eq__(self, other):
        if isinstance(other, _Tagged):
            return other.charset is self.charset and self.value == other.value
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, _Tagged):
            return NotImplemented
        if other.charset is not self.charset:
            return _RANK[self.charset] < _RANK[other.charset]
        return self.value < other.value

    def __hash__(self):
        return hash((self.charset, self.value))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.charset.name}, {str(self.value)!r})"


class AnyCharacter(_Tagged):
    __slots__ = ()
    _member = "Character"

    @property
    def scalar(self) -> int:
        return self.value.scalar


class AnyStr(_Tagged):
    """Tagged validated view; shares the caller's bytes."""

    __slots__ = ()
    _member = "Str"

    def as_bytes(self) -> memoryview:
        return self.value.as_bytes()

    def chars(self) -> Iterator[AnyCharacter]:
        return map(AnyCharacter, self.value.chars())

    def to_owned(self) -> AnyString:
        return AnyString(self.value.to_owned())

    def __bytes__(self) -> bytes:
        return bytes(self.value)

    def __len__(self) -> int:
        return len(self.value)


class AnyString(_Tagged):
    """Tagged owned value."""

    __slots__ = ()
    _member = "String"

    def as_bytes(self) -> memoryview:
        return self.value.as_bytes()

    def as_str(self) -> AnyStr:
        return AnyStr(self.value.as_str())

    def chars(self) -> Iterator[AnyCharacter]:
        return map(AnyCharacter, self.value.chars())

    def into_bytes(self) -> bytes:
        return self.value.into_bytes()

    def __bytes__(self) -> bytes:
        return bytes(self.value)

    def __len__(self) -> int:
        return len(self.value)


class AnyDecodeError(ValueError):
    """Tagged decode error; the wrapped error is also the ``__cause__``."""

    def __init__(self, error: charset.DecodeError) -> None:
        tag = _BY_CHARSET.get(getattr(error, "charset", None))
        if tag is None or not isinstance(error, tag.value.DecodeError):
            raise TypeError(f"AnyDecodeError cannot wrap {error!r}")
        super().__init__(str(error))
        self.charset = tag
        self.error = error
        self.__cause__ = error

    def __eq__(self, other):
        if isinstance(other, AnyDecodeError):
            return other.charset is self.charset and self.error == other.error
        return NotImplemented

    def __hash__(self):
        return hash((self.charset, self.error))


def decode_view(selector: AnyCharset, value: BytesLike) -> AnyStr:
    """Validate ``value`` under ``selector`` and wrap it without copying.

    Raises AnyDecodeError if the bytes are not valid for the charset.
    """
    selector = _selector(selector)
    try:
        view = selector.value.decode(value)
    except charset.DecodeError as error:
        logger.debug("rejected bytes as %s: %s", selector.primary_name, error)
        raise AnyDecodeError(error) from error
    return AnyStr(view)


def decode_owned(selector: AnyCharset, value: BytesLike) -> AnyString:
    """Validate ``value`` under ``selector`` and take ownership of it.

    On failure raises BufferDecodeError whose ``buffer`` is ``value`` itself,
    unchanged, so the caller can retry under another charset.
    """
    selector = _selector(selector)
    try:
        owned = selector.value.decode_owned(value)
    except BufferDecodeError as failure:
        logger.debug("rejected buffer as %s: %s", selector.primary_name, failure)
        error = AnyDecodeError(failure.error)
        raise BufferDecodeError(failure.buffer, error) from error
    return AnyString(owned)
