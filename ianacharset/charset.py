"""
Capability contracts every supported charset satisfies.

A charset is a static identity (never instantiated) that ties together five
associated types:

- Str: a validated, zero-copy, read-only view over caller-owned bytes.
- String: an owned, immutable buffer that is valid for the charset.
- Character: one decoded unit with a Unicode scalar value.
- DecodeError: raised when bytes do not satisfy the charset's rule.
- Alias: closed enumeration of the registered alternate names.

The set of charsets is closed: these contracts can only be implemented by
modules inside this package.

Decoding always follows the same algorithm: ``validate(value)`` and, if it
returns, reinterpret the bytes with ``decode_unchecked(value)``.

Safety invariant for ``decode_unchecked``: it performs no checks. It may only
be called on bytes that were validated for the same charset (or are otherwise
known to be valid). Calling it on invalid bytes is a contract breach with
undefined results, not a recoverable error, and it must never be reachable
from untrusted input without a preceding ``validate``.

Aliasing invariant for ``Str``: the view references the caller's buffer.
While the view is alive the buffer must not be written through any other
reference. A ``bytearray`` cannot be resized while a view exists, but
in-place writes are not prevented and void every guarantee of the view.
"""

from __future__ import annotations

import codecs
import enum
import functools
from typing import ClassVar, Iterator, Optional, Type, Union

BytesLike = Union[bytes, bytearray, memoryview]

# U+FFFE marks undefined slots in charmap decoding tables.
UNDEFINED = "\ufffe"

_PACKAGE = __name__.rpartition(".")[0]
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_casefold(label) -> str:
    """Fold ASCII letters only, as registry name matching requires."""
    return str(label).translate(_ASCII_LOWER)


def _check_sealed(cls: type) -> None:
    if cls.__module__ != _PACKAGE and not cls.__module__.startswith(_PACKAGE + "."):
        raise TypeError(
            f"{cls.__qualname__}: the set of charsets is closed and cannot be "
            f"extended outside {_PACKAGE}"
        )


def _readonly_view(value: BytesLike) -> memoryview:
    return memoryview(value).cast("B").toreadonly()


class _Sealed:
    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _check_sealed(cls)


class DecodeError(_Sealed, ValueError):
    """These bytes do not satisfy the charset's rule.

    Single-byte charsets use a stateless marker: all instances of one
    charset's error compare equal.
    """

    charset: ClassVar[Type[Charset]]

    def __init__(self) -> None:
        super().__init__(self.charset.error_message())

    def __reduce__(self):
        return type(self), ()

    def __eq__(self, other):
        if isinstance(other, DecodeError):
            return type(other) is type(self)
        return NotImplemented

    def __hash__(self):
        return hash(type(self))


class BufferDecodeError(ValueError):
    """An owned decode rejected its buffer.

    ``buffer`` is the very object that was passed in, untouched; ``error``
    is the reason (also chained as ``__cause__``).
    """

    def __init__(self, buffer: BytesLike, error: ValueError) -> None:
        super().__init__(str(error))
        self.buffer = buffer
        self.error = error

    def __reduce__(self):
        return type(self), (self.buffer, self.error)


@functools.total_ordering
class Character(_Sealed):
    """A single decoded unit, for display and comparison only."""

    __slots__ = ("_char",)

    charset: ClassVar[Type[Charset]]

    def __init__(self, char: str) -> None:
        if len(char) != 1 or not self.charset.contains(char):
            raise ValueError(
                f"{char!r} is not a character of {self.charset.PRIMARY_NAME}"
            )
        self._char = char

    @classmethod
    def _wrap(cls, char: str) -> Character:
        self = cls.__new__(cls)
        self._char = char
        return self

    @property
    def scalar(self) -> int:
        return ord(self._char)

    def __str__(self) -> str:
        return self._char

    def __repr__(self) -> str:
        return f"<{self.charset.PRIMARY_NAME} character U+{self.scalar:04X}>"

    def __eq__(self, other):
        if isinstance(other, Character):
            return other.charset is self.charset and other._char == self._char
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Character) and other.charset is self.charset:
            return self._char < other._char
        return NotImplemented

    def __hash__(self):
        return hash((self.charset, self._char))


@functools.total_ordering
class _Text(_Sealed):
    # Shared behaviour of views and owned values. A view and an owned value of
    # the same charset holding the same bytes are equal and hash alike.
    __slots__ = ("_data",)

    charset: ClassVar[Type[Charset]]

    def as_bytes(self) -> memoryview:
        return memoryview(self._data)

    def chars(self) -> Iterator[Character]:
        return map(self.charset.Character._wrap, str(self))

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.charset.to_text(self._data)

    def __repr__(self) -> str:
        return f"<{self.charset.PRIMARY_NAME} {type(self).__name__} {str(self)!r}>"

    def __eq__(self, other):
        if isinstance(other, _Text):
            return other.charset is self.charset and self._data == other._data
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, _Text) and other.charset is self.charset:
            return bytes(self._data) < bytes(other._data)
        return NotImplemented

    def __hash__(self):
        # A memoryview hashes through its exporter, which may be a bytearray.
        return hash((self.charset, bytes(self._data)))


class Str(_Text):
    """Validated view; borrows the caller's bytes without copying."""

    __slots__ = ()

    def __init__(self, value: BytesLike) -> None:
        self.charset.validate(value)
        self._data = _readonly_view(value)

    @classmethod
    def decode(cls, value: BytesLike) -> Str:
        return cls.charset.decode(value)

    @classmethod
    def decode_unchecked(cls, value: BytesLike) -> Str:
        """Reinterpret ``value`` as a view without validating it.

        See the module docstring for the safety invariant.
        """
        self = cls.__new__(cls)
        self._data = _readonly_view(value)
        return self

    def to_owned(self) -> String:
        return self.charset.String.decode_unchecked(self._data.tobytes())


class String(_Text):
    """Owned value; its buffer is immutable and valid for the charset."""

    __slots__ = ()

    def __init__(self, value: BytesLike) -> None:
        self._data = self.charset.decode_owned(value)._data

    @classmethod
    def decode(cls, value: BytesLike) -> String:
        return cls.charset.decode_owned(value)

    @classmethod
    def decode_unchecked(cls, value: BytesLike) -> String:
        """Take ``value`` as an owned value without validating it.

        A ``bytes`` object is kept as is; other buffers are copied once since
        their owner could still write to them.
        """
        self = cls.__new__(cls)
        self._data = value if type(value) is bytes else bytes(value)
        return self

    @classmethod
    def from_str(cls, view: Str) -> String:
        return view.to_owned()

    def as_str(self) -> Str:
        return self.charset.Str.decode_unchecked(self._data)

    def into_bytes(self) -> bytes:
        return self._data


class Alias(enum.Enum):
    """Registered alternate names; member values are the exact spellings."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _check_sealed(cls)

    @property
    def spelling(self) -> Str:
        """The registered spelling, as a US-ASCII view."""
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def lookup(cls, label) -> Alias:
        folded = ascii_casefold(label)
        for alias in cls:
            if ascii_casefold(alias.value) == folded:
                return alias
        raise LookupError(f"unknown alias: {label}")


class Charset(_Sealed):
    """Static identity of one registered charset."""

    Alias: ClassVar[Type[Alias]]
    Character: ClassVar[Type[Character]]
    DecodeError: ClassVar[Type[DecodeError]]
    Str: ClassVar[Type[Str]]
    String: ClassVar[Type[String]]

    MIB_ENUM: ClassVar[int]
    PRIMARY_NAME: ClassVar[Str]
    PREFERRED_MIME_NAME: ClassVar[Optional[Str]]

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__module__}.{cls.__qualname__} is never instantiated")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name in ("Alias", "Character", "DecodeError", "Str", "String"):
            associated = cls.__dict__.get(name)
            if associated is not None:
                associated.charset = cls

    @classmethod
    def is_mime_text_suitable(cls) -> bool:
        return cls.PREFERRED_MIME_NAME is not None

    @classmethod
    def error_message(cls) -> str:
        preferred = cls.PREFERRED_MIME_NAME
        if preferred is None or preferred == cls.PRIMARY_NAME:
            return f"invalid {cls.PRIMARY_NAME}"
        return f"invalid {cls.PRIMARY_NAME} ({preferred})"

    @classmethod
    def validate(cls, value: BytesLike) -> None:
        """Raise the charset's DecodeError unless ``value`` is valid.

        Must stay pure: the same bytes always give the same answer.
        """
        raise NotImplementedError

    @classmethod
    def contains(cls, char: str) -> bool:
        raise NotImplementedError

    @classmethod
    def to_text(cls, data: BytesLike) -> str:
        raise NotImplementedError

    @classmethod
    def decode(cls, value: BytesLike) -> Str:
        cls.validate(value)
        return cls.decode_unchecked(value)

    @classmethod
    def decode_unchecked(cls, value: BytesLike) -> Str:
        return cls.Str.decode_unchecked(value)

    @classmethod
    def decode_owned(cls, value: BytesLike) -> String:
        """Validate and take ownership of ``value``.

        On failure raises BufferDecodeError carrying ``value`` back unchanged.
        """
        try:
            cls.validate(value)
        except DecodeError as error:
            raise BufferDecodeError(value, error) from error
        return cls.String.decode_unchecked(value)


class SingleByteCharset(Charset):
    """Charset where every byte maps to at most one character.

    ``DECODING_TABLE`` has 256 entries; UNDEFINED marks invalid bytes.
    """

    DECODING_TABLE: ClassVar[str]

    @classmethod
    def validate(cls, value: BytesLike) -> None:
        try:
            codecs.charmap_decode(value, "strict", cls.DECODING_TABLE)
        except UnicodeDecodeError:
            raise cls.DecodeError() from None

    @classmethod
    def contains(cls, char: str) -> bool:
        return char != UNDEFINED and char in cls.DECODING_TABLE

    @classmethod
    def to_text(cls, data: BytesLike) -> str:
        return codecs.charmap_decode(data, "strict", cls.DECODING_TABLE)[0]

    @classmethod
    def character(cls, byte: int) -> Character:
        char = cls.DECODING_TABLE[byte]
        if char == UNDEFINED:
            raise cls.DecodeError()
        return cls.Character._wrap(char)
