"""
UTF-8 (MIBenum 106, RFC 3629).

Validation is the strict grammar of the interpreter's own decoder: overlong
forms, encoded surrogates, scalars above U+10FFFF, stray continuation bytes
and truncated sequences are all rejected.
"""

from __future__ import annotations

import codecs
from typing import Optional

from . import charset
from .us_ascii import name

_TRUNCATED = "unexpected end of data"


class Character(charset.Character):
    __slots__ = ()


class Str(charset.Str):
    __slots__ = ()


class String(charset.String):
    __slots__ = ()


class DecodeError(charset.DecodeError):
    """Position-aware UTF-8 error.

    ``valid_up_to`` is the length of the valid prefix. ``error_len`` is the
    length of the invalid sequence, or None when the input ended in the
    middle of a sequence that could still have been completed.
    """

    def __init__(self, valid_up_to: int = 0, error_len: Optional[int] = None) -> None:
        self.valid_up_to = valid_up_to
        self.error_len = error_len
        if error_len is None:
            detail = f"incomplete sequence at byte {valid_up_to}"
        else:
            detail = f"invalid sequence of {error_len} byte(s) at byte {valid_up_to}"
        ValueError.__init__(self, f"{self.charset.error_message()}: {detail}")

    def __reduce__(self):
        return type(self), (self.valid_up_to, self.error_len)

    def __eq__(self, other):
        if isinstance(other, DecodeError):
            return (self.valid_up_to, self.error_len) == (
                other.valid_up_to,
                other.error_len,
            )
        return super().__eq__(other)

    def __hash__(self):
        return hash((type(self), self.valid_up_to, self.error_len))


class Alias(charset.Alias):
    CS_UTF8 = name(b"csUTF8")


class Charset(charset.Charset):
    Alias = Alias
    Character = Character
    DecodeError = DecodeError
    Str = Str
    String = String

    MIB_ENUM = 106
    PREFERRED_MIME_NAME = name(b"UTF-8")
    PRIMARY_NAME = name(b"UTF-8")

    @classmethod
    def validate(cls, value) -> None:
        try:
            codecs.utf_8_decode(value, "strict", True)
        except UnicodeDecodeError as error:
            error_len = None if error.reason == _TRUNCATED else error.end - error.start
            raise DecodeError(error.start, error_len) from None

    @classmethod
    def contains(cls, char: str) -> bool:
        return not 0xD800 <= ord(char) <= 0xDFFF

    @classmethod
    def to_text(cls, data) -> str:
        return codecs.utf_8_decode(data, "strict", True)[0]
