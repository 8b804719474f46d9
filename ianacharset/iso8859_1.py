"""
ISO_8859-1:1987 (MIBenum 4). Every byte is valid and maps to the scalar of
the same value, so validation never fails.
"""

from __future__ import annotations

from . import charset
from .us_ascii import name


class Character(charset.Character):
    __slots__ = ()


class Str(charset.Str):
    __slots__ = ()


class String(charset.String):
    __slots__ = ()


class DecodeError(charset.DecodeError):
    pass


class Alias(charset.Alias):
    CP819 = name(b"CP819")
    CS_ISO_LATIN1 = name(b"csISOLatin1")
    IBM819 = name(b"IBM819")
    ISO_8859_1 = name(b"ISO-8859-1")
    ISO_8859_1_ALT = name(b"ISO_8859-1")
    ISO_IR_100 = name(b"iso-ir-100")
    L1 = name(b"l1")
    LATIN1 = name(b"latin1")


class Charset(charset.SingleByteCharset):
    Alias = Alias
    Character = Character
    DecodeError = DecodeError
    Str = Str
    String = String

    MIB_ENUM = 4
    PREFERRED_MIME_NAME = name(b"ISO-8859-1")
    PRIMARY_NAME = name(b"ISO_8859-1:1987")

    DECODING_TABLE = "".join(map(chr, range(0x100)))

    @classmethod
    def validate(cls, value) -> None:
        # Total over all 256 byte values; only the buffer type is checked.
        memoryview(value)
