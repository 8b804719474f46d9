"""
ISO_8859-2:1987 (MIBenum 5), Latin alphabet No. 2.

Bytes below 0xA0 map to the scalar of the same value; the upper 96 bytes go
through a fixed table. Every byte is valid.
"""

from __future__ import annotations

from . import charset
from .us_ascii import name

# fmt: off
GRAPHICS_RIGHT = (
    "\u00a0\u0104\u02d8\u0141\u00a4\u013d\u015a\u00a7\u00a8\u0160\u015e\u0164\u0179\u00ad\u017d\u017b"
    "\u00b0\u0105\u02db\u0142\u00b4\u013e\u015b\u02c7\u00b8\u0161\u015f\u0165\u017a\u02dd\u017e\u017c"
    "\u0154\u00c1\u00c2\u0102\u00c4\u0139\u0106\u00c7\u010c\u00c9\u0118\u00cb\u011a\u00cd\u00ce\u010e"
    "\u0110\u0143\u0147\u00d3\u00d4\u0150\u00d6\u00d7\u0158\u016e\u00da\u0170\u00dc\u00dd\u0162\u00df"
    "\u0155\u00e1\u00e2\u0103\u00e4\u013a\u0107\u00e7\u010d\u00e9\u0119\u00eb\u011b\u00ed\u00ee\u010f"
    "\u0111\u0144\u0148\u00f3\u00f4\u0151\u00f6\u00f7\u0159\u016f\u00fa\u0171\u00fc\u00fd\u0163\u02d9"
)
# fmt: on


class Character(charset.Character):
    __slots__ = ()


class Str(charset.Str):
    __slots__ = ()


class String(charset.String):
    __slots__ = ()


class DecodeError(charset.DecodeError):
    pass


class Alias(charset.Alias):
    CS_ISO_LATIN2 = name(b"csISOLatin2")
    ISO_8859_2 = name(b"ISO-8859-2")
    ISO_8859_2_ALT = name(b"ISO_8859-2")
    ISO_IR_101 = name(b"iso-ir-101")
    L2 = name(b"l2")
    LATIN2 = name(b"latin2")


class Charset(charset.SingleByteCharset):
    Alias = Alias
    Character = Character
    DecodeError = DecodeError
    Str = Str
    String = String

    MIB_ENUM = 5
    PREFERRED_MIME_NAME = name(b"ISO-8859-2")
    PRIMARY_NAME = name(b"ISO_8859-2:1987")

    DECODING_TABLE = "".join(map(chr, range(0xA0))) + GRAPHICS_RIGHT

    @classmethod
    def validate(cls, value) -> None:
        memoryview(value)
