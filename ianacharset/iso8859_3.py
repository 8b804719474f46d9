"""
ISO_8859-3:1988 (MIBenum 6), Latin alphabet No. 3.

Bytes below 0xA0 map to the scalar of the same value. The upper 96 bytes go
through a table in which seven slots are reserved; those bytes are invalid.
"""

from __future__ import annotations

from . import charset
from .charset import UNDEFINED
from .us_ascii import name

# U+FFFE in this table marks the reserved slots.
# fmt: off
GRAPHICS_RIGHT = (
    "\u00a0\u0126\u02d8\u00a3\u00a4\ufffe\u0124\u00a7\u00a8\u0130\u015e\u011e\u0134\u00ad\ufffe\u017b"
    "\u00b0\u0127\u00b2\u00b3\u00b4\u00b5\u0125\u00b7\u00b8\u0131\u015f\u011f\u0135\u00bd\ufffe\u017c"
    "\u00c0\u00c1\u00c2\ufffe\u00c4\u010a\u0108\u00c7\u00c8\u00c9\u00ca\u00cb\u00cc\u00cd\u00ce\u00cf"
    "\ufffe\u00d1\u00d2\u00d3\u00d4\u0120\u00d6\u00d7\u011c\u00d9\u00da\u00db\u00dc\u016c\u015c\u00df"
    "\u00e0\u00e1\u00e2\ufffe\u00e4\u010b\u0109\u00e7\u00e8\u00e9\u00ea\u00eb\u00ec\u00ed\u00ee\u00ef"
    "\ufffe\u00f1\u00f2\u00f3\u00f4\u0121\u00f6\u00f7\u011d\u00f9\u00fa\u00fb\u00fc\u016d\u015d\u02d9"
)
# fmt: on

RESERVED = frozenset(
    0xA0 + index for index, char in enumerate(GRAPHICS_RIGHT) if char == UNDEFINED
)


class Character(charset.Character):
    __slots__ = ()


class Str(charset.Str):
    __slots__ = ()


class String(charset.String):
    __slots__ = ()


class DecodeError(charset.DecodeError):
    pass


class Alias(charset.Alias):
    CS_ISO_LATIN3 = name(b"csISOLatin3")
    ISO_8859_3 = name(b"ISO-8859-3")
    ISO_8859_3_ALT = name(b"ISO_8859-3")
    ISO_IR_109 = name(b"iso-ir-109")
    L3 = name(b"l3")
    LATIN3 = name(b"latin3")


class Charset(charset.SingleByteCharset):
    Alias = Alias
    Character = Character
    DecodeError = DecodeError
    Str = Str
    String = String

    MIB_ENUM = 6
    PREFERRED_MIME_NAME = name(b"ISO-8859-3")
    PRIMARY_NAME = name(b"ISO_8859-3:1988")

    DECODING_TABLE = "".join(map(chr, range(0xA0))) + GRAPHICS_RIGHT
