"""
US-ASCII (MIBenum 3): every byte below 0x80, mapped to the same scalar.

Registry names elsewhere in the package are US-ASCII views built here.
"""

from __future__ import annotations

from . import charset
from .charset import UNDEFINED


class Character(charset.Character):
    __slots__ = ()


class Str(charset.Str):
    __slots__ = ()


class String(charset.String):
    __slots__ = ()


class DecodeError(charset.DecodeError):
    pass


# Literal names below are plain ASCII, so the unchecked constructor is sound.
_name = Str.decode_unchecked


class Charset(charset.SingleByteCharset):
    Character = Character
    DecodeError = DecodeError
    Str = Str
    String = String

    MIB_ENUM = 3
    PREFERRED_MIME_NAME = _name(b"US-ASCII")
    PRIMARY_NAME = _name(b"US-ASCII")

    DECODING_TABLE = "".join(map(chr, range(0x80))) + UNDEFINED * 0x80


# Alias values are US-ASCII views, which compare through Charset, so the
# enumeration is built once Charset is bound.
class Alias(charset.Alias):
    ANSI_X3_4_1968 = _name(b"ANSI_X3.4-1968")
    ANSI_X3_4_1986 = _name(b"ANSI_X3.4-1986")
    CP367 = _name(b"cp367")
    CS_ASCII = _name(b"csASCII")
    IBM367 = _name(b"IBM367")
    ISO_646_IRV_1991 = _name(b"ISO_646.irv:1991")
    ISO646_US = _name(b"ISO646-US")
    ISO_IR_6 = _name(b"iso-ir-6")
    US = _name(b"us")
    US_ASCII = _name(b"US-ASCII")


Charset.Alias = Alias
Alias.charset = Charset


def name(value: bytes) -> Str:
    """Validated US-ASCII view over a registry name literal."""
    return Charset.decode(value)
