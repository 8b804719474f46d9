import logging

import pytest

from ianacharset import iso8859_1, us_ascii, utf_8
from ianacharset.charset import BufferDecodeError
from ianacharset.dispatch import (
    AnyCharacter,
    AnyCharset,
    AnyDecodeError,
    AnyStr,
    AnyString,
    decode_owned,
    decode_view,
)


def test_selector_identity():
    assert AnyCharset.UTF_8.mib_enum == 106
    assert AnyCharset.ISO_8859_1.primary_name == "ISO_8859-1:1987"
    assert AnyCharset.ISO_8859_1.preferred_mime_name == "ISO-8859-1"
    assert all(selector.is_mime_text_suitable() for selector in AnyCharset)
    assert AnyCharset.from_mib(5) is AnyCharset.ISO_8859_2
    with pytest.raises(LookupError):
        AnyCharset.from_mib(1)


def test_decode_view_is_tagged():
    view = decode_view(AnyCharset.ISO_8859_1, b"caf\xe9")
    assert isinstance(view, AnyStr)
    assert view.charset is AnyCharset.ISO_8859_1
    assert isinstance(view.value, iso8859_1.Str)
    assert str(view) == "café"
    assert len(view) == 4
    assert bytes(view) == b"caf\xe9"


def test_selector_accepts_charset_identity():
    assert decode_view(utf_8.Charset, b"x").charset is AnyCharset.UTF_8
    assert AnyCharset.US_ASCII.decode(b"x") == decode_view(us_ascii.Charset, b"x")


def test_decode_view_error_is_tagged():
    with pytest.raises(AnyDecodeError) as info:
        decode_view(AnyCharset.US_ASCII, b"\xe9")

    error = info.value
    assert error.charset is AnyCharset.US_ASCII
    assert error.error == us_ascii.DecodeError()
    assert error.__cause__ is error.error
    assert str(error) == "invalid US-ASCII"


def test_utf8_error_keeps_its_position():
    with pytest.raises(AnyDecodeError) as info:
        AnyCharset.UTF_8.decode(b"ab\xe9")
    assert info.value.error.valid_up_to == 2
    assert str(info.value).startswith("invalid UTF-8")


def test_decode_errors_compare_by_tag_and_error():
    ascii_error = AnyDecodeError(us_ascii.DecodeError())
    assert ascii_error == AnyDecodeError(us_ascii.DecodeError())
    assert ascii_error != AnyDecodeError(utf_8.DecodeError(0, 1))
    with pytest.raises(TypeError):
        AnyDecodeError(ValueError("not a charset error"))


def test_rejections_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="ianacharset.dispatch"):
        with pytest.raises(AnyDecodeError):
            decode_view(AnyCharset.ISO_8859_3, b"\xa5")
    assert "ISO_8859-3:1988" in caplog.text


def test_cross_variant_values_are_distinct():
    ascii_view = AnyCharset.US_ASCII.decode(b"abc")
    latin1_view = AnyCharset.ISO_8859_1.decode(b"abc")
    utf8_view = AnyCharset.UTF_8.decode(b"abc")

    assert ascii_view != latin1_view
    assert latin1_view != utf8_view
    assert len({ascii_view, latin1_view, utf8_view}) == 3
    assert ascii_view.to_owned() != latin1_view.to_owned()


def test_view_and_owned_of_same_variant_are_equal():
    view = AnyCharset.UTF_8.decode("ñ".encode("utf-8"))
    owned = AnyCharset.UTF_8.decode_owned("ñ".encode("utf-8"))
    assert view == owned
    assert hash(view) == hash(owned)


def test_ordering_is_by_variant_then_bytes():
    values = [
        AnyCharset.ISO_8859_1.decode(b"a"),
        AnyCharset.US_ASCII.decode(b"b"),
        AnyCharset.US_ASCII.decode(b"a"),
        AnyCharset.UTF_8.decode(b"a"),
    ]
    assert [(v.charset, bytes(v)) for v in sorted(values)] == [
        (AnyCharset.US_ASCII, b"a"),
        (AnyCharset.US_ASCII, b"b"),
        (AnyCharset.UTF_8, b"a"),
        (AnyCharset.ISO_8859_1, b"a"),
    ]


def test_to_owned_copies_and_keeps_the_tag():
    buffer = bytearray(b"\xa1\xff")
    view = decode_view(AnyCharset.ISO_8859_2, buffer)
    owned = view.to_owned()

    assert isinstance(owned, AnyString)
    assert owned.charset is AnyCharset.ISO_8859_2
    assert owned == view
    del view
    buffer[0] = 0x41
    assert owned.into_bytes() == b"\xa1\xff"
    assert str(owned) == "\u0104\u02d9"


def test_owned_round_trip_and_borrow():
    value = "Grüße".encode("utf-8")
    owned = decode_owned(AnyCharset.UTF_8, value)
    assert owned.into_bytes() is value
    assert owned.as_str() == owned
    assert isinstance(owned.as_str(), AnyStr)


@pytest.mark.parametrize(
    "selector, value",
    [
        (AnyCharset.US_ASCII, bytearray(b"caf\xe9")),
        (AnyCharset.UTF_8, b"caf\xe9"),
        (AnyCharset.UTF_8, bytearray(b"\xf0\x9f\x98")),
        (AnyCharset.ISO_8859_3, b"\xd0\xe3"),
    ],
)
def test_owned_failure_preserves_the_buffer(selector, value):
    before = bytes(value)
    with pytest.raises(BufferDecodeError) as info:
        decode_owned(selector, value)

    assert info.value.buffer is value
    assert bytes(info.value.buffer) == before
    assert len(info.value.buffer) == len(before)
    assert isinstance(info.value.error, AnyDecodeError)
    assert info.value.error.charset is selector


def test_retry_under_another_charset():
    payload = bytearray(b"caf\xe9")
    try:
        text = decode_owned(AnyCharset.UTF_8, payload)
    except BufferDecodeError as failure:
        text = decode_owned(AnyCharset.ISO_8859_1, failure.buffer)

    assert text.charset is AnyCharset.ISO_8859_1
    assert str(text) == "café"


def test_characters_are_tagged():
    chars = list(AnyCharset.ISO_8859_1.decode(b"\xe9").chars())
    assert [c.scalar for c in chars] == [0xE9]
    assert isinstance(chars[0], AnyCharacter)

    utf8_chars = list(AnyCharset.UTF_8.decode("é".encode("utf-8")).chars())
    assert str(utf8_chars[0]) == str(chars[0])
    assert utf8_chars[0] != chars[0]


def test_wrappers_reject_foreign_values():
    with pytest.raises(TypeError):
        AnyStr(b"abc")
    with pytest.raises(TypeError):
        AnyStr(us_ascii.String.decode(b"abc"))
    with pytest.raises(TypeError):
        AnyString(us_ascii.Charset.decode(b"abc"))


def test_views_over_bytearrays_go_into_sets():
    latin1 = AnyCharset.ISO_8859_1.decode(bytearray(b"abc"))
    ascii_ = AnyCharset.US_ASCII.decode(bytearray(b"abc"))

    values = {latin1, ascii_, AnyCharset.ISO_8859_1.decode_owned(b"abc")}
    assert len(values) == 2
    assert hash(latin1) == hash(latin1.to_owned())
