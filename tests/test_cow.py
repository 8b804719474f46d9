import pytest

from ianacharset.cow import Cow
from ianacharset.dispatch import AnyCharset, AnyString


def test_borrowed_into_owned_copies():
    view = AnyCharset.ISO_8859_1.decode(bytearray(b"abc"))
    cow = Cow.borrowed(view)

    owned = cow.into_owned()
    assert isinstance(owned, AnyString)
    assert owned == view
    assert owned.charset is AnyCharset.ISO_8859_1
    assert cow.is_borrowed


def test_owned_into_owned_moves():
    owned = AnyCharset.UTF_8.decode_owned(b"abc")
    assert Cow.owned(owned).into_owned() is owned


def test_to_mut_promotes_once():
    cow = Cow.borrowed(AnyCharset.US_ASCII.decode(b"abc"))

    first = cow.to_mut()
    assert not cow.is_borrowed
    assert cow.to_mut() is first
    assert cow.into_owned() is first
    assert first.charset is AnyCharset.US_ASCII


def test_to_mut_on_owned_reuses_storage():
    owned = AnyCharset.ISO_8859_2.decode_owned(b"\xa1")
    cow = Cow.owned(owned)
    assert cow.to_mut() is owned


def test_content_is_unchanged_by_promotion():
    cow = Cow(AnyCharset.ISO_8859_3.decode(b"\xa1"))
    before = (str(cow), bytes(cow), len(cow), hash(cow))
    cow.to_mut()
    assert (str(cow), bytes(cow), len(cow), hash(cow)) == before
    assert cow.as_str() == AnyCharset.ISO_8859_3.decode(b"\xa1")


def test_equality_respects_the_tag():
    latin1 = Cow(AnyCharset.ISO_8859_1.decode(b"abc"))
    ascii_ = Cow(AnyCharset.US_ASCII.decode(b"abc"))
    assert latin1 != ascii_
    assert latin1 == Cow(AnyCharset.ISO_8859_1.decode_owned(b"abc"))


def test_rejects_non_tagged_values():
    with pytest.raises(TypeError):
        Cow(b"abc")
    with pytest.raises(TypeError):
        Cow.owned(AnyCharset.US_ASCII.decode(b"abc"))


def test_borrowed_over_a_bytearray_hashes_like_its_owned_form():
    cow = Cow.borrowed(AnyCharset.UTF_8.decode(bytearray(b"x")))
    before = hash(cow)
    cow.to_mut()
    assert hash(cow) == before
