"""
Copy-on-write over the tagged view/owned pair.

A Cow starts either borrowed (AnyStr) or owned (AnyString). An owned copy is
made only when it is actually required, and at most once.
"""

from __future__ import annotations

from typing import Union

from .dispatch import AnyCharset, AnyStr, AnyString


class Cow:
    __slots__ = ("_value",)

    def __init__(self, value: Union[AnyStr, AnyString]) -> None:
        if not isinstance(value, (AnyStr, AnyString)):
            raise TypeError(f"Cow wraps AnyStr or AnyString, not {type(value).__name__}")
        self._value = value

    @classmethod
    def borrowed(cls, view: AnyStr) -> Cow:
        if not isinstance(view, AnyStr):
            raise TypeError(f"expected AnyStr, not {type(view).__name__}")
        return cls(view)

    @classmethod
    def owned(cls, value: AnyString) -> Cow:
        if not isinstance(value, AnyString):
            raise TypeError(f"expected AnyString, not {type(value).__name__}")
        return cls(value)

    @property
    def is_borrowed(self) -> bool:
        return isinstance(self._value, AnyStr)

    @property
    def charset(self) -> AnyCharset:
        return self._value.charset

    def as_str(self) -> AnyStr:
        if isinstance(self._value, AnyStr):
            return self._value
        return self._value.as_str()

    def into_owned(self) -> AnyString:
        """Owned value; copies only when still borrowed.

        An already owned value is handed over as is. The Cow should not be
        used afterwards.
        """
        if isinstance(self._value, AnyStr):
            return self._value.to_owned()
        return self._value

    def to_mut(self) -> AnyString:
        """Owned value held by this Cow, promoting it on the first call."""
        if isinstance(self._value, AnyStr):
            self._value = self._value.to_owned()
        return self._value

    def __bytes__(self) -> bytes:
        return bytes(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        state = "borrowed" if self.is_borrowed else "owned"
        return f"Cow.{state}({self._value!r})"

    def __eq__(self, other):
        if isinstance(other, Cow):
            other = other._value
        if isinstance(other, (AnyStr, AnyString)):
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)
