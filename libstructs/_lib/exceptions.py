from __future__ import annotations

import abc
import attr as attrs
from typing import Optional


@attrs.s(auto_attribs=True)
class StructException(Exception, abc.ABC):
    """
    Base exception for the library.
    """

    struct: object
    desrc: Optional[str] = None

    def location(self) -> str:
        if isinstance(self.struct, str):
            return self.struct
        if isinstance(self.struct, type):
            return self.struct.__name__
        return type(self.struct).__name__

    @abc.abstractmethod
    def msg(self) -> str:
        ...

    def __str__(self) -> str:
        return f'{self.location()}: {self.msg()}'


class StructValueError(StructException, ValueError):
    """
    A construction parameter or argument is not acceptable.
    """

    def msg(self) -> str:
        return f"Invalid argument, {self.desrc}"


@attrs.s(auto_attribs=True)
class StructIndexError(StructException, IndexError):
    """
    A position or element is outside of the structure bounds.
    """
    index: object = attrs.ib(kw_only=True)
    size: int = attrs.ib(kw_only=True)
    desrc: None = attrs.ib(init=False, default=None)

    def msg(self) -> str:
        return f"Index {self.index!r} out of bounds [0, {self.size})"


@attrs.s(auto_attribs=True)
class StructRangeError(StructException, IndexError):
    """
    An inclusive ``[left, right]`` window is empty or not contained in the structure.
    """
    left: object = attrs.ib(kw_only=True)
    right: object = attrs.ib(kw_only=True)
    size: int = attrs.ib(kw_only=True)
    desrc: None = attrs.ib(init=False, default=None)

    def msg(self) -> str:
        return f"Invalid range [{self.left!r}, {self.right!r}] for size {self.size}"


@attrs.s(auto_attribs=True)
class StructTypeError(StructException, TypeError):
    """
    A key or value has an unexpected type.
    """
    value: object = attrs.ib(kw_only=True)
    expected: str = attrs.ib(kw_only=True)
    desrc: None = attrs.ib(init=False, default=None)

    def msg(self) -> str:
        return f"Expected {self.expected}, got: {type(self.value).__name__}"
