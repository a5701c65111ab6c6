from __future__ import annotations

import abc
import attr as attrs
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .location import SourceRange

@attrs.s(auto_attribs=True)
class StaticException(Exception, abc.ABC):
    """
    Base exception for the library.
    """

    thing: object
    desrc: Optional[str] = None
    filename: Optional[str] = attrs.ib(kw_only=True, default=None)

    def location(self) -> 'str|None':
        source_range: 'SourceRange|None' = getattr(self.thing, 'source_range', None)
        if source_range is not None:
            return str(source_range)
        if self.filename:
            return f"{self.filename}:?"
        return None

    @abc.abstractmethod
    def msg(self) -> str:
        ...

    def __str__(self) -> str:
        location = self.location()
        if location is None:
            return self.msg()
        return f'{location}: {self.msg()}'


@attrs.s
class StaticMultipleResults(StaticException):
    """
    More than one feature matched a query that expects at most one.
    """
    kind: str = attrs.ib(kw_only=True)
    identifier: str = attrs.ib(kw_only=True)
    count: int = attrs.ib(kw_only=True)
    desrc: None = attrs.ib(init=False, default=None)

    def msg(self) -> str:
        return (f"Expected to find at most one {self.kind} with id {self.identifier} "
                f"but found {self.count}.")


class StaticValueError(StaticException):
    """
    The project or a query was given inconsistent values.
    """

    def msg(self) -> str:
        return f"Error, {self.desrc}"
