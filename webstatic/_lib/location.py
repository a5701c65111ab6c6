"""
Source coordinates, and the mapping of coordinates of an embedded document
into the coordinate space of the document that contains it.

All coordinates are zero based. An embedded document starts at
its `LocationOffset` inside the container: only its first line shares a
physical line with the container, so the column offset only applies there.

>>> correct_source_location(SourceLocation(line=0, column=5), LocationOffset(line=10, col=3))
SourceLocation(line=10, column=8, file=None)
>>> correct_source_location(SourceLocation(line=2, column=5), LocationOffset(line=10, col=3))
SourceLocation(line=12, column=5, file=None)
"""
from __future__ import annotations

from typing import Optional, overload

import attr as attrs

@attrs.s(auto_attribs=True, frozen=True)
class SourcePosition:
    line: int
    column: int

    def __str__(self) -> str:
        return f'{self.line}:{self.column}'

@attrs.s(auto_attribs=True, frozen=True)
class SourceRange:
    file: str
    start: SourcePosition
    end: SourcePosition

    def __str__(self) -> str:
        return f'{self.file}:{self.start}'

@attrs.s(auto_attribs=True, frozen=True)
class SourceLocation:
    """
    A single point in a source file, the file might not be known.
    """
    line: int
    column: int
    file: Optional[str] = None

@attrs.s(auto_attribs=True, frozen=True, kw_only=True)
class LocationOffset:
    """
    Where the origin (line 0, column 0) of an embedded document
    sits inside its container.
    """
    line: int = attrs.ib(validator=attrs.validators.ge(0))
    col: int = attrs.ib(validator=attrs.validators.ge(0))
    filename: Optional[str] = None
    """
    The url of the source file.
    """

def correct_position(position: SourcePosition,
                     location_offset: LocationOffset) -> SourcePosition:
    return SourcePosition(
        line=position.line + location_offset.line,
        column=position.column + (location_offset.col if position.line == 0 else 0))

@overload
def correct_source_location(source_location: SourceLocation,
                            location_offset: Optional[LocationOffset]) -> SourceLocation:
    ...
@overload
def correct_source_location(source_location: None,
                            location_offset: Optional[LocationOffset]) -> None:
    ...
def correct_source_location(source_location: Optional[SourceLocation],
                            location_offset: Optional[LocationOffset] = None) -> Optional[SourceLocation]:
    """
    Express a location inside an embedded document in the coordinates of its container.
    The location is returned unchanged if either argument is missing.
    """
    if not location_offset or not source_location:
        return source_location
    position = correct_position(
        SourcePosition(source_location.line, source_location.column), location_offset)
    file = None
    if location_offset.filename is not None or source_location.file is not None:
        file = location_offset.filename or source_location.file
    return SourceLocation(line=position.line, column=position.column, file=file)

@overload
def correct_source_range(source_range: SourceRange,
                         location_offset: Optional[LocationOffset]) -> SourceRange:
    ...
@overload
def correct_source_range(source_range: None,
                         location_offset: Optional[LocationOffset]) -> None:
    ...
def correct_source_range(source_range: Optional[SourceRange],
                         location_offset: Optional[LocationOffset] = None) -> Optional[SourceRange]:
    """
    Like `correct_source_location` but for ranges.
    """
    if not location_offset or not source_range:
        return source_range
    return SourceRange(
        file=location_offset.filename or source_range.file,
        start=correct_position(source_range.start, location_offset),
        end=correct_position(source_range.end, location_offset))
