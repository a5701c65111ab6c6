import pytest

from webstatic import (InlineDocumentDescriptor, LocationOffset, SourceLocation,
                       SourcePosition, SourceRange, Warning, correct_source_location,
                       correct_source_range, inline_document, sort_descriptors)


def test_first_line_gets_column_offset() -> None:
    assert correct_source_location(SourceLocation(line=0, column=5),
                                   LocationOffset(line=10, col=3)) == SourceLocation(line=10, column=8)


def test_later_lines_do_not_get_column_offset() -> None:
    assert correct_source_location(SourceLocation(line=2, column=5),
                                   LocationOffset(line=10, col=3)) == SourceLocation(line=12, column=5)


def test_no_offset_pass_through() -> None:
    loc = SourceLocation(line=2, column=5)
    assert correct_source_location(loc, None) is loc
    assert correct_source_location(loc, None).file is None
    assert correct_source_location(None, LocationOffset(line=1, col=1)) is None


def test_filename() -> None:
    offset = LocationOffset(line=1, col=0, filename='index.html')
    assert correct_source_location(SourceLocation(0, 0), offset).file == 'index.html'
    assert correct_source_location(SourceLocation(0, 0, 'script.js'), offset).file == 'index.html'
    assert correct_source_location(SourceLocation(0, 0, 'script.js'),
                                   LocationOffset(line=1, col=0)).file == 'script.js'
    assert correct_source_location(SourceLocation(0, 0),
                                   LocationOffset(line=1, col=0)).file is None


def test_negative_offset() -> None:
    with pytest.raises(ValueError):
        LocationOffset(line=-1, col=0)


def test_correct_source_range() -> None:
    source_range = SourceRange('script.js', SourcePosition(0, 4), SourcePosition(1, 2))
    offset = LocationOffset(line=5, col=10, filename='index.html')
    assert correct_source_range(source_range, offset) == SourceRange(
        'index.html', SourcePosition(5, 14), SourcePosition(6, 2))
    assert correct_source_range(source_range, None) is source_range


def test_sort_descriptors() -> None:
    style = InlineDocumentDescriptor(type='css', contents='', position=120,
                                     location_offset=LocationOffset(line=8, col=9))
    script = InlineDocumentDescriptor(type='javascript', contents='', position=40,
                                      location_offset=LocationOffset(line=2, col=10))
    assert sort_descriptors([style, script]) == [script, style]


def test_descriptor_node_is_opaque() -> None:
    offset = LocationOffset(line=2, col=10)
    d1 = InlineDocumentDescriptor(type='javascript', contents='x', position=40,
                                  location_offset=offset, node=object())
    d2 = InlineDocumentDescriptor(type='javascript', contents='x', position=40,
                                  location_offset=offset, node=object())
    assert d1 == d2
    assert 'node' not in repr(d1)


def test_inline_document_warnings_are_relocated() -> None:
    warning = Warning(code='parse-error', message='Unexpected token',
                      source_range=SourceRange('', SourcePosition(0, 3), SourcePosition(0, 4)))
    descriptor = InlineDocumentDescriptor(type='javascript', contents='x = ;',
                                          location_offset=LocationOffset(line=7, col=12),
                                          position=100)
    doc = inline_document('index.html', descriptor, warnings=[warning])

    relocated, = doc.warnings
    assert relocated is not warning
    assert relocated.document is doc
    assert relocated.source_range == SourceRange(
        'index.html', SourcePosition(7, 15), SourcePosition(7, 16))
    assert str(relocated) == 'index.html:7:15: warning: Unexpected token [parse-error]'
    assert doc.location_offset == LocationOffset(line=7, col=12, filename='index.html')
    assert doc.contents == 'x = ;'


def test_warning_without_range_is_not_relocated() -> None:
    warning = Warning(code='parse-error', message='Unexpected token')
    assert warning.relocated(LocationOffset(line=7, col=12)) is warning
    assert str(warning) == '?: warning: Unexpected token [parse-error]'
