"""
Inline documents, usually a ``<script>`` or ``<style>`` tag in an HTML document.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

import attr as attrs

from .location import LocationOffset
from .model import Document, Feature, Warning

@attrs.s(auto_attribs=True, frozen=True, kw_only=True)
class InlineDocumentDescriptor:
    """
    Describes an embedded document found inside a container document by a scanner.
    """
    type: str
    """
    The kind of document: 'html', 'javascript', 'css', etc.
    """
    contents: str
    location_offset: LocationOffset
    """
    The location offset of this document within the containing document.
    """
    position: int
    """
    Source offset of the node in the containing document.
    """
    node: object = attrs.ib(default=None, eq=False, repr=False)
    """
    The syntax node this descriptor was extracted from. It's only
    kept as an opaque handle and never traversed.
    """

def sort_descriptors(descriptors: Iterable[InlineDocumentDescriptor]) -> List[InlineDocumentDescriptor]:
    """
    Order descriptors created by different scanners the way they appear in the container.
    """
    return sorted(descriptors, key=lambda d: d.position)

def inline_document(container_url: str,
                    descriptor: InlineDocumentDescriptor,
                    features: Iterable[Feature] = (),
                    warnings: Iterable[Warning] = ()) -> Document:
    """
    Create the document of an inline descriptor. The warnings are expressed in the
    coordinates of the inline document and get relocated into the container's.
    """
    offset: Optional[LocationOffset] = descriptor.location_offset
    if offset is not None and offset.filename is None:
        offset = attrs.evolve(offset, filename=container_url)
    return Document(container_url, features,
                    (w.relocated(offset) for w in warnings),
                    type=descriptor.type,
                    is_inline=True,
                    location_offset=offset,
                    contents=descriptor.contents)
