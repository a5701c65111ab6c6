"""
This module contains the feature models, used to represent the documents of a project
and what the scanners found in them.
"""
from __future__ import annotations

import enum
from typing import (
    ClassVar,
    Collection,
    Dict,
    Iterable,
    Iterator,
    List,
    MutableSet,
    Optional,
    Sequence,
    Set,
    Tuple,
    Union,
)

import attr as attrs
from beniget.beniget import ordered_set # type: ignore

from .exceptions import StaticMultipleResults
from .location import LocationOffset, SourceRange, correct_source_range
from .shared import add_all, is_external

class Severity(enum.IntEnum):
    ERROR = 0
    WARNING = 1
    INFO = 2

@attrs.s(auto_attribs=True, frozen=True, eq=False, kw_only=True)
class Warning:
    """
    A diagnostic about a document.

    Warnings are compared by identity: two warnings with the same
    content raised twice are two different warnings.
    """
    code: str
    message: str
    severity: Severity = Severity.WARNING
    source_range: Optional[SourceRange] = None
    document: Optional[Document] = attrs.ib(default=None, repr=False)
    """
    The document this warning was raised against, if any.
    Warnings about a file that could not be scanned have no document.
    """

    def relocated(self, location_offset: Optional[LocationOffset]) -> 'Warning':
        """
        Returns a copy of this warning with a source range expressed in the
        coordinates of the container of the document it was raised against.
        """
        if not location_offset or not self.source_range:
            return self
        return attrs.evolve(self, source_range=correct_source_range(
            self.source_range, location_offset))

    def __str__(self) -> str:
        location = str(self.source_range) if self.source_range else '?'
        return f'{location}: {self.severity.name.lower()}: {self.message} [{self.code}]'

# TODO: Scanners should be able to give several kinds to a feature,
# i.e an element is also a class.
class Feature:
    """
    Model a fact extracted from a document: an element, a mixin, an import, etc.
    """
    __slots__ = 'kind', 'identifier', 'source_range', 'warnings'

    def __init__(self,
                 kind: str,
                 identifier: Optional[str] = None,
                 source_range: Optional[SourceRange] = None,
                 warnings: Iterable[Warning] = ()) -> None:
        self.kind = kind
        self.identifier = identifier
        self.source_range = source_range
        self.warnings: Sequence[Warning] = tuple(warnings)

    def __repr__(self) -> str:
        clsname = self.__class__.__qualname__
        if self.identifier:
            return f"<{clsname}(kind={self.kind}, id={self.identifier})>"
        return f"<{clsname}(kind={self.kind})>"

class Import(Feature):
    """
    Model an import edge from the document that owns this feature to
    the document at `url`.
    """
    __slots__ = 'url', 'type', 'document'

    LAZY = 'lazy-html-import'

    def __init__(self,
                 url: str,
                 type: str = 'html-import',
                 document: Optional[Document] = None,
                 source_range: Optional[SourceRange] = None,
                 warnings: Iterable[Warning] = ()) -> None:
        super().__init__('import', url, source_range, warnings)
        self.url = url
        self.type = type
        self.document = document
        """
        The imported document, None if the import could not be resolved.
        """

    @property
    def is_lazy(self) -> bool:
        return self.type == Import.LAZY

class Document(Feature):
    """
    A document is the container of what was found in one file (or in one inline
    ``<script>`` or ``<style>`` block), it's also a feature of the document that
    contains it when it's an inline document.

    Documents are linked to each other with `Import` features.
    """
    __slots__ = 'url', 'type', 'is_inline', 'location_offset', 'contents', \
                '_local_features', '_by_kind', '_by_id'

    def __init__(self,
                 url: str,
                 features: Iterable[Feature] = (),
                 warnings: Iterable[Warning] = (), *,
                 type: str = 'html',
                 is_inline: bool = False,
                 location_offset: Optional[LocationOffset] = None,
                 contents: Optional[str] = None,
                 source_range: Optional[SourceRange] = None) -> None:
        super().__init__('document', url, source_range, warnings)
        self.url = url
        self.type = type
        self.is_inline = is_inline
        self.location_offset = location_offset
        self.contents = contents
        # warnings are created before their document, bind them now.
        self.warnings = tuple(w if w.document is not None else attrs.evolve(w, document=self)
                              for w in self.warnings)

        self._local_features: Sequence[Feature] = tuple(dict.fromkeys(features))
        self._by_kind: Dict[str, List[Feature]] = {}
        self._by_id: Dict[Tuple[str, str], List[Feature]] = {}
        for f in self._local_features:
            self._by_kind.setdefault(f.kind, []).append(f)
            if f.identifier is not None:
                self._by_id.setdefault((f.kind, f.identifier), []).append(f)

    def __repr__(self) -> str:
        clsname = self.__class__.__qualname__
        if self.is_inline:
            return f"<{clsname}(url={self.url}, type={self.type}, inline)>"
        return f"<{clsname}(url={self.url}, type={self.type})>"

    def local_features(self) -> Sequence[Feature]:
        """
        The features found in this document only.
        """
        return self._local_features

    def walk_documents(self, *,
                       imported: bool = False,
                       external_packages: bool = False,
                       no_lazy_imports: bool = False) -> Iterator[Document]:
        """
        Iterate over this document, its inline documents and, if ``imported`` is true,
        over the documents transitively imported. Each document is yielded only once
        even if it can be reached in several ways.
        """
        visited: Set[Document] = {self}
        stack: List[Document] = [self]
        while stack:
            doc = stack.pop()
            yield doc
            successors: List[Document] = []
            for f in doc._local_features:
                if isinstance(f, Document):
                    successors.append(f)
                elif imported and isinstance(f, Import) and \
                        _follows(f, external_packages, no_lazy_imports):
                    assert f.document is not None
                    successors.append(f.document)
            # reversed so documents are yielded in the order they're encountered.
            for succ in reversed(successors):
                if succ not in visited:
                    visited.add(succ)
                    stack.append(succ)

    def get_features(self, *,
                     imported: bool = False,
                     external_packages: bool = False,
                     no_lazy_imports: bool = False) -> Collection[Feature]:
        """
        Get all features of this document and its inline documents,
        as well as the features of imported documents if ``imported`` is true.
        """
        result: MutableSet[Feature] = ordered_set()
        for doc in self.walk_documents(imported=imported,
                                       external_packages=external_packages,
                                       no_lazy_imports=no_lazy_imports):
            add_all(result, doc._local_features)
        return result

    def get_by_kind(self, kind: str, *,
                    imported: bool = False,
                    external_packages: bool = False,
                    no_lazy_imports: bool = False) -> Collection[Feature]:
        """
        Get all features of the given kind.
        """
        result: MutableSet[Feature] = ordered_set()
        for doc in self.walk_documents(imported=imported,
                                       external_packages=external_packages,
                                       no_lazy_imports=no_lazy_imports):
            add_all(result, doc._by_kind.get(kind, ()))
        return result

    def get_by_id(self, kind: str, identifier: str, *,
                  imported: bool = False,
                  external_packages: bool = False,
                  no_lazy_imports: bool = False) -> Collection[Feature]:
        """
        Get all features of the given kind with the given identifier.
        """
        result: MutableSet[Feature] = ordered_set()
        for doc in self.walk_documents(imported=imported,
                                       external_packages=external_packages,
                                       no_lazy_imports=no_lazy_imports):
            add_all(result, doc._by_id.get((kind, identifier), ()))
        return result

    def get_only_at_id(self, kind: str, identifier: str, *,
                       imported: bool = False,
                       external_packages: bool = False,
                       no_lazy_imports: bool = False) -> Optional[Feature]:
        """
        Get the only feature of the given kind with the given identifier,
        None if there is no such feature.

        :raises StaticMultipleResults: If there is more than one matching feature.
        """
        return only_result(self.get_by_id(kind, identifier, imported=imported,
                                          external_packages=external_packages,
                                          no_lazy_imports=no_lazy_imports),
                           kind, identifier)

    def get_warnings(self, *,
                     imported: bool = False,
                     external_packages: bool = False,
                     no_lazy_imports: bool = False) -> List[Warning]:
        """
        Get the warnings of this document, the ones of the traversed documents,
        and the ones carried by the features.
        """
        result: MutableSet[Warning] = ordered_set()
        for doc in self.walk_documents(imported=imported,
                                       external_packages=external_packages,
                                       no_lazy_imports=no_lazy_imports):
            add_all(result, doc.warnings)
            for f in doc._local_features:
                add_all(result, f.warnings)
        return list(result)

def _follows(imprt: Import, external_packages: bool, no_lazy_imports: bool) -> bool:
    if imprt.document is None:
        return False
    if not external_packages and is_external(imprt.document.url):
        return False
    if no_lazy_imports and imprt.is_lazy:
        return False
    return True

def only_result(results: Collection[Feature], kind: str, identifier: str) -> Optional[Feature]:
    if len(results) > 1:
        raise StaticMultipleResults(results, kind=kind, identifier=identifier,
                                    count=len(results))
    return next(iter(results), None)

@attrs.s(auto_attribs=True, frozen=True)
class DocumentEntry:
    """
    A URL that was successfully scanned into a document.
    """
    document: Document
    is_document: ClassVar[bool] = True

    @property
    def value(self) -> Union[Document, Warning]:
        return self.document

@attrs.s(auto_attribs=True, frozen=True)
class WarningEntry:
    """
    A URL that failed to produce a document.
    """
    warning: Warning
    is_document: ClassVar[bool] = False

    @property
    def value(self) -> Union[Document, Warning]:
        return self.warning

Entry = Union[DocumentEntry, WarningEntry]
