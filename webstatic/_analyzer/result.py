"""
Project-wide queries.
"""
from __future__ import annotations

import time
from typing import (
    Collection,
    Dict,
    Iterable,
    List,
    Mapping,
    MutableSet,
    Optional,
    Sequence,
    Union,
)

from beniget.beniget import ordered_set # type: ignore

from .._lib.model import Document, Entry, Feature, Warning, only_result
from .._lib.shared import _Msg, add_all, is_external, no_msg

def find_search_roots(documents: Iterable[Document]) -> Sequence[Document]:
    """
    Trim down the documents to a set of documents from which all the others can be
    reached by following imports. Querying all documents is then done with less duplicate work.

    Documents are considered in order, the ones already known to be imported by a
    previously considered document are skipped. When documents import each other in a cycle,
    the first one considered stays a root since an import of itself never removes it.
    """
    potential_roots: Dict[Document, None] = dict.fromkeys(documents)
    for doc in tuple(potential_roots):
        if doc not in potential_roots:
            continue
        for imprt in doc.get_by_kind('import', imported=True):
            target = getattr(imprt, 'document', None)
            if target is not None and target is not doc:
                potential_roots.pop(target, None)
    return tuple(potential_roots)

class AnalysisResult:
    """
    A queryable interface over all documents in a project.

    Results of queries include results from all documents in the project, as
    well as from external dependencies that are transitively imported by
    documents in the project.

    Queries always follow imports: passing ``imported=False`` is an error.
    """

    is_external = staticmethod(is_external)

    def __init__(self, results: Mapping[str, Entry],
                 msg: Optional[_Msg] = None) -> None:
        self.msg = msg or no_msg

        self._results = results
        """
        Mapping from urls to the document or the warning that it produced.
        """

        self._warnings: Sequence[Warning] = tuple(
            e.warning for e in results.values() if not e.is_document)
        """
        Warnings of the urls that could not be scanned.
        """

        documents = [e.document for e in results.values() if e.is_document]

        t0 = time.time()
        self._search_roots = find_search_roots(documents)
        t1 = time.time()
        self.msg(f"found {len(self._search_roots)} search roots "
                 f"among {len(documents)} documents in {t1-t0} seconds", thresh=2)

    @property
    def search_roots(self) -> Sequence[Document]:
        """
        The documents from which queries over the whole project start.
        """
        return self._search_roots

    def get_document(self, url: str) -> Union[Document, Warning, None]:
        """
        Returns the document at the given url, or the warning explaining
        why it could not be analyzed, or None if the url is not in the project.
        """
        entry = self._results.get(url)
        if entry is None:
            return None
        return entry.value

    def get_all_documents(self) -> Iterable[Document]:
        """
        Iterate over all documents that are directly part of the project.
        """
        return (e.document for e in self._results.values() if e.is_document)

    def _get_document_query_options(self, imported: bool,
                                    external_packages: bool,
                                    no_lazy_imports: bool) -> Dict[str, bool]:
        if imported is not True:
            raise ValueError('Illegal arguments: queries over the whole project always follow imports, '
                             'imported=False cannot be used')
        return dict(imported=True,
                    external_packages=external_packages,
                    no_lazy_imports=no_lazy_imports)

    def get_by_kind(self, kind: str, *,
                    imported: bool = True,
                    external_packages: bool = False,
                    no_lazy_imports: bool = False) -> Collection[Feature]:
        """
        Get all features of the given kind in the project.
        """
        result: MutableSet[Feature] = ordered_set()
        options = self._get_document_query_options(imported, external_packages, no_lazy_imports)
        for doc in self._search_roots:
            add_all(result, doc.get_by_kind(kind, **options))
        return result

    def get_by_id(self, kind: str, identifier: str, *,
                  imported: bool = True,
                  external_packages: bool = False,
                  no_lazy_imports: bool = False) -> Collection[Feature]:
        """
        Get all features of the given kind with the given identifier in the project.
        """
        result: MutableSet[Feature] = ordered_set()
        options = self._get_document_query_options(imported, external_packages, no_lazy_imports)
        for doc in self._search_roots:
            add_all(result, doc.get_by_id(kind, identifier, **options))
        return result

    def get_only_at_id(self, kind: str, identifier: str, *,
                       imported: bool = True,
                       external_packages: bool = False,
                       no_lazy_imports: bool = False) -> Optional[Feature]:
        """
        Get the feature of the given kind with the given identifier.
        Returns None if there is no such feature.

        :raises StaticMultipleResults: If more than one feature matches.
        """
        results = self.get_by_id(kind, identifier, imported=imported,
                                 external_packages=external_packages,
                                 no_lazy_imports=no_lazy_imports)
        return only_result(results, kind, identifier)

    def get_features(self, *,
                     imported: bool = True,
                     external_packages: bool = False,
                     no_lazy_imports: bool = False) -> Collection[Feature]:
        """
        Get all features for all documents in the project or their imports.
        """
        result: MutableSet[Feature] = ordered_set()
        options = self._get_document_query_options(imported, external_packages, no_lazy_imports)
        for doc in self._search_roots:
            add_all(result, doc.get_features(**options))
        return result

    def get_warnings(self, *,
                     imported: bool = True,
                     external_packages: bool = False,
                     no_lazy_imports: bool = False) -> List[Warning]:
        """
        Get all warnings in the project, including the ones about
        the files that could not be analyzed.
        """
        result: MutableSet[Warning] = ordered_set(self._warnings)
        options = self._get_document_query_options(imported, external_packages, no_lazy_imports)
        for doc in self._search_roots:
            add_all(result, doc.get_warnings(**options))
        return list(result)
