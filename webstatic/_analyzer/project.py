"""
Project-wide objects.
"""
from __future__ import annotations

import sys
import time
from typing import Any, Dict, Optional, TextIO

import attr as attrs

from .._lib.exceptions import StaticValueError
from .._lib.model import Document, DocumentEntry, Entry, Feature, Import, Warning, WarningEntry
from .result import AnalysisResult

@attrs.s(auto_attribs=True, frozen=True, kw_only=True)
class Options:
    outstream: TextIO = sys.stdout
    verbosity: int = 0
    resolve_imports: bool = True

class Project:
    """
    A project is a high-level class to analyze a collection of documents together.

    Project instanciation example:

    >>> p = Project(verbosity=0)
    >>> index = p.add_document(Document('index.html', [Import('my-el.html')]))
    >>> my_el = p.add_document(Document('my-el.html', [Feature('element', 'my-el')]))
    >>> result = p.analyze_project()
    >>> result.get_only_at_id('element', 'my-el')
    <Feature(kind=element, id=my-el)>
    >>> result.search_roots
    (<Document(url=index.html, type=html)>,)

    :see: `AnalysisResult`
    """

    def __init__(self, **kw: Any) -> None:
        """
        Create a new project.

        :param kw: All parameters are passed to `Options` constructor.
        """
        self.options = Options(**kw)
        self._results: Dict[str, Entry] = {}
        self.result: Optional[AnalysisResult] = None

    def _add_entry(self, url: str, entry: Entry) -> None:
        if url in self._results:
            raise StaticValueError(entry.value, f"duplicate url {url!r}")
        self._results[url] = entry

    def add_document(self, document: Document) -> Document:
        """
        Add a scanned document to the project, all documents should be added before calling `analyze_project`.

        :raises StaticValueError: If the url is already in the project.
        """
        self._add_entry(document.url, DocumentEntry(document))
        return document

    def add_warning(self, url: str, warning: Warning) -> Warning:
        """
        Register the warning explaining why the file at the given url
        could not be scanned into a document.

        :raises StaticValueError: If the url is already in the project.
        """
        self._add_entry(url, WarningEntry(warning))
        return warning

    def _resolve_imports(self) -> None:
        for entry in tuple(self._results.values()):
            if not entry.is_document:
                continue
            for imprt in entry.document.get_by_kind('import'):
                if not isinstance(imprt, Import) or imprt.document is not None:
                    continue
                target = self._results.get(imprt.url)
                if target is not None and target.is_document:
                    imprt.document = target.document
                else:
                    self.msg(f"could not resolve import {imprt.url!r}", ctx=imprt, thresh=1)

    def analyze_project(self) -> AnalysisResult:
        """
        Put the project in it's final, analyzed state.
        """
        t0 = time.time()
        if self.options.resolve_imports:
            self._resolve_imports()
        self.result = AnalysisResult(self._results, msg=self.msg)
        t1 = time.time()
        self.msg(f"analysis took {t1-t0} seconds", thresh=1)
        return self.result

    def msg(self, msg: str, ctx: Optional[object] = None, thresh: int = 0) -> None:
        """
        Log a message about this feature or warning.
        """
        if self.options.verbosity < thresh:
            return
        context = ""
        source_range = getattr(ctx, 'source_range', None)
        if source_range is not None:
            context = f"{source_range.file}:{source_range.start.line}:{source_range.start.column}: "
        elif isinstance(ctx, Document):
            context = f"{ctx.url}: "

        print(f"{context}{msg}", file=self.options.outstream)
