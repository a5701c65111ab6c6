"""
Static analysis core for web projects: HTML documents embedding scripts and styles,
JavaScript modules and custom-element definitions.

Goals and non-goals
===================

The main goal of this project is to provide a simple framework to query the semantic model
of a collection of related documents: "all elements", "the mixin named X", "every warning".
Parsing the documents and scanning them for features is left to other tools,
webstatic only receives the results.

Trade-offs
----------

- No incremental re-analysis: a new `AnalysisResult` should be created from a new set of
  documents when something changes.
- No caching on the disk.
- Imports are only resolved by exact url.

The model
=========

Each file is represented by a `Document`, which holds the `Feature` instances found
in it (elements, mixins, methods, events, etc) and its `Warning` instances.
Documents are linked to each other by `Import` features, forming a directed graph
that can have cycles. Inline documents (i.e ``<script>`` tags) are features of the document
that contains them, their warnings are expressed in the coordinates of the container,
see `correct_source_location`.

Files that could not be scanned are represented by a `Warning` instead of a `Document`.

How to use the library
======================

- First, create a `Project` instance
- Then add the scanned documents with `Project.add_document`, and the scan failures with `Project.add_warning`
- Call `Project.analyze_project()`, it returns an `AnalysisResult`
- Query the `AnalysisResult`

Keep in mind that all documents should be added **before** calling ``analyze_project()``.
Queries over the whole project follow every import exactly once, even in the presence of cycles.
"""

from ._analyzer.project import Project, Options
from ._analyzer.result import AnalysisResult
from ._lib.model import (Feature, Import, Document, Warning, Severity,
                         DocumentEntry, WarningEntry)
from ._lib.location import (SourcePosition, SourceRange, SourceLocation, LocationOffset,
                            correct_source_location, correct_source_range, correct_position)
from ._lib.inline import InlineDocumentDescriptor, sort_descriptors, inline_document
from ._lib.privacy import get_or_infer_privacy, CONFIGURATION_PROPERTIES
from ._lib.shared import is_external
from ._lib.exceptions import *

__all__ = (

    "Project",
    "Options",
    "AnalysisResult",

    "Feature",
    "Import",
    "Document",
    "Warning",
    "Severity",
    "DocumentEntry",
    "WarningEntry",

    "SourcePosition",
    "SourceRange",
    "SourceLocation",
    "LocationOffset",
    "correct_source_location",
    "correct_source_range",
    "correct_position",

    "InlineDocumentDescriptor",
    "sort_descriptors",
    "inline_document",

    "get_or_infer_privacy",
    "CONFIGURATION_PROPERTIES",
    "is_external",

    "StaticException",
    "StaticMultipleResults",
    "StaticValueError",
)
