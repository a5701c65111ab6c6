from io import StringIO
from unittest import TestCase

import attr as attrs

from webstatic import (Document, Feature, Import, Project, SourcePosition,
                       SourceRange, StaticValueError, Warning)

class TestProject(TestCase):

    def test_duplicate_url(self):
        proj = Project()
        proj.add_document(Document('index.html'))
        with self.assertRaises(StaticValueError):
            proj.add_document(Document('index.html'))
        with self.assertRaises(StaticValueError) as ctx:
            proj.add_warning('index.html', Warning(code='parse-error', message='Unexpected token'))
        assert "duplicate url 'index.html'" in str(ctx.exception)

    def test_resolve_imports(self):
        proj = Project()
        imp = Import('my-el.html')
        proj.add_document(Document('index.html', [imp]))
        my_el = proj.add_document(Document('my-el.html', [Feature('element', 'my-el')]))
        assert imp.document is None

        result = proj.analyze_project()
        assert imp.document is my_el
        assert proj.result is result
        assert result.get_document('my-el.html') is my_el

    def test_already_resolved_imports_are_kept(self):
        elsewhere = Document('my-el.html')
        imp = Import('my-el.html', document=elsewhere)
        proj = Project()
        proj.add_document(Document('index.html', [imp]))
        proj.add_document(Document('my-el.html'))
        proj.analyze_project()
        assert imp.document is elsewhere

    def test_imports_of_warnings_are_not_resolved(self):
        proj = Project()
        imp = Import('broken.html')
        proj.add_document(Document('index.html', [imp]))
        proj.add_warning('broken.html', Warning(code='parse-error', message='Unexpected token'))
        result = proj.analyze_project()
        assert imp.document is None
        assert len(result.get_warnings()) == 1

    def test_resolve_imports_option(self):
        proj = Project(resolve_imports=False)
        imp = Import('my-el.html')
        proj.add_document(Document('index.html', [imp]))
        proj.add_document(Document('my-el.html'))
        result = proj.analyze_project()
        assert imp.document is None
        assert len(result.search_roots) == 2

    def test_options_are_frozen(self):
        proj = Project(verbosity=1)
        with self.assertRaises(attrs.exceptions.FrozenInstanceError):
            proj.options.verbosity = 2 # type: ignore

class TestMsg(TestCase):

    def test_unresolved_import_reported(self):
        out = StringIO()
        proj = Project(verbosity=1, outstream=out)
        proj.add_document(Document('index.html', [
            Import('missing.html', source_range=SourceRange(
                'index.html', SourcePosition(1, 2), SourcePosition(1, 40)))]))
        proj.analyze_project()

        lines = out.getvalue().splitlines()
        assert lines[0] == "index.html:1:2: could not resolve import 'missing.html'"
        assert lines[1].startswith('analysis took ')
        assert len(lines) == 2

    def test_silent_by_default(self):
        out = StringIO()
        proj = Project(outstream=out)
        proj.add_document(Document('index.html', [Import('missing.html')]))
        proj.analyze_project()
        assert out.getvalue() == ''

    def test_verbose(self):
        out = StringIO()
        proj = Project(verbosity=2, outstream=out)
        doc = proj.add_document(Document('index.html'))
        proj.analyze_project()
        proj.msg('hello', ctx=doc)
        lines = out.getvalue().splitlines()
        assert lines[0].startswith('found 1 search roots among 1 documents in ')
        assert lines[-1] == 'index.html: hello'
