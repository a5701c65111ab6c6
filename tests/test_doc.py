import doctest
import unittest

import webstatic
from webstatic._analyzer import project
from webstatic._lib import location, privacy, shared

class TestDoctest(unittest.TestCase):
    def test_lib_doctests(self):
        for mod in (webstatic, project, location, privacy, shared):
            failed, _ = doctest.testmod(mod, optionflags=doctest.ELLIPSIS|doctest.IGNORE_EXCEPTION_DETAIL)
            self.assertEqual(failed, 0, mod.__name__)
