from __future__ import annotations

import re
from typing import Iterable, MutableSet, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Protocol
else:
    Protocol = object

_T = TypeVar('_T')

# Directories named exactly ``build`` are matched, but any directory name
# prefixed by ``bower_components`` or ``node_modules`` is, in order to
# also match package manager variants like ``bower_components-foo``.
MATCHES_EXTERNAL = re.compile(r'(^|/)(bower_components|node_modules|build($|/))')

def is_external(path: str) -> bool:
    """
    Whether the given path points to code that is not part of the project itself.

    >>> is_external('node_modules/foo/bar.js')
    True
    >>> is_external('bower_components-extra/x.js')
    True
    >>> is_external('build/out.js')
    True
    >>> is_external('src/build-tools/x.js')
    False
    """
    return MATCHES_EXTERNAL.search(path) is not None

def add_all(set1: MutableSet[_T], set2: Iterable[_T]) -> MutableSet[_T]:
    for val in set2:
        set1.add(val)
    return set1

class _Msg(Protocol):
    def __call__(
        self, msg: str, ctx: Optional[object] = None, thresh: int = 0
    ) -> None:
        ...

def no_msg(msg: str, ctx: Optional[object] = None, thresh: int = 0) -> None:
    pass
