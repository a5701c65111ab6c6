from __future__ import annotations

from typing import FrozenSet, TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Literal, TypeAlias
    Privacy: TypeAlias = Literal['public', 'protected', 'private']

CONFIGURATION_PROPERTIES: FrozenSet[str] = frozenset((
    'attached',
    'attributeChanged',
    'beforeRegister',
    'configure',
    'constructor',
    'created',
    'detached',
    'enableCustomStyleProperties',
    'extends',
    'hostAttributes',
    'is',
    'listeners',
    'mixins',
    'observers',
    'properties',
    'ready',
    'registered',
))
"""
Properties on element prototypes that are part of the custom element lifecycle
or Polymer configuration syntax.
"""

def get_or_infer_privacy(name: str,
                         explicit: 'Privacy|None' = None,
                         default: 'Privacy' = 'public') -> 'Privacy':
    """
    Returns the explicit privacy if any (i.e from a ``@private`` tag),
    else infer it from the naming conventions.

    >>> get_or_infer_privacy('Polymer.Element._render')
    'protected'
    >>> get_or_infer_privacy('ready')
    'protected'
    >>> get_or_infer_privacy('_render', 'public')
    'public'
    """
    if explicit:
        return explicit
    specific_name = name[name.rfind('.') + 1:]
    if specific_name.startswith('__'):
        return 'private'
    elif specific_name.startswith('_'):
        return 'protected'
    elif specific_name.endswith('_'):
        return 'private'
    elif specific_name in CONFIGURATION_PROPERTIES:
        return 'protected'
    return default
