"""ptreap: persistent (copy-on-write) treap with order statistics.

Quick Start
-----------
>>> from ptreap import Treap
>>>
>>> empty = Treap(seed=7)
>>> tree = empty.insert(3).insert(1).insert(2)
>>> str(tree), str(empty)
('1 2 3', '')
>>> tree.get_n(0)
1
>>> rest, smallest = tree.remove_n(0)
>>> str(rest), smallest
('2 3', 1)

Classes
-------
Treap : Immutable ordered container; every update returns a new version.
Ordering : Explicit comparison strategy (``less`` plus optional ``score``).
PrioritySource : Seedable stream of random heap priorities.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("ptreap")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .api import Treap, new
from .core import (
    LESS_ONLY,
    Ordering,
    PrioritySource,
    Scored,
    TreapNode,
    default_priority_source,
    reset_default_priority_source,
    resolve_ordering,
)

__all__ = [
    "__version__",
    "Treap",
    "new",
    "LESS_ONLY",
    "Ordering",
    "PrioritySource",
    "Scored",
    "TreapNode",
    "default_priority_source",
    "reset_default_priority_source",
    "resolve_ordering",
]
