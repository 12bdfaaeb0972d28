"""
Immutable structural updates for plain records and sequences.

Example:
    >>> import fnkit.structural as structural
    >>> config = {"model": {"name": "llama", "size": "7b"}}
    >>> structural.set("model.size", config, "70b")
    {'model': {'name': 'llama', 'size': '70b'}}
    >>> structural.merge(config, {"model": {"context": 4096}})
    {'model': {'name': 'llama', 'size': '7b', 'context': 4096}}

None of these functions modify their arguments.
"""

from fnkit.structural._merge import merge
from fnkit.structural._paths import format_path, parse_path
from fnkit.structural._select import omit, pick
from fnkit.structural._types import MISSING, ContainerKind, Path, classify
from fnkit.structural._update import get_at, set_at

# Shadows the builtin set() inside this namespace only.
set = set_at
get = get_at

__all__ = [
    "MISSING",
    "ContainerKind",
    "Path",
    "classify",
    "format_path",
    "get",
    "get_at",
    "merge",
    "omit",
    "parse_path",
    "pick",
    "set",
    "set_at",
]
