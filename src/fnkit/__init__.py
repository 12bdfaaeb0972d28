"""
fnkit - small pure helpers for plain data.

Immutable structural updates (set, merge, pick, omit), type predicates,
a Result type, list helpers and function composition.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("fnkit")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from fnkit.composition import compose_l, compose_r, s  # noqa: E402
from fnkit.errors import (  # noqa: E402
    ConfigFileError,
    FnkitError,
    InvalidIntermediateError,
    InvalidPathError,
    InvalidSegmentError,
)
from fnkit.predicates import (  # noqa: E402
    Predicate,
    Transform,
    is_all_of,
    is_any_of,
    is_array,
    is_boolean,
    is_function,
    is_null,
    is_number,
    is_object,
    is_string,
)
from fnkit.result import Err, Ok, Result  # noqa: E402
from fnkit.sequences import partition, zip_pairs  # noqa: E402
from fnkit.structural import get, merge, omit, parse_path, pick, set  # noqa: E402

zip = zip_pairs

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigFileError",
    "Err",
    "FnkitError",
    "InvalidIntermediateError",
    "InvalidPathError",
    "InvalidSegmentError",
    "Ok",
    "Predicate",
    "Result",
    "Transform",
    "compose_l",
    "compose_r",
    "get",
    "is_all_of",
    "is_any_of",
    "is_array",
    "is_boolean",
    "is_function",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "merge",
    "omit",
    "parse_path",
    "partition",
    "pick",
    "s",
    "set",
    "zip",
    "zip_pairs",
]
