"""Compose and decompose repository location suffixes.

A suffix names a location inside a versioned package repository::

    /<ErtsVsn>/<Area>[/<Side>]/<PackageName>/<PackageVsn>/<File>

Builders in :mod:`repo_paths.builder` produce suffixes; the parser in
:mod:`repo_paths.parser` recovers typed segments from them.
"""

from __future__ import annotations

import importlib.metadata

try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("repo-paths")
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

from .errors import ErrorReason, SuffixError
from .builder import (
    area_suffix,
    dot_app_file_suffix,
    dot_rel_file_suffix,
    erts_package_suffix,
    erts_suffix,
    package_file_suffix,
    package_name_suffix,
    package_suffix,
    package_vsn_suffix,
    side_suffix,
)
from .grammar import (
    Grammar,
    Segment,
    SegmentKind,
    SuffixComponents,
    compose_suffix,
    default_grammar,
)
from .parser import (
    Decomposition,
    SuffixParser,
    decompose_suffix,
    parse_components,
    parse_suffix,
)
from .exit_monitor import ExitMonitor, ExitStats

__all__ = [
    "Decomposition",
    "ErrorReason",
    "ExitMonitor",
    "ExitStats",
    "Grammar",
    "Segment",
    "SegmentKind",
    "SuffixComponents",
    "SuffixError",
    "SuffixParser",
    "area_suffix",
    "compose_suffix",
    "decompose_suffix",
    "default_grammar",
    "dot_app_file_suffix",
    "dot_rel_file_suffix",
    "erts_package_suffix",
    "erts_suffix",
    "package_file_suffix",
    "package_name_suffix",
    "package_suffix",
    "package_vsn_suffix",
    "parse_components",
    "parse_suffix",
    "side_suffix",
    "__version__",
]
