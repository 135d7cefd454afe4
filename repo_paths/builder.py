"""Compose repository suffixes from their components.

Example suffix breakdown::

    /5.5.5/Generic/lib/mnesia/2.3
    ErtsVsn/Area/Side/PackageName/PackageVsn

    /5.5.5/Generic/lib/mnesia/2.3/mnesia.tar.gz
    /5.5.5/Meta/sinan/1.0/sinan.rel
    ErtsVsn/Area/Side/PackageName/PackageVsn/File

Each function builds one level deeper than the one it delegates to. The
functions only join; validating the components is the caller's job (see
:class:`repo_paths.grammar.SuffixComponents`). The one exception is the side,
which must be ``lib`` or ``releases`` unless a custom ``sides`` vocabulary
is passed along with ``meta_area`` (see :meth:`Grammar.layout`).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

SEPARATOR = "/"
META_AREA = "Meta"
LIB_SIDE = "lib"
RELEASES_SIDE = "releases"
SIDES = (LIB_SIDE, RELEASES_SIDE)

PACKAGE_EXTENSION = "tar.gz"
ERTS_PACKAGE_FILE = "erts.tar.gz"
DOT_APP_EXTENSION = "app"
DOT_REL_EXTENSION = "rel"


def join_paths(base: str, *parts: str) -> str:
    """Join ``parts`` onto ``base`` with exactly one separator between each."""
    path = base.rstrip(SEPARATOR)
    for part in parts:
        part = part.strip(SEPARATOR)
        if part:
            path = f"{path}{SEPARATOR}{part}"
    return path


# Directory level suffixes ----------------------------------------------------


def erts_suffix(erts_vsn: str) -> str:
    return SEPARATOR + erts_vsn.strip(SEPARATOR)


def area_suffix(erts_vsn: str, area: str) -> str:
    return join_paths(erts_suffix(erts_vsn), area)


def side_suffix(
    erts_vsn: str,
    area: str,
    side: str,
    *,
    meta_area: str = META_AREA,
    sides: Sequence[str] = SIDES,
) -> str:
    """Return the suffix for a side; the Meta area has no side level.

    ``meta_area`` and ``sides`` default to the packaged grammar; pass a
    custom grammar's values to compose suffixes it can decompose.
    """
    if side not in sides:
        raise ValueError(f"side must be one of {list(sides)}, got '{side}'")
    if area == meta_area:
        return area_suffix(erts_vsn, area)
    return join_paths(area_suffix(erts_vsn, area), side)


def package_name_suffix(
    erts_vsn: str, area: str, side: str, package_name: str, **layout: Any
) -> str:
    return join_paths(side_suffix(erts_vsn, area, side, **layout), package_name)


def package_vsn_suffix(
    erts_vsn: str,
    area: str,
    side: str,
    package_name: str,
    package_vsn: str,
    **layout: Any,
) -> str:
    return join_paths(
        package_name_suffix(erts_vsn, area, side, package_name, **layout), package_vsn
    )


# File level suffixes ---------------------------------------------------------


def package_file_suffix(
    erts_vsn: str,
    area: str,
    side: str,
    package_name: str,
    package_vsn: str,
    file_name: str,
    **layout: Any,
) -> str:
    return join_paths(
        package_vsn_suffix(erts_vsn, area, side, package_name, package_vsn, **layout),
        file_name,
    )


def package_suffix(
    erts_vsn: str, area: str, side: str, package_name: str, package_vsn: str
) -> str:
    """Return the suffix of the package tarball for a name and version."""
    return package_file_suffix(
        erts_vsn,
        area,
        side,
        package_name,
        package_vsn,
        f"{package_name}.{PACKAGE_EXTENSION}",
    )


def erts_package_suffix(erts_vsn: str, area: str) -> str:
    """Return the suffix of the runtime tarball for an area."""
    return join_paths(area_suffix(erts_vsn, area), ERTS_PACKAGE_FILE)


def dot_app_file_suffix(erts_vsn: str, app_name: str, app_vsn: str) -> str:
    """Return the suffix of the ``.app`` file stored for an application."""
    return package_file_suffix(
        erts_vsn, META_AREA, LIB_SIDE, app_name, app_vsn, f"{app_name}.{DOT_APP_EXTENSION}"
    )


def dot_rel_file_suffix(erts_vsn: str, release_name: str, release_vsn: str) -> str:
    """Return the suffix of the ``.rel`` file stored for a release."""
    return package_file_suffix(
        erts_vsn,
        META_AREA,
        RELEASES_SIDE,
        release_name,
        release_vsn,
        f"{release_name}.{DOT_REL_EXTENSION}",
    )


__all__ = [
    "join_paths",
    "erts_suffix",
    "area_suffix",
    "side_suffix",
    "package_name_suffix",
    "package_vsn_suffix",
    "package_file_suffix",
    "package_suffix",
    "erts_package_suffix",
    "dot_app_file_suffix",
    "dot_rel_file_suffix",
]
