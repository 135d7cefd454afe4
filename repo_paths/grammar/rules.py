"""Per-segment validation rules and the segment transition table."""

from __future__ import annotations

import re
from enum import StrEnum
from functools import lru_cache
from pathlib import Path
from typing import Any

from repo_paths.errors import ErrorReason, SuffixError
from repo_paths.grammar.spec import GrammarSpec, SegmentSpec


class SegmentKind(StrEnum):
    """Kinds of suffix segments, in the order they appear in a suffix."""

    ERTS_VSN = "erts_vsn"
    AREA = "area"
    SIDE = "side"
    PACKAGE_NAME = "package_name"
    PACKAGE_VSN = "package_vsn"
    PACKAGE = "package"


# Keyed by (kind just consumed, Meta area observed). Missing keys mean the
# kind is terminal.
# TODO: drop the Meta branch once the Meta area gets a Side of its own.
TRANSITIONS: dict[tuple[SegmentKind, bool], SegmentKind] = {
    (SegmentKind.ERTS_VSN, False): SegmentKind.AREA,
    (SegmentKind.AREA, False): SegmentKind.SIDE,
    (SegmentKind.AREA, True): SegmentKind.PACKAGE_NAME,
    (SegmentKind.SIDE, False): SegmentKind.PACKAGE_NAME,
    (SegmentKind.PACKAGE_NAME, False): SegmentKind.PACKAGE_VSN,
    (SegmentKind.PACKAGE_VSN, False): SegmentKind.PACKAGE,
}


def _compile(segment: SegmentSpec) -> re.Pattern[str]:
    if segment.vocabulary:
        alternatives = "|".join(re.escape(value) for value in segment.vocabulary)
        body = f"(?:{alternatives})"
    else:
        body = f"(?:{segment.pattern})"
    if segment.extensions:
        extensions = "|".join(re.escape(ext) for ext in segment.extensions)
        body = f"{body}\\.(?:{extensions})"
    try:
        return re.compile(body)
    except re.error as e:
        raise ValueError(
            f"Segment '{segment.identifier}' declares an invalid pattern: {e}"
        ) from e


class Grammar:
    """Compiled suffix grammar.

    Every rule is applied with :func:`re.fullmatch`, so a token that only
    matches as a prefix (``5.5.5x`` against the ERTS version rule) is
    rejected. Instances are immutable after construction and safe to share.
    """

    __slots__ = ("_rules", "_reasons", "meta_area", "sides", "extensions", "source")

    def __init__(self, spec: GrammarSpec):
        rules: dict[SegmentKind, re.Pattern[str]] = {}
        reasons: dict[SegmentKind, ErrorReason] = {}
        for kind in SegmentKind:
            segment = spec.segment(kind.value)
            rules[kind] = _compile(segment)
            if segment.error is not None:
                reasons[kind] = ErrorReason(segment.error)
        self._rules = rules
        self._reasons = reasons
        self.meta_area = spec.meta_area
        self.sides = spec.segment(SegmentKind.SIDE.value).vocabulary
        self.extensions = spec.segment(SegmentKind.PACKAGE.value).extensions
        self.source = spec.source

    @classmethod
    def load(cls, path: Path | str | None = None) -> Grammar:
        return cls(GrammarSpec.load(path))

    def __repr__(self) -> str:
        return f"Grammar(source={self.source!r})"

    def matches(self, kind: SegmentKind | str, token: str) -> bool:
        """Return True when ``token`` matches the rule for ``kind`` entirely."""
        return self._rules[SegmentKind(kind)].fullmatch(token) is not None

    def error_reason(self, kind: SegmentKind | str) -> ErrorReason | None:
        return self._reasons.get(SegmentKind(kind))

    def validate(self, kind: SegmentKind | str, token: str) -> SuffixError | None:
        """Return the tagged error for a rejected token, ``None`` when accepted.

        Kinds without an error tag (the area) are never rejected here.
        """
        kind = SegmentKind(kind)
        reason = self._reasons.get(kind)
        if reason is None or self.matches(kind, token):
            return None
        return SuffixError(reason, token)

    def is_meta(self, area: str | None) -> bool:
        return area == self.meta_area

    def layout(self) -> dict[str, Any]:
        """Keyword arguments that make the builder follow this grammar."""
        return {"meta_area": self.meta_area, "sides": self.sides}

    def next_kind(self, kind: SegmentKind | str, token: str) -> SegmentKind | None:
        """Return the kind expected after ``token`` of ``kind``, or None at the end."""
        kind = SegmentKind(kind)
        meta = kind is SegmentKind.AREA and self.is_meta(token)
        return TRANSITIONS.get((kind, meta))


@lru_cache(maxsize=1)
def default_grammar() -> Grammar:
    """The packaged grammar, loaded once per process."""
    return Grammar.load()


__all__ = ["Grammar", "SegmentKind", "TRANSITIONS", "default_grammar"]
