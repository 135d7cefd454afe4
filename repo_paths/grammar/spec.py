"""Load and normalize the repository suffix grammar specification.

The specification is a small YAML document packaged next to this module
(``specification.yml``). Callers may point :meth:`GrammarSpec.load` at an
alternative file to change, for example, the accepted package-file
extensions without touching code.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_GRAMMAR_PACKAGE = "repo_paths.grammar"
_GRAMMAR_FILENAME = "specification.yml"


@dataclass(frozen=True)
class SegmentSpec:
    identifier: str
    error: str | None
    pattern: str | None
    vocabulary: tuple[str, ...]
    extensions: tuple[str, ...]


@dataclass(frozen=True)
class GrammarSpec:
    segments: tuple[SegmentSpec, ...]
    meta_area: str
    source: str = _GRAMMAR_FILENAME

    @property
    def segment_map(self) -> dict[str, SegmentSpec]:
        return {segment.identifier: segment for segment in self.segments}

    def segment(self, identifier: str) -> SegmentSpec:
        try:
            return self.segment_map[identifier]
        except KeyError:
            raise KeyError(
                f"Segment '{identifier}' is not declared in {self.source}"
            ) from None

    @classmethod
    def load(cls, path: Path | str | None = None) -> GrammarSpec:
        """Read the packaged specification, or ``path`` when given."""
        if path is None:
            grammar_path = resources.files(_GRAMMAR_PACKAGE) / _GRAMMAR_FILENAME
            with grammar_path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            source = _GRAMMAR_FILENAME
        else:
            with open(path, encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            source = str(path)
        logger.debug(f"Loaded suffix grammar specification from {source}")
        return cls.from_mapping(data, source=source)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], source: str = "<mapping>"
    ) -> GrammarSpec:
        if not isinstance(data, Mapping):
            raise ValueError(f"Grammar specification {source} must be a mapping")

        meta_area = str(data.get("meta_area", "")).strip()
        if not meta_area:
            raise ValueError(f"Grammar specification {source} must declare 'meta_area'")

        segments: list[SegmentSpec] = []
        segments_raw = data.get("segments", [])
        if isinstance(segments_raw, Sequence) and not isinstance(segments_raw, str):
            for entry in segments_raw:
                if not isinstance(entry, Mapping):
                    continue
                identifier = str(entry.get("id", "")).strip()
                if not identifier:
                    raise ValueError("Each segment must declare an 'id'")
                pattern = entry.get("pattern")
                vocabulary = _flatten_unique(_as_iterable(entry.get("vocabulary")))
                if pattern is None and not vocabulary:
                    raise ValueError(
                        f"Segment '{identifier}' needs a 'pattern' or a 'vocabulary'"
                    )
                error = entry.get("error")
                segments.append(
                    SegmentSpec(
                        identifier=identifier,
                        error=str(error) if error else None,
                        pattern=str(pattern) if pattern is not None else None,
                        vocabulary=vocabulary,
                        extensions=_flatten_unique(
                            ext.lstrip(".")
                            for ext in map(str, _as_iterable(entry.get("extensions")))
                        ),
                    )
                )

        return cls(segments=tuple(segments), meta_area=meta_area, source=source)


def _flatten_unique(values: Iterable[Any]) -> tuple[str, ...]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        text = str(value).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        result.append(text)
    return tuple(result)


def _as_iterable(value: Any) -> Iterable[Any]:
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return value
    if value is None:
        return ()
    return (value,)


__all__ = ["GrammarSpec", "SegmentSpec"]
