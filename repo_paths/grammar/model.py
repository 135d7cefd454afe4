"""Segment values and the typed suffix components model.

``Segment`` is what the parser emits. ``SuffixComponents`` is the validated
input for composition: each field is checked against the grammar before the
builder joins anything, and :meth:`SuffixComponents.segments` yields exactly
what the parser returns for the composed suffix.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    ValidationInfo,
    model_validator,
)

from repo_paths import builder
from repo_paths.grammar.rules import Grammar, SegmentKind, default_grammar


class Segment(BaseModel):
    """One typed token of a suffix."""

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    text: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.kind.value, self.text)


# Field order is positional order.
_FIELDS: tuple[SegmentKind, ...] = tuple(SegmentKind)


def _grammar_from(info: ValidationInfo | None) -> Grammar:
    context = info.context if info is not None else None
    if isinstance(context, Mapping) and isinstance(context.get("grammar"), Grammar):
        return context["grammar"]
    return default_grammar()


class SuffixComponents(BaseModel):
    """Validated components of a suffix, from the ERTS version down.

    Fields must be set contiguously in positional order. The Meta area has
    no side level: a side given with it is checked against the side
    vocabulary and then dropped, so the model equals the one recovered by
    decomposing its own suffix. A grammar other than the packaged one is
    supplied through the validation context and is kept for composing::

        SuffixComponents.model_validate(data, context={"grammar": grammar})
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    erts_vsn: str
    area: str | None = None
    side: str | None = None
    package_name: str | None = None
    package_vsn: str | None = None
    package: str | None = None

    _grammar: Grammar | None = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _drop_meta_side(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            return data
        grammar = _grammar_from(info)
        side = data.get("side")
        if not grammar.is_meta(data.get("area")) or side is None:
            return data
        if not grammar.matches(SegmentKind.SIDE, side):
            msg = f"side '{side}' does not match the suffix grammar"
            raise ValueError(msg)
        return {key: value for key, value in data.items() if key != "side"}

    @model_validator(mode="after")
    def _check_segments(self, info: ValidationInfo) -> SuffixComponents:
        grammar = _grammar_from(info)
        meta = grammar.is_meta(self.area)

        missing: SegmentKind | None = None
        for kind in _FIELDS:
            value = getattr(self, kind.value)
            if value is None:
                if kind is SegmentKind.SIDE and meta:
                    continue
                missing = missing or kind
                continue
            if missing is not None:
                msg = f"'{kind.value}' is set but the preceding '{missing.value}' is not"
                raise ValueError(msg)
            if kind is SegmentKind.AREA:
                if not value or builder.SEPARATOR in value:
                    msg = f"area must be a single non-empty path token, got '{value}'"
                    raise ValueError(msg)
                continue
            if not grammar.matches(kind, value):
                msg = f"{kind.value} '{value}' does not match the suffix grammar"
                raise ValueError(msg)
        self._grammar = grammar
        return self

    @property
    def grammar(self) -> Grammar:
        return self._grammar or default_grammar()

    @property
    def is_meta(self) -> bool:
        return self.grammar.is_meta(self.area)

    def segments(self) -> tuple[Segment, ...]:
        """Return the segments a parser recovers from :meth:`compose`."""
        return tuple(
            Segment(kind=kind, text=getattr(self, kind.value))
            for kind in _FIELDS
            if getattr(self, kind.value) is not None
        )

    def compose(self) -> str:
        grammar = self.grammar
        layout = grammar.layout()
        # The builder still wants a valid side under Meta even though it drops it.
        side = self.side or next(iter(grammar.sides), builder.LIB_SIDE)
        if self.package is not None:
            return builder.package_file_suffix(
                self.erts_vsn,
                self.area,
                side,
                self.package_name,
                self.package_vsn,
                self.package,
                **layout,
            )
        if self.package_vsn is not None:
            return builder.package_vsn_suffix(
                self.erts_vsn,
                self.area,
                side,
                self.package_name,
                self.package_vsn,
                **layout,
            )
        if self.package_name is not None:
            return builder.package_name_suffix(
                self.erts_vsn, self.area, side, self.package_name, **layout
            )
        if self.side is not None:
            return builder.side_suffix(self.erts_vsn, self.area, self.side, **layout)
        if self.area is not None:
            return builder.area_suffix(self.erts_vsn, self.area)
        return builder.erts_suffix(self.erts_vsn)

    def model_dump_compact(self) -> dict[str, str]:
        return {key: value for key, value in self.model_dump().items() if value is not None}

    @classmethod
    def from_segments(
        cls, segments: Iterable[Segment], grammar: Grammar | None = None
    ) -> SuffixComponents:
        values = {segment.kind.value: segment.text for segment in segments}
        return cls.model_validate(values, context={"grammar": grammar or default_grammar()})


def compose_suffix(
    parts: Mapping[str, Any] | SuffixComponents, grammar: Grammar | None = None
) -> str:
    """Validate ``parts`` and return the suffix they describe."""
    if isinstance(parts, SuffixComponents):
        return parts.compose()
    context = {"grammar": grammar or default_grammar()}
    return SuffixComponents.model_validate(parts, context=context).compose()


__all__ = ["Segment", "SuffixComponents", "compose_suffix"]
