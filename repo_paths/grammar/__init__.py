"""Suffix grammar: segment rules, transitions and the components model.

The rules themselves live in the packaged ``specification.yml``; this
package compiles them and exposes the typed models built on top.
"""

from __future__ import annotations

from .model import Segment, SuffixComponents, compose_suffix
from .rules import TRANSITIONS, Grammar, SegmentKind, default_grammar
from .spec import GrammarSpec, SegmentSpec

__all__ = [
    "TRANSITIONS",
    "Grammar",
    "GrammarSpec",
    "Segment",
    "SegmentKind",
    "SegmentSpec",
    "SuffixComponents",
    "compose_suffix",
    "default_grammar",
]
