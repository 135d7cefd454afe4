"""Decompose repository suffixes into typed segments.

The parser is a small state machine over the ``/``-separated tokens of a
suffix. The state is the kind of segment expected next; the grammar's
transition table decides the following state after each accepted token.
Running out of tokens at any state is a successful, directory level parse.
The first rejected token ends the walk and nothing but the tagged error is
returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from repo_paths.builder import SEPARATOR
from repo_paths.errors import ErrorReason, SuffixError
from repo_paths.grammar.model import Segment, SuffixComponents
from repo_paths.grammar.rules import Grammar, SegmentKind, default_grammar

logger = logging.getLogger(__name__)


def tokenize(suffix: str) -> list[str]:
    """Split ``suffix`` on the separator, dropping empty tokens."""
    return [token for token in suffix.split(SEPARATOR) if token]


@dataclass(frozen=True)
class Decomposition:
    """Outcome of decomposing a suffix: segments on success, else the error."""

    segments: tuple[Segment, ...] = ()
    error: SuffixError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[Segment, ...]:
        """Return the segments, or raise a new copy of the stored error."""
        if self.error is not None:
            raise SuffixError(self.error.reason, self.error.token)
        return self.segments

    def as_tuples(self) -> list[tuple[str, str]]:
        return [segment.as_tuple() for segment in self.segments]


class SuffixParser:
    """Walk suffix tokens through the grammar one segment at a time."""

    def __init__(self, grammar: Grammar | None = None):
        self.grammar = grammar or default_grammar()

    def step(self, kind: SegmentKind, token: str) -> Segment | SuffixError:
        """Classify one token as ``kind`` or return the error rejecting it."""
        error = self.grammar.validate(kind, token)
        if error is not None:
            return error
        return Segment(kind=kind, text=token)

    def decompose(self, suffix: str) -> Decomposition:
        tokens = tokenize(suffix)
        if not tokens:
            return self._reject(suffix, SuffixError(ErrorReason.BAD_ERTS_VSN, ""))

        segments: list[Segment] = []
        expected: SegmentKind | None = SegmentKind.ERTS_VSN
        index = 0
        while index < len(tokens) and expected is not None:
            # Nothing may follow the package file.
            if expected is SegmentKind.PACKAGE and index < len(tokens) - 1:
                excess = SEPARATOR.join(tokens[index:])
                return self._reject(suffix, SuffixError(ErrorReason.BAD_PACKAGE, excess))

            token = tokens[index]
            result = self.step(expected, token)
            if isinstance(result, SuffixError):
                return self._reject(suffix, result)
            segments.append(result)
            expected = self.grammar.next_kind(expected, token)
            index += 1

        return Decomposition(segments=tuple(segments))

    def _reject(self, suffix: str, error: SuffixError) -> Decomposition:
        logger.debug(f"Rejected suffix '{suffix}': {error}")
        return Decomposition(error=error)


def decompose_suffix(suffix: str, grammar: Grammar | None = None) -> Decomposition:
    """Decompose ``suffix``; failures are reported in the returned value."""
    return SuffixParser(grammar).decompose(suffix)


def parse_suffix(suffix: str, grammar: Grammar | None = None) -> tuple[Segment, ...]:
    """Decompose ``suffix``, raising :class:`SuffixError` on the first bad token."""
    return decompose_suffix(suffix, grammar).unwrap()


def parse_components(suffix: str, grammar: Grammar | None = None) -> SuffixComponents:
    """Decompose ``suffix`` into the components model it was composed from."""
    return SuffixComponents.from_segments(parse_suffix(suffix, grammar), grammar)


__all__ = [
    "Decomposition",
    "SuffixParser",
    "decompose_suffix",
    "parse_components",
    "parse_suffix",
    "tokenize",
]
