"""Shared pytest fixtures for repo-paths tests."""

from pathlib import Path

import pytest
import yaml

from repo_paths.grammar import Grammar, default_grammar
from repo_paths.grammar.spec import GrammarSpec


@pytest.fixture
def grammar() -> Grammar:
    return default_grammar()


@pytest.fixture
def write_grammar(tmp_path: Path):
    """Write a grammar YAML derived from the packaged one, with overrides.

    ``extensions`` replaces the package-file extension list, ``sides`` the
    side vocabulary and ``meta_area`` the name of the side-less area.
    """

    def _write(
        extensions: list[str] | None = None,
        sides: list[str] | None = None,
        meta_area: str | None = None,
    ) -> Path:
        spec = GrammarSpec.load()
        data = {"meta_area": meta_area or spec.meta_area, "segments": []}
        for segment in spec.segments:
            entry = {"id": segment.identifier}
            if segment.error:
                entry["error"] = segment.error
            if segment.pattern:
                entry["pattern"] = segment.pattern
            vocabulary = segment.vocabulary
            if segment.identifier == "side" and sides is not None:
                vocabulary = tuple(sides)
            if vocabulary:
                entry["vocabulary"] = list(vocabulary)
            exts = segment.extensions
            if segment.identifier == "package" and extensions is not None:
                exts = tuple(extensions)
            if exts:
                entry["extensions"] = list(exts)
            data["segments"].append(entry)
        path = tmp_path / "grammar.yml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
