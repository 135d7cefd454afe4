import pytest
from pydantic import ValidationError

from repo_paths import builder
from repo_paths.grammar import (
    Grammar,
    Segment,
    SegmentKind,
    SuffixComponents,
    compose_suffix,
)
from repo_paths.parser import decompose_suffix, parse_components


COMPONENTS = [
    {"erts_vsn": "5.5.5"},
    {"erts_vsn": "5.5.5", "area": "Generic"},
    {"erts_vsn": "5.5.5", "area": "x86_64-linux", "side": "lib"},
    {"erts_vsn": "5.6.1", "area": "Generic", "side": "releases", "package_name": "sinan"},
    {
        "erts_vsn": "5.5.5",
        "area": "Generic",
        "side": "lib",
        "package_name": "mnesia",
        "package_vsn": "4.3-rc_1",
    },
    {
        "erts_vsn": "5.5.5",
        "area": "Generic",
        "side": "lib",
        "package_name": "gas",
        "package_vsn": "5.1.0",
        "package": "gas.tar.gz",
    },
    {
        "erts_vsn": "5.5.5",
        "area": "Meta",
        "package_name": "faxien",
        "package_vsn": "1.0",
        "package": "faxien.rel",
    },
]


@pytest.mark.parametrize("parts", COMPONENTS)
def test_compose_then_decompose(parts):
    components = SuffixComponents(**parts)
    suffix = compose_suffix(parts)
    assert suffix == components.compose()
    assert decompose_suffix(suffix).segments == components.segments()
    assert parse_components(suffix) == components


@pytest.mark.parametrize(
    "suffix",
    [
        builder.erts_suffix("5.5.5"),
        builder.area_suffix("5.5.5", "Generic"),
        builder.side_suffix("5.5.5", "Generic", "lib"),
        builder.package_name_suffix("5.5.5", "Generic", "lib", "gas"),
        builder.package_vsn_suffix("5.5.5", "Generic", "lib", "gas", "5.1.0"),
        builder.package_suffix("5.5.5", "Generic", "lib", "gas", "5.1.0"),
        builder.dot_app_file_suffix("5.5.5", "gas", "5.1.0"),
        builder.dot_rel_file_suffix("5.5.5", "faxien", "1.0"),
    ],
)
def test_builder_output_decomposes(suffix):
    result = decompose_suffix(suffix)
    assert result.ok, result.error
    assert builder.join_paths("/", *(s.text for s in result.segments)) == suffix


def test_meta_side_is_not_emitted():
    components = SuffixComponents(
        erts_vsn="5.5.5", area="Meta", side="releases", package_name="faxien"
    )
    assert components.side is None
    assert components.compose() == "/5.5.5/Meta/faxien"
    assert components.segments() == (
        Segment(kind=SegmentKind.ERTS_VSN, text="5.5.5"),
        Segment(kind=SegmentKind.AREA, text="Meta"),
        Segment(kind=SegmentKind.PACKAGE_NAME, text="faxien"),
    )


def test_model_dump_compact_drops_unset_fields():
    components = SuffixComponents(erts_vsn="5.5.5", area="Generic")
    assert components.model_dump_compact() == {"erts_vsn": "5.5.5", "area": "Generic"}


@pytest.mark.parametrize(
    "parts, message",
    [
        ({"erts_vsn": "5.5"}, "erts_vsn '5.5'"),
        ({"erts_vsn": "5.5.5", "area": "Generic", "side": "bin"}, "side 'bin'"),
        ({"erts_vsn": "5.5.5", "area": "a/b"}, "single non-empty path token"),
        ({"erts_vsn": "5.5.5", "area": ""}, "single non-empty path token"),
        (
            {"erts_vsn": "5.5.5", "area": "Generic", "package_name": "gas"},
            "preceding 'side'",
        ),
        (
            {
                "erts_vsn": "5.5.5",
                "area": "Meta",
                "package_name": "gas",
                "package": "gas.tar.gz",
            },
            "preceding 'package_vsn'",
        ),
        (
            {
                "erts_vsn": "5.5.5",
                "area": "Generic",
                "side": "lib",
                "package_name": "gas",
                "package_vsn": "1.0",
                "package": "gas.tar.z",
            },
            "package 'gas.tar.z'",
        ),
    ],
)
def test_invalid_components_are_rejected(parts, message):
    with pytest.raises(ValidationError, match=message):
        SuffixComponents(**parts)


def test_unknown_component_is_rejected():
    with pytest.raises(ValidationError):
        SuffixComponents(erts_vsn="5.5.5", arch="x86")


def test_meta_side_is_dropped_on_validation():
    components = SuffixComponents(
        erts_vsn="5.5.5", area="Meta", side="lib", package_name="gas", package_vsn="1.0"
    )
    assert components.side is None
    assert parse_components(components.compose()) == components


def test_meta_side_must_still_be_a_side():
    with pytest.raises(ValidationError, match="side 'bin'"):
        SuffixComponents(erts_vsn="5.5.5", area="Meta", side="bin", package_name="gas")


def test_custom_meta_area_round_trips(write_grammar):
    grammar = Grammar.load(write_grammar(meta_area="Index"))
    components = parse_components("/5.5.5/Index/gas/1.0", grammar)
    assert components.is_meta
    assert components.compose() == "/5.5.5/Index/gas/1.0"
    # Meta is an ordinary area under this grammar
    assert compose_suffix(
        {"erts_vsn": "5.5.5", "area": "Meta", "side": "lib", "package_name": "gas"}, grammar
    ) == "/5.5.5/Meta/lib/gas"


def test_custom_side_round_trips(write_grammar):
    grammar = Grammar.load(write_grammar(sides=["lib", "releases", "bin"]))
    parts = {"erts_vsn": "5.5.5", "area": "Generic", "side": "bin", "package_name": "gas"}
    suffix = compose_suffix(parts, grammar)
    assert suffix == "/5.5.5/Generic/bin/gas"
    assert parse_components(suffix, grammar).model_dump_compact() == parts
