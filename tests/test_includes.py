import pytest

from docindex.ingest.includes import MissingInclude, find_include, splice_includes


GENERATED = (
    "<!-- @include_start demo -->CODE<!-- @include_end demo -->\n"
    "<!-- @include_start types -->\ntype A = string;\n<!-- @include_end types -->\n"
    "<!-- @include_start empty --><!-- @include_end empty -->\n"
)


def test_splice_replaces_markers():
    body = "Before\n<!-- @include demo -->\nAfter"

    assert splice_includes(body, GENERATED) == "Before\nCODE\nAfter"


def test_splice_handles_multiple_markers():
    body = "<!-- @include demo --> and <!-- @include types -->"

    assert splice_includes(body, GENERATED) == "CODE and \ntype A = string;\n"


def test_find_include_missing_and_empty_are_both_empty():
    assert find_include(GENERATED, "absent") == ""
    assert find_include(GENERATED, "empty") == ""


@pytest.mark.parametrize("name", ["absent", "empty"])
def test_splice_raises_for_unresolved_include(name):
    with pytest.raises(MissingInclude) as excinfo:
        splice_includes(f"<!-- @include {name} -->", GENERATED)

    assert excinfo.value.name == name


def test_body_without_markers_is_unchanged():
    assert splice_includes("plain body", GENERATED) == "plain body"
