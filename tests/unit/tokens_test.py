"""Tests for class token parsing."""

import pytest

from tailwind_sort.core.tokens import parse_class_string, parse_class_token


class TestParseClassToken:
    def test_simple_utility(self) -> None:
        token = parse_class_token("text-red-500")
        assert token.property == "text"
        assert token.value == "red-500"
        assert token.variants == ()
        assert not token.important
        assert not token.negative
        assert token.arbitrary is None

    def test_bare_utility(self) -> None:
        token = parse_class_token("block")
        assert token.property == "block"
        assert token.value is None

    def test_compound_property(self) -> None:
        token = parse_class_token("min-h-screen")
        assert token.property == "min-h"
        assert token.value == "screen"

    def test_important_core(self) -> None:
        token = parse_class_token("!bg-blue-500")
        assert token.important
        assert token.important_position == "core"
        assert token.property == "bg"

    def test_important_suffix(self) -> None:
        token = parse_class_token("md:p-4!")
        assert token.important_position == "suffix"
        assert token.variants == ("md",)
        assert token.value == "4"

    def test_negative(self) -> None:
        token = parse_class_token("-mt-4")
        assert token.negative
        assert token.property == "mt"
        assert token.value == "4"

    def test_arbitrary(self) -> None:
        token = parse_class_token("w-[100px]")
        assert token.property == "w"
        assert token.arbitrary == "100px"
        assert token.value is None

    def test_variants(self) -> None:
        assert parse_class_token("hover:bg-blue-500").variants == ("hover",)
        assert parse_class_token("dark:hover:focus:text-white").variants == ("dark", "hover", "focus")

    def test_everything_combined(self) -> None:
        token = parse_class_token("!md:hover:-mt-[20px]")
        assert token.important_position == "prefix"
        assert token.variants == ("md", "hover")
        assert token.negative
        assert token.property == "mt"
        assert token.arbitrary == "20px"

    def test_nested_brackets(self) -> None:
        token = parse_class_token("grid-cols-[repeat(auto-fill,minmax(0,1fr))]")
        assert token.property == "grid-cols"
        assert token.arbitrary == "repeat(auto-fill,minmax(0,1fr))"

    def test_colon_inside_brackets_is_not_a_variant(self) -> None:
        token = parse_class_token("[mask-type:luminance]")
        assert token.variants == ()
        assert token.property == ""
        assert token.arbitrary == "mask-type:luminance"

    def test_arbitrary_variants(self) -> None:
        assert parse_class_token("[&:hover]:flex").variants == ("[&:hover]",)
        assert parse_class_token("data-[state=open]:bg-white").variants == ("data-[state=open]",)

    def test_unknown_utility(self) -> None:
        token = parse_class_token("foo-bar")
        assert token.property == "foo-bar"
        assert token.value is None


@pytest.mark.parametrize(
    "raw",
    [
        "text-red-500",
        "!bg-blue-500",
        "-mt-4",
        "w-[100px]",
        "!-mt-[20px]",
        "!md:hover:-mt-[20px]",
        "sm:hover:dark:bg-blue-500",
        "md:p-4!",
        "[mask-type:luminance]",
        "before:content-['\\2248']",
        "bg-red-500/[0.5]",
        "w-[100px",
        "!md:!p-4",
        "p-",
        "--foo",
        "!",
        "...",
        "…",
    ],
)
def test_reassemble_round_trip(raw: str) -> None:
    assert parse_class_token(raw).reassemble() == raw


class TestParseClassString:
    def test_splits_on_any_whitespace(self) -> None:
        tokens = parse_class_string("  p-4\n\tm-2   flex ")
        assert [t.raw for t in tokens] == ["p-4", "m-2", "flex"]

    def test_empty(self) -> None:
        assert parse_class_string("   ") == []

    def test_keeps_duplicates(self) -> None:
        assert [t.raw for t in parse_class_string("flex flex")] == ["flex", "flex"]
