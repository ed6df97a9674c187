"""Tests for locating class literals in content sections."""

from tailwind_sort.config import DEFAULT_ATTRIBUTES, DEFAULT_FUNCTIONS
from tailwind_sort.core.finder import find_all, find_matches
from tailwind_sort.models import ContentSection, MatchSpan


def _find(text: str, attributes=DEFAULT_ATTRIBUTES, functions=DEFAULT_FUNCTIONS) -> list[MatchSpan]:
    return find_matches(ContentSection(base_offset=0, text=text), attributes, functions)


def _values(text: str, **kwargs) -> list[str]:
    return [span.raw_value for span in _find(text, **kwargs)]


class TestAttributes:
    def test_double_quotes(self) -> None:
        text = '<div class="text-red-500 bg-blue-500">Test</div>'
        spans = _find(text)
        assert len(spans) == 1
        span = spans[0]
        assert span.raw_value == "text-red-500 bg-blue-500"
        assert span.quote_char == '"'
        assert text[span.start : span.end] == span.raw_value

    def test_single_quotes(self) -> None:
        assert _values("<div class='p-4 m-2'></div>") == ["p-4 m-2"]

    def test_class_name(self) -> None:
        assert _values('<div className="p-4 m-2"></div>') == ["p-4 m-2"]

    def test_whitespace_around_equals(self) -> None:
        assert _values('<div class = "p-4 m-2"></div>') == ["p-4 m-2"]

    def test_data_attribute_is_not_class(self) -> None:
        assert _values('<div data-class="p-4 m-2"></div>') == []

    def test_vue_binding_is_not_class(self) -> None:
        assert _values("<div :class=\"{ 'p-4 m-2': active }\"></div>") == []

    def test_longer_attribute_name_is_not_class(self) -> None:
        assert _values('<div classList="p-4 m-2"></div>') == []

    def test_jsx_expression(self) -> None:
        assert _values('<div className={"text-red-500 bg-blue-500"}>Test</div>') == ["text-red-500 bg-blue-500"]

    def test_jsx_ternary(self) -> None:
        text = '<div className={active ? "bg-blue-500 p-4" : "bg-gray-100 p-2"}>'
        assert _values(text) == ["bg-blue-500 p-4", "bg-gray-100 p-2"]

    def test_plain_template_literal(self) -> None:
        spans = _find("<div className={`p-4 m-2`}>")
        assert [(s.raw_value, s.quote_char) for s in spans] == [("p-4 m-2", "`")]

    def test_interpolated_template_literal_is_skipped(self) -> None:
        assert _values("<div className={`p-4 ${size}`}>") == []

    def test_empty_values_are_skipped(self) -> None:
        assert _values('<div class=""></div><p class="   "></p>') == []

    def test_attributes_disabled(self) -> None:
        assert _values('<div class="p-4 m-2"></div>', attributes=()) == []


class TestFunctionCalls:
    def test_call_arguments(self) -> None:
        text = 'const classes = clsx("text-red-500", "bg-blue-500");'
        assert _values(text) == ["text-red-500", "bg-blue-500"]

    def test_parentheses_inside_literal(self) -> None:
        assert _values('cva("p-4 (x)", "m-2")') == ["p-4 (x)", "m-2"]

    def test_name_must_stand_alone(self) -> None:
        assert _values('myclsx("p-4 m-2")') == []
        assert _values('clsxx("p-4 m-2")') == []

    def test_plain_string_is_not_matched(self) -> None:
        assert _values('const notAClass = "text-red-500";') == []

    def test_object_keys(self) -> None:
        assert _values('clsx({ "p-4 m-2": active })') == ["p-4 m-2"]

    def test_comments_are_skipped(self) -> None:
        text = 'clsx(\n  // don\'t\n  "p-4 m-2"\n)'
        assert _values(text) == ["p-4 m-2"]

    def test_unterminated_call_is_ignored(self) -> None:
        assert _values('clsx("p-4 m-2"') == []

    def test_line_continuation_is_skipped(self) -> None:
        assert _values('const c = clsx("z-10 \\\n  p-4");') == []

    def test_escaped_literal_is_skipped(self) -> None:
        assert _values('clsx("foo\\ p-4", "m-2")') == ["m-2"]

    def test_escape_in_expression_is_skipped(self) -> None:
        assert _values('<div className={"z-10 \\\n p-4"}>') == []

    def test_backslash_in_markup_attribute_is_kept(self) -> None:
        assert _values("<div class=\"before:content-['\\2248'] p-4\">") == ["before:content-['\\2248'] p-4"]

    def test_custom_function(self) -> None:
        assert _values('cn("p-4 m-2")', functions=("cn",)) == ["p-4 m-2"]
        assert _values('cn("p-4 m-2")') == []


class TestMerging:
    def test_attribute_and_call_report_once(self) -> None:
        assert _values('<div className={clsx("p-4 m-2")}>') == ["p-4 m-2"]

    def test_base_offset_is_applied(self) -> None:
        section = ContentSection(base_offset=100, text='<div class="a b">')
        spans = find_matches(section, DEFAULT_ATTRIBUTES, DEFAULT_FUNCTIONS)
        assert spans == [MatchSpan(start=112, end=115, raw_value="a b", quote_char='"')]

    def test_find_all_orders_across_sections(self) -> None:
        first = ContentSection(base_offset=0, text='<p class="x y">')
        second = ContentSection(base_offset=50, text='<p class="z w">')
        spans = find_all([second, first], DEFAULT_ATTRIBUTES, DEFAULT_FUNCTIONS)
        assert [s.raw_value for s in spans] == ["x y", "z w"]
        assert spans[0].end <= spans[1].start
