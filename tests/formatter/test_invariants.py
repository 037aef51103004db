"""Property-based tests for formatter invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from canonhtml import format_html, tokenize
from canonhtml.formatter import Formatter

FRAGMENTS = [
    "<p>",
    "</p>",
    "<div>",
    "</div>",
    '<div class="x">',
    "<ul>",
    "</ul>",
    "<li>",
    "</li>",
    "<h2>",
    "</h2>",
    "<b>",
    "</b>",
    '<a href="/x">',
    "</a>",
    "<em>",
    "</em>",
    "<br>",
    "<br/>",
    '<img src="a.png">',
    "<!-- note -->",
    "Hello",
    "world",
    " ",
    "\n    ",
    "!",
]

html_fragments = st.lists(st.sampled_from(FRAGMENTS), max_size=40).map("".join)

# Without embedded newlines every output line is indent + content
single_line_fragments = st.lists(
    st.sampled_from([f for f in FRAGMENTS if "\n" not in f]), max_size=40
).map("".join)


class TestDeterminism:
    """Same input, same output."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_arbitrary_text(self, source: str) -> None:
        assert format_html(source) == format_html(source)

    @given(html_fragments)
    @settings(max_examples=200)
    def test_fragments(self, source: str) -> None:
        tokens = tokenize(source)
        formatter = Formatter()
        assert formatter.format(tokens) == formatter.format(tokens)


class TestIdempotence:
    """Formatting canonical output changes nothing."""

    @given(html_fragments)
    @settings(max_examples=300)
    def test_fragments(self, source: str) -> None:
        once = format_html(source)
        assert format_html(once) == once

    @given(st.text(alphabet="<>/!-pbdiv \n\t=\"'x", max_size=200))
    @settings(max_examples=300)
    def test_markup_soup(self, source: str) -> None:
        once = format_html(source)
        assert format_html(once) == once


class TestTotality:
    """Never raises, never produces negative indentation."""

    @given(st.text(alphabet="<>/!?-abpdivlu \n", max_size=300))
    @settings(max_examples=200)
    def test_no_exceptions_on_special_chars(self, source: str) -> None:
        assert isinstance(format_html(source), str)

    @given(single_line_fragments)
    @settings(max_examples=200)
    def test_indent_is_whole_units(self, source: str) -> None:
        for line in format_html(source).split("\n"):
            width = len(line) - len(line.lstrip(" "))
            assert width % 2 == 0, repr(line)

    @given(st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=30))
    def test_stray_closes_floor_depth(self, strays: int, depth: int) -> None:
        source = "</div>" * strays + "<div>" * depth + "<p>x</p>"
        lines = format_html(source).split("\n")
        assert lines[-1] == "  " * depth + "<p>x</p>"

    @given(st.text(alphabet="abc xyz\n\t.,!", max_size=200))
    def test_text_only_is_trimmed_input(self, source: str) -> None:
        assert format_html(source) == source.strip()


class TestVoidTags:
    """Void tags never increase depth."""

    @given(st.integers(min_value=1, max_value=50), st.sampled_from(["<br>", "<hr>", "<br/>", "<img src='x'>"]))
    def test_repeated_void(self, count: int, tag: str) -> None:
        lines = format_html(tag * count).split("\n")
        assert lines == [tag] * count
