"""Tests for tagdown.syntax module."""

import pytest

from tagdown.data import TagData
from tagdown.errors import TagdownSyntaxError
from tagdown.syntax import is_bare_name, literal_text, parse_tag, print_tag, shake_tag


class TestParseTag:
    """Test parse_tag() on well-formed input."""

    def test_empty_body(self) -> None:
        """Test a tag with only a name and an empty body."""
        assert parse_tag("note{}") == TagData(name="note")

    def test_text_body(self) -> None:
        """Test a tag whose body is plain text."""
        assert parse_tag("p{Hello, world}") == TagData(name="p", contents=["Hello, world"])

    def test_surrounding_whitespace_is_ignored(self) -> None:
        """Test that whitespace around the tag is not part of it."""
        assert parse_tag("  \n p{x} \t") == TagData(name="p", contents=["x"])

    def test_whitespace_inside_body_is_kept(self) -> None:
        """Test that text keeps its spaces and newlines."""
        assert parse_tag("p{ a\n b }").contents == [" a\n b "]

    def test_nested_tags(self) -> None:
        """Test text interleaved with child tags."""
        tag = parse_tag(r"p{One \em{two} three}")

        assert tag.contents == [
            "One ",
            TagData(name="em", contents=["two"]),
            " three",
        ]

    def test_attributes(self) -> None:
        """Test that bracketed tags become flagged attributes."""
        tag = parse_tag("img[src{a.png}  alt{A picture}]{}")

        assert [attr.name for attr in tag.attributes] == ["src", "alt"]
        assert all(attr.is_attribute for attr in tag.attributes)
        assert tag.attributes[1].contents == ["A picture"]

    def test_attributes_with_nested_attributes(self) -> None:
        """Test attributes that carry their own attributes."""
        tag = parse_tag("a[b[c{1}]{2}]{}")

        assert tag.attributes[0].attributes[0] == TagData(
            name="c", is_attribute=True, contents=["1"]
        )

    def test_inline_attribute(self) -> None:
        """Test that @ marks an inline attribute in contents."""
        tag = parse_tag(r"p{text \@lang{en}}")

        assert tag.contents[1] == TagData(name="lang", is_attribute=True, contents=["en"])

    def test_escaped_characters(self) -> None:
        """Test escapes for backslash and braces in text."""
        tag = parse_tag(r"code{a \{ b \} c \\ d}")

        assert tag.contents == ["a { b } c \\ d"]

    def test_quoted_name(self) -> None:
        """Test names written in quotes."""
        tag = parse_tag(r'"two words"{} ')

        assert tag.name == "two words"
        assert tag.is_quoted is True

    def test_quoted_name_with_escapes(self) -> None:
        """Test quotes and backslashes inside quoted names."""
        assert parse_tag(r'"say \"hi\" \\"{}').name == 'say "hi" \\'

    def test_empty_quoted_name(self) -> None:
        """Test that an empty name can be written quoted."""
        assert parse_tag('""{}').name == ""

    def test_literal_body(self) -> None:
        """Test a literal body with doubled quotes."""
        tag = parse_tag('code!"x = {1} \\ ""y"""')

        assert tag.is_literal is True
        assert tag.contents == ['x = {1} \\ "y"']

    def test_empty_literal_body(self) -> None:
        """Test that an empty literal has no contents."""
        assert parse_tag('code!""').contents == []

    def test_name_punctuation(self) -> None:
        """Test that bare names may contain - _ . and :."""
        assert parse_tag("ns:a-b_c.d{}").name == "ns:a-b_c.d"


class TestParseErrors:
    """Test that malformed input raises TagdownSyntaxError."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "name",
            "{}",
            "a{",
            "a{b",
            "a{}b{}",
            "a{x { y}",
            "a[b{}",
            r"a{\ }",
            '"unterminated{}',
            'a!"no end',
            "a!x",
        ],
    )
    def test_rejects_malformed_text(self, text: str) -> None:
        """Test a range of malformed sources."""
        with pytest.raises(TagdownSyntaxError):
            parse_tag(text)

    def test_error_is_value_error(self) -> None:
        """Test that syntax errors can be caught as ValueError."""
        with pytest.raises(ValueError, match="expected tag name"):
            parse_tag("{}")

    def test_error_location(self) -> None:
        """Test that the error reports line and column."""
        with pytest.raises(TagdownSyntaxError) as info:
            parse_tag("a{\nbc{}")

        assert info.value.line == 2
        assert info.value.column == 3
        assert "line 2, column 3" in str(info.value)


class TestPrintTag:
    """Test print_tag() output."""

    def test_print_simple(self) -> None:
        """Test a tag with attributes, text and children."""
        tag = TagData(
            name="p",
            attributes=[TagData(name="id", is_attribute=True, contents=["x"])],
            contents=["Hi ", TagData(name="b", contents=["there"])],
        )

        assert print_tag(tag) == r"p[id{x}]{Hi \b{there}}"

    def test_print_escapes_text(self) -> None:
        """Test that special characters in text are escaped."""
        assert print_tag(TagData(name="c", contents=["{a}\\"])) == r"c{\{a\}\\}"

    def test_print_quotes_names_that_need_it(self) -> None:
        """Test that non-bare names are quoted even when not flagged."""
        assert print_tag(TagData(name="a b")) == '"a b"{}'
        assert print_tag(TagData(name="")) == '""{}'

    def test_print_keeps_requested_quotes(self) -> None:
        """Test that is_quoted forces quotes on a bare name."""
        assert print_tag(TagData(name="ab", is_quoted=True)) == '"ab"{}'

    def test_print_inline_attribute(self) -> None:
        """Test that inline attributes get an @ marker."""
        tag = TagData(name="p", contents=[TagData(name="x", is_attribute=True)])

        assert print_tag(tag) == r"p{\@x{}}"

    def test_print_attribute_list_without_marker(self) -> None:
        """Test that tags in the attribute list print without @."""
        tag = TagData(name="p", attributes=[TagData(name="x", is_attribute=True)])

        assert print_tag(tag) == "p[x{}]{}"

    def test_print_literal_flattens_contents(self) -> None:
        """Test that a literal prints the text of all its contents."""
        tag = TagData(
            name="code",
            is_literal=True,
            contents=['say "', TagData(name="b", contents=["hi"]), '"'],
        )

        assert print_tag(tag) == 'code!"say ""hi"""'

    def test_print_ignores_layout(self) -> None:
        """Test that layout does not affect the text."""
        assert print_tag(TagData(name="a", layout={"indent": 2})) == "a{}"


class TestShakeTag:
    """Test shake_tag() normalization."""

    def test_merges_and_drops_text_runs(self) -> None:
        """Test that adjacent runs merge and empty runs vanish."""
        tag = TagData(name="p", contents=["", "a", "b", TagData(name="x"), "", "c"])

        assert shake_tag(tag).contents == ["ab", TagData(name="x"), "c"]

    def test_flags_attribute_list_entries(self) -> None:
        """Test that attribute list entries become flagged."""
        tag = TagData(name="p", attributes=[TagData(name="x")])

        assert shake_tag(tag).attributes[0].is_attribute is True

    def test_sets_quoted_for_non_bare_names(self) -> None:
        """Test that names needing quotes are flagged quoted."""
        assert shake_tag(TagData(name="a b")).is_quoted is True

    def test_collapses_literal_contents(self) -> None:
        """Test that literal contents become one text run."""
        tag = TagData(name="c", is_literal=True, contents=["a", TagData(name="b", contents=["b"])])

        assert shake_tag(tag).contents == ["ab"]

    def test_drops_layout(self) -> None:
        """Test that layout is removed."""
        assert shake_tag(TagData(name="a", layout={"x": 1})).layout is None

    def test_parse_of_print_equals_shake(self) -> None:
        """Test that parsing printed text gives the shaken tag."""
        tag = TagData(
            name="a b",
            attributes=[TagData(name="k", contents=["v", ""])],
            contents=["x", "y", TagData(name="i", is_attribute=True, layout=1)],
        )

        assert parse_tag(print_tag(tag)) == shake_tag(tag)


class TestHelpers:
    """Test small syntax helpers."""

    def test_is_bare_name(self) -> None:
        """Test which names can be written without quotes."""
        assert is_bare_name("abc-1_2.3:x")
        assert is_bare_name("ünï")
        assert not is_bare_name("")
        assert not is_bare_name("a b")
        assert not is_bare_name('a"')

    def test_literal_text(self) -> None:
        """Test text collection through nested tags."""
        contents = ["a", TagData(name="b", contents=["b", TagData(name="c", contents=["c"])])]

        assert literal_text(contents) == "abc"
