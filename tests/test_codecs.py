"""Tests for tagdown.codecs and tagdown.formats.json."""

import json

import pytest

from tagdown import Tag, TagData, from_builtins, from_json, to_builtins, to_json


class TestToBuiltins:
    """Test to_builtins()."""

    def test_simple(self) -> None:
        """Test a tag with text contents."""
        assert to_builtins(TagData(name="a", contents=["x"])) == {
            "name": "a",
            "is_quoted": False,
            "is_attribute": False,
            "attributes": [],
            "is_literal": False,
            "contents": ["x"],
        }

    def test_nested_and_layout(self) -> None:
        """Test nested tags and the optional layout key."""
        data = TagData(
            name="a",
            attributes=[TagData(name="k", is_attribute=True)],
            contents=[TagData(name="b", layout={"indent": 2})],
        )

        result = to_builtins(data)

        assert "layout" not in result
        assert result["attributes"][0]["is_attribute"] is True
        assert result["contents"][0]["layout"] == {"indent": 2}

    def test_tag_method(self) -> None:
        """Test that Tag.to_builtins matches the function."""
        tag = Tag(r"p[a{1}]{x\b{}}")

        assert tag.to_builtins() == to_builtins(tag)


class TestFromBuiltins:
    """Test from_builtins()."""

    def test_round_trip(self) -> None:
        """Test rebuilding a tag from its builtins."""
        data = TagData(
            name="a b",
            is_quoted=True,
            attributes=[TagData(name="k", is_attribute=True, contents=["v"])],
            is_literal=True,
            contents=["x", TagData(name="c", layout=[1, 2])],
        )

        assert from_builtins(to_builtins(data)) == data

    def test_defaults(self) -> None:
        """Test that only the name is required."""
        assert from_builtins({"name": "a"}) == TagData(name="a")

    def test_missing_name(self) -> None:
        """Test that a missing name raises KeyError."""
        with pytest.raises(KeyError, match="name"):
            from_builtins({"contents": []})

    def test_bad_name(self) -> None:
        """Test that a non-string name raises ValueError."""
        with pytest.raises(ValueError, match="must be a string"):
            from_builtins({"name": 3})

    def test_not_a_dict(self) -> None:
        """Test that non-dict input raises ValueError."""
        with pytest.raises(ValueError, match="Expected a dict"):
            from_builtins(["a"])  # type: ignore[arg-type]

    @pytest.mark.parametrize("field", ["attributes", "contents"])
    @pytest.mark.parametrize("value", [None, "text", {"name": "b"}])
    def test_list_fields_must_be_lists(self, field: str, value: object) -> None:
        """Test that attributes and contents must be lists."""
        with pytest.raises(ValueError, match=f"Field '{field}' must be a list"):
            from_builtins({"name": "a", field: value})

    def test_bad_content(self) -> None:
        """Test that contents must be strings or dicts."""
        with pytest.raises(ValueError, match="Content entries"):
            from_builtins({"name": "a", "contents": [3]})


class TestJson:
    """Test the JSON adapter."""

    def test_to_json(self) -> None:
        """Test compact output and non-ASCII text."""
        result = to_json(TagData(name="é"), indent=None)

        assert result == (
            '{"name": "é", "is_quoted": false, "is_attribute": false, '
            '"attributes": [], "is_literal": false, "contents": []}'
        )

    def test_indented_by_default(self) -> None:
        """Test that output is indented unless asked otherwise."""
        assert "\n  " in to_json(TagData(name="a"))

    def test_round_trip_through_tag(self) -> None:
        """Test that a Tag survives JSON."""
        tag = Tag(r'p[a{1}]{x \@b{2} \c!"raw"}')

        rebuilt = Tag(from_json(tag.to_json()))

        assert str(rebuilt) == str(tag)
        assert rebuilt.to_builtins() == tag.to_builtins()

    def test_from_json_rejects_arrays(self) -> None:
        """Test that JSON must hold an object."""
        with pytest.raises(ValueError, match="Expected JSON object"):
            from_json("[]")

    def test_from_json_missing_name(self) -> None:
        """Test that the name field is required."""
        with pytest.raises(KeyError):
            from_json(json.dumps({"contents": []}))
