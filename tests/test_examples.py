"""Tests for the scripts in examples/."""

import importlib
from datetime import UTC, datetime

import pytest


class TestBuildingDocuments:
    """Test examples/01_building_documents.py."""

    def test_build_article(self) -> None:
        """Test the document assembled by the example."""
        example = importlib.import_module("examples.01_building_documents")

        article = example.build_article()

        assert article.tag("head.title").text == "Tagdown in five minutes"
        assert article.attr("draft").to_boolean() is True
        assert article.attr("meta.words").to_number() == 1234
        assert article.attr("meta.published").to_date() == datetime(2024, 5, 1, 9, 30, tzinfo=UTC)
        assert article.tag("section").attr("id").text == "basics"
        assert article.tag("code").is_literal is True

    def test_main(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that the script runs end to end."""
        example = importlib.import_module("examples.01_building_documents")

        example.main()

        assert "Frozen title is unaffected: Tagdown in five minutes" in capsys.readouterr().out


class TestPolarsCatalog:
    """Test examples/polars_catalog.py."""

    @pytest.fixture
    def pl(self):
        return pytest.importorskip("polars")

    def test_frame_to_tag(self, pl) -> None:
        """Test one row tag per record, skipping nulls."""
        from examples.polars_catalog import frame_to_tag

        frame = pl.DataFrame({"sku": ["A-1", "B-2"], "price": [9.5, None], "stock": [3, 7]})

        catalog = frame_to_tag(frame)

        assert str(catalog) == r"catalog{\row[sku{A-1} price{9.5} stock{3}]{}\row[sku{B-2} stock{7}]{}}"

    def test_round_trip(self, pl) -> None:
        """Test that typed columns come back unchanged."""
        from examples.polars_catalog import frame_to_tag, tag_to_frame

        frame = pl.DataFrame({
            "sku": ["A-1", "B-2", "C-3"],
            "price": [9.5, 12.0, None],
            "stock": [3, None, 7],
            "active": [True, False, True],
        })

        result = tag_to_frame(frame_to_tag(frame), frame.schema)

        assert result.equals(frame)
