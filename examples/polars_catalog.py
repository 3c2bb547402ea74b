"""
Polars Catalog
==============

Moving tabular data in and out of tagdown demonstrating:
- One tag per row, with one attribute per non-null cell
- Reading attributes back with the typed coercions
- Path lookups that tolerate absent attributes

    catalog{\\row[sku{A-1} price{9.5} stock{3}]{}\\row[sku{B-2} price{12}]{}}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import polars as pl

from tagdown import Tag


# ============================================================================
# DataFrame -> tagdown
# ============================================================================

def frame_to_tag(frame: pl.DataFrame, *, name: str = "catalog", row_name: str = "row") -> Tag:
    """Convert each row into a tag whose attributes are the non-null cells."""
    catalog = Tag({"name": name})
    catalog.set_contents(
        Tag({"name": row_name, "attributes": record})
        for record in frame.iter_rows(named=True)
    )
    return catalog


# ============================================================================
# tagdown -> DataFrame
# ============================================================================

def _read_cell(attr: Tag, dtype: pl.DataType) -> Any:
    if attr.is_missing:
        return None
    if dtype == pl.Boolean:
        return attr.to_boolean()
    if dtype.is_integer():
        return int(attr.to_number())
    if dtype.is_float():
        return attr.to_number()
    if dtype == pl.Datetime:
        return attr.to_date()
    if dtype == pl.Date:
        return attr.to_date().date()
    return attr.text


def tag_to_frame(
    catalog: Tag,
    schema: Mapping[str, pl.DataType],
    *,
    row_name: str = "row",
) -> pl.DataFrame:
    """Rebuild a DataFrame from row tags, using schema to type each column.

    Columns whose attribute is absent from a row become null.
    """
    records = [
        {column: _read_cell(row.attr([column]), dtype) for column, dtype in schema.items()}
        for row in catalog.tags(row_name)
    ]
    return pl.DataFrame(records, schema=dict(schema))


def main():
    frame = pl.DataFrame({
        "sku": ["A-1", "B-2", "C-3"],
        "price": [9.5, 12.0, None],
        "stock": [3, None, 7],
        "active": [True, False, True],
    })

    catalog = frame_to_tag(frame)
    print("Catalog:")
    print(catalog)
    print()

    print("Round trip:")
    print(tag_to_frame(catalog, frame.schema))


if __name__ == "__main__":
    main()
