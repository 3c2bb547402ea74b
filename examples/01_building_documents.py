"""
Building Documents
==================

A tour of the tag API demonstrating:
- Parsing tagdown text and the t()/tl() shorthands
- Path writes that create missing tags on first assignment
- Attributes stored in the attribute list and inline in contents
- Freezing a tree for read-only sharing
"""

from datetime import UTC, datetime

from tagdown import Tag, t, tl


# ============================================================================
# Build a document
# ============================================================================

def build_article() -> Tag:
    article = Tag('article[lang{en}]{Intro text. \\@draft{yes}}')

    # Missing paths are created on the first write
    article.tag("head.title").set_text("Tagdown in five minutes")
    article.attr("meta.published").from_value(datetime(2024, 5, 1, 9, 30, tzinfo=UTC))
    article.attr("meta.words").from_value(1234)

    # Bulk assignment merges by name and keeps positions stable
    article.tag([], [
        t("section", {"id": "basics"}, ["Tags have ", t("em", "names"), "."]),
        tl("code", "name[attr{value}]{text}"),
    ])
    return article


# ============================================================================
# Example: Reading it back
# ============================================================================

def main():
    article = build_article()

    print("Document:")
    print(article)
    print()

    print(f"Title:     {article.tag('head.title').text}")
    print(f"Draft:     {article.attr('draft').to_boolean()}")  # inline attribute
    print(f"Words:     {article.attr('meta.words').to_number():.0f}")
    print(f"Published: {article.attr('meta.published').to_date().isoformat()}")
    print(f"Summary:   {article.truncate(12)}")
    print()

    frozen = article.freeze()
    article.tag("head.title").set_text("Changed later")
    print(f"Frozen title is unaffected: {frozen.tag('head.title').text}")

    print()
    print("As JSON:")
    print(frozen.tag("section").to_json())


if __name__ == "__main__":
    main()
