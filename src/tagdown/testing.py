"""Random tag generators for property-style tests.

Every generator takes an explicit ``random.Random`` so a failing case can be
replayed from its seed.
"""

from __future__ import annotations

import random
import string

from tagdown.data import TagData

_NAMES = ("a", "b", "c", "title", "x-y", "ns:item", "v1.2", "with space", 'q"uote', "", "ünï")
_TEXT_ALPHABET = string.ascii_letters + string.digits + " \n\t{}\\\"@[]!.é→"


def random_name(rng: random.Random) -> str:
    return rng.choice(_NAMES)


def random_text(rng: random.Random, max_length: int = 12) -> str:
    return "".join(rng.choice(_TEXT_ALPHABET) for _ in range(rng.randint(0, max_length)))


def random_tag_data(rng: random.Random, max_depth: int) -> TagData:
    """Generate a tag with up to max_depth levels of nesting.

    Covers quoted and unquoted names, inline attributes, literal tags,
    empty and adjacent text runs, and opaque layout values.
    """
    tag = TagData(
        name=random_name(rng),
        is_quoted=rng.random() < 0.2,
        is_attribute=rng.random() < 0.2,
        is_literal=rng.random() < 0.15,
        layout={"indent": rng.randint(0, 4)} if rng.random() < 0.2 else None,
    )
    if max_depth <= 0:
        if rng.random() < 0.7:
            tag.contents.append(random_text(rng))
        return tag
    for _ in range(rng.randint(0, 2)):
        tag.attributes.append(random_tag_data(rng, max_depth - 1))
    for _ in range(rng.randint(0, 4)):
        if rng.random() < 0.5:
            tag.contents.append(random_text(rng))
        else:
            tag.contents.append(random_tag_data(rng, max_depth - 1))
    return tag
