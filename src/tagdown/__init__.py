"""tagdown - Mutable and frozen tag trees for the tagdown markup language."""

import logging

from tagdown.base import BaseTag
from tagdown.codecs import (
    from_builtins,
    to_builtins,
)
from tagdown.config import (
    TagdownConfig,
    get_config,
    reset_config,
)
from tagdown.data import (
    TagData,
    TagShape,
    clone_tag_data,
    is_attribute_content,
    is_tag_content,
    is_text,
)
from tagdown.errors import TagdownSyntaxError
from tagdown.formats.json import (
    from_json,
    to_json,
)
from tagdown.readonly import (
    ReadonlyAttributes,
    ReadonlyContents,
    ReadonlyTag,
)
from tagdown.syntax import (
    parse_tag,
    print_tag,
    shake_tag,
)
from tagdown.tag import (
    Attributes,
    Contents,
    Tag,
    is_content,
    is_contents,
    is_tag,
    normalize_tag,
    t,
    tl,
)
from tagdown.utils import (
    format_number,
    parse_iso_string,
    to_iso_string,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Tags
    "Attributes",
    "BaseTag",
    "Contents",
    "ReadonlyAttributes",
    "ReadonlyContents",
    "ReadonlyTag",
    "Tag",
    # Plain tag values
    "TagData",
    "TagShape",
    # Configuration
    "TagdownConfig",
    # Syntax
    "TagdownSyntaxError",
    "clone_tag_data",
    "format_number",
    "from_builtins",
    "from_json",
    "get_config",
    "is_attribute_content",
    "is_content",
    "is_contents",
    "is_tag",
    "is_tag_content",
    "is_text",
    "normalize_tag",
    "parse_iso_string",
    "parse_tag",
    "print_tag",
    "reset_config",
    "shake_tag",
    "t",
    "tl",
    "to_builtins",
    "to_iso_string",
    "to_json",
]
