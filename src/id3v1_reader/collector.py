"""Ordered sink for the tags emitted by the parsers."""

import logging
from typing import Any, Iterator, List, NamedTuple


class NativeTag(NamedTuple):
    """A single tag as emitted by a parser, before any normalization."""

    tag_type: str
    key: str
    value: Any


class TagCollector:
    """Collects tags from one or more parsers in emission order.

    Tags are stored exactly as they were added; the same key may appear more
    than once (for instance a multi-valued APEv2 item).
    """

    def __init__(self):
        self.tags: List[NativeTag] = []
        self.warnings: List[str] = []

    def __iter__(self) -> Iterator[NativeTag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    @property
    def has_tags(self) -> bool:
        return bool(self.tags)

    @property
    def tag_types(self) -> List[str]:
        """Tag types in the order they were first seen."""
        seen: List[str] = []
        for tag in self.tags:
            if tag.tag_type not in seen:
                seen.append(tag.tag_type)
        return seen

    def add_tag(self, tag_type: str, key: str, value: Any) -> None:
        logging.debug(f"{tag_type}: {key}={value!r}")
        self.tags.append(NativeTag(tag_type, key, value))

    def add_warning(self, message: str) -> None:
        logging.warning(message)
        self.warnings.append(message)

    def native(self, tag_type: str) -> List[NativeTag]:
        """Return all tags of the given type."""
        return [tag for tag in self.tags if tag.tag_type == tag_type]

    def get(self, tag_type: str, key: str) -> List[Any]:
        """Return every value stored for key under tag_type."""
        return [tag.value for tag in self.tags
                if tag.tag_type == tag_type and tag.key == key]
