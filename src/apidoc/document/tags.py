from __future__ import annotations

from typing import Iterable, Union

from apidoc.document.model import Tag


class TagCollector:
    """
    Document-wide set of tags where identity is the tag name only.

    Insertion order is kept so the final tag list follows first-seen order.
    """

    def __init__(self) -> None:
        self._by_name: dict[str, Tag] = {}

    def add(self, tag: Tag) -> None:
        # de-dupe by name; an already stored tag keeps its description
        if tag.name not in self._by_name:
            self._by_name[tag.name] = tag

    def update(self, tags: Iterable[Tag]) -> None:
        for t in tags:
            self.add(t)

    def snapshot(self) -> list[Tag]:
        return list(self._by_name.values())

    def __contains__(self, item: Union[Tag, str]) -> bool:
        name = item.name if isinstance(item, Tag) else item
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)
