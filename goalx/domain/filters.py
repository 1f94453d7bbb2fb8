from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from .enums import Category


class SortMode(StrEnum):
    NEWEST_FIRST = "newest_first"
    OLDEST_FIRST = "oldest_first"
    ONLY_ACTIVE = "only_active"
    ONLY_DONE = "only_done"
    CATEGORY = "category"


@dataclass(frozen=True)
class SortChoice:
    mode: SortMode = SortMode.NEWEST_FIRST
    category: Optional[Category] = None

    @classmethod
    def for_category(cls, category: Category) -> SortChoice:
        return cls(SortMode.CATEGORY, category)

    @property
    def shows_active(self) -> bool:
        return self.mode != SortMode.ONLY_DONE

    @property
    def shows_done(self) -> bool:
        return self.mode != SortMode.ONLY_ACTIVE

    @property
    def reverses(self) -> bool:
        return self.mode == SortMode.NEWEST_FIRST
