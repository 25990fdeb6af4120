# errors.py
# Exceptions raised while setting up a search

from __future__ import annotations


class ExactCoverError(ValueError):
    """Base class for invalid problem input. Raised before any solution."""


class UnknownOptionalCondition(ExactCoverError):
    def __init__(self, condition: int):
        super().__init__(f"optional condition {condition} is not used by any item")
        self.condition = condition


class ItemWithOnlyOptionalConditions(ExactCoverError):
    def __init__(self, item: int):
        super().__init__(f"item {item} satisfies only optional conditions")
        self.item = item


class UnknownPreselectedItem(ExactCoverError):
    def __init__(self, item: int):
        super().__init__(f"preselected item {item} is not part of the problem")
        self.item = item


class ConflictingPreselectedItem(ExactCoverError):
    def __init__(self, item: int, condition: int):
        super().__init__(
            f"preselected item {item} needs condition {condition}, "
            "which an earlier preselected item already covers"
        )
        self.item = item
        self.condition = condition


class SearchInvariantError(RuntimeError):
    """The column index is in a state the search should never reach."""
