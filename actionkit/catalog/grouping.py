"""Category grouping, filtering and visibility for the action picker"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from actionkit.catalog.builder import SYSTEM_CATEGORY
from actionkit.catalog.storage import HiddenCategories
from actionkit.plugins.schemas import Action, IntegrationType
from actionkit.utils.text import locale_key, slugify


class CategoryGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    actions: tuple[Action, ...]


class GroupIconKind(str, Enum):
    INTEGRATION = "integration"
    SYSTEM = "system"
    GENERIC = "generic"


class GroupIcon(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: GroupIconKind
    integration: IntegrationType | None = None


class GridStatus(str, Enum):
    READY = "ready"
    NO_RESULTS = "no_results"  # Nothing matches the filter
    ALL_HIDDEN = "all_hidden"  # Matches exist but every matching group is hidden


class GroupView(BaseModel):
    category: str
    actions: list[Action]
    icon: GroupIcon
    collapsed: bool
    hidden: bool


class GridView(BaseModel):
    status: GridStatus
    groups: list[GroupView]
    hidden_count: int


def filter_actions(actions: Iterable[Action], text: str) -> list[Action]:
    """Keep actions whose label, description or category contains the text"""

    term = text.lower()
    if not term:
        return list(actions)
    return [
        action
        for action in actions
        if term in action.label.lower()
        or term in action.description.lower()
        or term in action.category.lower()
    ]


def _category_sort_key(category: str) -> tuple[int, tuple[str, str]]:
    return (0 if category == SYSTEM_CATEGORY else 1, locale_key(category))


def group_actions(actions: Iterable[Action]) -> list[CategoryGroup]:
    """Group by category; System first, then categories in locale order"""

    groups: dict[str, list[Action]] = {}
    for action in actions:
        groups.setdefault(action.category, []).append(action)

    return [
        CategoryGroup(category=category, actions=tuple(groups[category]))
        for category in sorted(groups, key=_category_sort_key)
    ]


def resolve_group_icon(group: CategoryGroup) -> GroupIcon:
    # The first action decides, even when a category mixes integrations
    first = group.actions[0] if group.actions else None
    if first is not None and first.integration:
        return GroupIcon(kind=GroupIconKind.INTEGRATION, integration=first.integration)
    if group.category == SYSTEM_CATEGORY:
        return GroupIcon(kind=GroupIconKind.SYSTEM)
    return GroupIcon(kind=GroupIconKind.GENERIC)


def action_test_id(action_id: str) -> str:
    return f"action-option-{slugify(action_id)}"


class ActionGrid:
    """State of one action picker.

    Filter text, collapse state and the show-hidden toggle live only as long
    as the grid; hidden categories are persisted through ``hidden``.
    """

    def __init__(self, actions: Iterable[Action], hidden: HiddenCategories):
        self.actions = list(actions)
        self.hidden = hidden
        self.filter_text = ""
        self.show_hidden = False
        self.collapsed: set[str] = set()

    def set_filter(self, text: str) -> None:
        self.filter_text = text

    def set_show_hidden(self, show: bool) -> None:
        self.show_hidden = show

    def toggle_collapsed(self, category: str) -> bool:
        if category in self.collapsed:
            self.collapsed.discard(category)
            return False
        self.collapsed.add(category)
        return True

    def is_collapsed(self, category: str) -> bool:
        return category in self.collapsed

    def toggle_hidden(self, category: str) -> bool:
        return self.hidden.toggle(category)

    @property
    def hidden_count(self) -> int:
        return len(self.hidden)

    def filtered_actions(self) -> list[Action]:
        return filter_actions(self.actions, self.filter_text)

    def groups(self) -> list[CategoryGroup]:
        return group_actions(self.filtered_actions())

    def visible_groups(self) -> list[CategoryGroup]:
        groups = self.groups()
        if self.show_hidden:
            return groups
        return [group for group in groups if group.category not in self.hidden]

    def view(self) -> GridView:
        groups = self.visible_groups()

        if not self.filtered_actions():
            status = GridStatus.NO_RESULTS
        elif not groups:
            status = GridStatus.ALL_HIDDEN
        else:
            status = GridStatus.READY

        return GridView(
            status=status,
            groups=[
                GroupView(
                    category=group.category,
                    actions=list(group.actions),
                    icon=resolve_group_icon(group),
                    collapsed=group.category in self.collapsed,
                    hidden=group.category in self.hidden,
                )
                for group in groups
            ],
            hidden_count=self.hidden_count,
        )
