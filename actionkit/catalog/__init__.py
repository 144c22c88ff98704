"""Catalog domain - merging, grouping and filtering actions for display"""

from actionkit.catalog.builder import (
    SYSTEM_ACTIONS,
    SYSTEM_CATEGORY,
    build_catalog,
    create_registry,
)
from actionkit.catalog.grouping import (
    ActionGrid,
    CategoryGroup,
    GridStatus,
    GridView,
    GroupIcon,
    GroupIconKind,
    GroupView,
    action_test_id,
    filter_actions,
    group_actions,
    resolve_group_icon,
)
from actionkit.catalog.storage import (
    HIDDEN_GROUPS_KEY,
    HiddenCategories,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
)

__all__ = [
    "HIDDEN_GROUPS_KEY",
    "SYSTEM_ACTIONS",
    "SYSTEM_CATEGORY",
    "ActionGrid",
    "CategoryGroup",
    "GridStatus",
    "GridView",
    "GroupIcon",
    "GroupIconKind",
    "GroupView",
    "HiddenCategories",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "action_test_id",
    "build_catalog",
    "create_registry",
    "filter_actions",
    "group_actions",
    "resolve_group_icon",
]
