"""Merges built-in system actions with registered plugin actions"""

from __future__ import annotations

from loguru import logger

from actionkit.plugins.registry import PluginRegistry
from actionkit.plugins.schemas import Action

SYSTEM_CATEGORY = "System"

# System actions that don't come from plugins
SYSTEM_ACTIONS: tuple[Action, ...] = (
    Action(
        id="HTTP Request",
        label="HTTP Request",
        description="Make an HTTP request to any API",
        category=SYSTEM_CATEGORY,
    ),
    Action(
        id="Database Query",
        label="Database Query",
        description="Query your database",
        category=SYSTEM_CATEGORY,
    ),
    Action(
        id="Condition",
        label="Condition",
        description="Branch based on a condition",
        category=SYSTEM_CATEGORY,
    ),
)


def create_registry() -> PluginRegistry:
    """Create an empty registry that rejects plugin actions shadowing system ids"""
    return PluginRegistry(reserved_action_ids=(action.id for action in SYSTEM_ACTIONS))


def build_catalog(registry: PluginRegistry | None) -> list[Action]:
    """System actions followed by every plugin action, in registration order"""

    if registry is None:
        return list(SYSTEM_ACTIONS)

    try:
        plugin_actions = registry.get_all_actions()
    except Exception as e:  # noqa: BLE001 - A broken registry must not take the catalog down, system actions stay usable.
        logger.error(f"Failed to read plugin actions, using system actions only: {e}")
        return list(SYSTEM_ACTIONS)

    return [*SYSTEM_ACTIONS, *plugin_actions]
