"""Picks a configured integration instance to bind to a workflow node"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel

from actionkit.integrations.schemas import IntegrationInstance
from actionkit.integrations.store import IntegrationInstanceStore
from actionkit.plugins.schemas import IntegrationType

NEW_OPTION = "__new__"
MANAGE_OPTION = "__manage__"


class SelectorStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


PLACEHOLDERS = {
    SelectorStatus.LOADING: "Loading integrations...",
    SelectorStatus.EMPTY: "No integrations configured",
    SelectorStatus.READY: "Select integration...",
}


class SelectorOption(BaseModel):
    value: str
    label: str
    kind: Literal["new", "manage", "instance"]


class IntegrationSelector:
    """Selection state for one integration type.

    When exactly one instance exists and nothing is selected, that instance
    is selected automatically. This happens at most once per integration
    type and never after the user has made a choice.
    """

    def __init__(
        self,
        store: IntegrationInstanceStore,
        integration_type: IntegrationType,
        on_change: Callable[[str], Any],
        value: str | None = None,
        on_open_settings: Callable[[], Any] | None = None,
    ):
        self.store = store
        self.integration_type = integration_type
        self.on_change = on_change
        self.on_open_settings = on_open_settings
        self.value = value
        self.instances: list[IntegrationInstance] = []
        self.loading = True
        self.dialog_open = False
        self._generation = 0
        # An initial selection counts as a choice
        self._auto_select_armed = not value

    @property
    def status(self) -> SelectorStatus:
        if self.loading:
            return SelectorStatus.LOADING
        if not self.instances:
            return SelectorStatus.EMPTY
        return SelectorStatus.READY

    @property
    def placeholder(self) -> str:
        return PLACEHOLDERS[self.status]

    def options(self) -> list[SelectorOption]:
        options = [
            SelectorOption(value=NEW_OPTION, label="New Integration", kind="new"),
            SelectorOption(value=MANAGE_OPTION, label="Manage Integrations", kind="manage"),
        ]
        options.extend(
            SelectorOption(value=instance.id, label=instance.name, kind="instance")
            for instance in self.instances
        )
        return options

    async def refresh(self) -> list[IntegrationInstance]:
        """Reload instances of the current type; a superseded result is dropped"""

        self._generation += 1
        generation = self._generation
        integration_type = self.integration_type
        self.loading = True

        try:
            instances = await self.store.list_instances()
        except Exception as e:  # noqa: BLE001 - The store is an external collaborator, a failed fetch shows as "no integrations".
            logger.error(f"Failed to load integrations: {e}")
            instances = []

        if generation != self._generation or integration_type != self.integration_type:
            logger.debug(f"Discarding stale integration list for '{integration_type}'")
            return self.instances

        self.instances = [i for i in instances if i.type == integration_type]
        self.loading = False
        self._maybe_auto_select()
        return self.instances

    def _maybe_auto_select(self) -> None:
        if self.value:
            self._auto_select_armed = False
        if not self._auto_select_armed or len(self.instances) != 1:
            return
        self._auto_select_armed = False
        self.value = self.instances[0].id
        logger.debug(f"Auto-selecting the only {self.integration_type} integration")
        self.on_change(self.value)

    def choose(self, value: str) -> None:
        if value == NEW_OPTION:
            self.dialog_open = True
        elif value == MANAGE_OPTION:
            if self.on_open_settings is not None:
                self.on_open_settings()
        else:
            self._auto_select_armed = False
            self.value = value
            self.on_change(value)

    def close_dialog(self) -> None:
        self.dialog_open = False

    async def create_new(self, config: dict[str, Any]) -> str | None:
        """Create an instance through the store and select it; None on failure"""

        try:
            integration_id = await self.store.create_instance(self.integration_type, config)
        except Exception as e:  # noqa: BLE001 - The store is an external collaborator, the dialog stays open for another attempt.
            logger.error(f"Failed to create {self.integration_type} integration: {e}")
            return None

        self._auto_select_armed = False
        await self.refresh()
        self.value = integration_id
        self.on_change(integration_id)
        self.dialog_open = False
        return integration_id

    async def set_value(self, value: str | None) -> None:
        """Apply a selection made outside the selector and resync"""
        self._auto_select_armed = False
        self.value = value
        await self.refresh()

    async def set_integration_type(self, integration_type: IntegrationType) -> None:
        if integration_type != self.integration_type:
            self.integration_type = integration_type
            self._auto_select_armed = True
            self.instances = []
        await self.refresh()
