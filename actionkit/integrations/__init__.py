"""Integrations domain - configured instances and how nodes select them"""

from actionkit.integrations.schemas import IntegrationDefinition, IntegrationInstance
from actionkit.integrations.selector import (
    MANAGE_OPTION,
    NEW_OPTION,
    IntegrationSelector,
    SelectorOption,
    SelectorStatus,
)
from actionkit.integrations.store import HttpIntegrationStore, IntegrationInstanceStore

__all__ = [
    "MANAGE_OPTION",
    "NEW_OPTION",
    "HttpIntegrationStore",
    "IntegrationDefinition",
    "IntegrationInstance",
    "IntegrationInstanceStore",
    "IntegrationSelector",
    "SelectorOption",
    "SelectorStatus",
]
