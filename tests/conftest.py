"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from actionkit.builtin import register_builtin_plugins
from actionkit.catalog.builder import create_registry
from actionkit.config import get_settings
from actionkit.plugins.registry import PluginRegistry
from actionkit.plugins.schemas import ActionDescriptor, PluginDescriptor


def make_action(slug: str, label: str | None = None, category: str = "", **kwargs) -> ActionDescriptor:
    return ActionDescriptor(
        slug=slug,
        label=label or slug.replace("-", " ").title(),
        description=kwargs.pop("description", f"Does {slug}"),
        category=category,
        step_function=f"{slug.replace('-', '_')}_step",
        step_import_path=slug,
        **kwargs,
    )


def make_plugin(
    type: str = "acme",
    label: str | None = None,
    slugs: tuple[str, ...] = ("one", "two"),
    category: str = "",
    **kwargs,
) -> PluginDescriptor:
    return PluginDescriptor(
        type=type,
        label=label or type.title(),
        actions=[make_action(slug, category=category) for slug in slugs],
        **kwargs,
    )


@pytest.fixture
def registry() -> PluginRegistry:
    """Fresh registry that reserves the system action ids."""
    return create_registry()


@pytest.fixture
def builtin_registry() -> PluginRegistry:
    """Registry populated with the bundled plugins."""
    return register_builtin_plugins(create_registry())


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
