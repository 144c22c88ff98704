import asyncio
import os

import typer

from actionkit import __version__
from actionkit.builtin import register_builtin_plugins
from actionkit.catalog.builder import build_catalog, create_registry
from actionkit.catalog.grouping import ActionGrid, GridStatus
from actionkit.catalog.storage import HiddenCategories, JsonFileStore
from actionkit.config import get_settings
from actionkit.plugins.exceptions import CodegenTemplateNotFoundError
from actionkit.plugins.hooks import resolve_codegen_template, run_credential_test
from actionkit.plugins.registry import PluginRegistry
from actionkit.utils import setup_logging

app = typer.Typer(
    help="actionkit CLI - browse and check the workflow action catalog",
    no_args_is_help=True,
)


def _registry() -> PluginRegistry:
    return register_builtin_plugins(create_registry())


def _hidden_categories() -> HiddenCategories:
    return HiddenCategories(JsonFileStore(get_settings().state_file))


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(None, "--log-level", help="Override the log level"),
) -> None:
    setup_logging(log_level or get_settings().log_level)


@app.command()
def version() -> None:
    """Show version information"""
    typer.echo(f"actionkit version {__version__}")


@app.command()
def plugins() -> None:
    """List registered integrations"""
    for plugin in _registry().get_all():
        capabilities = plugin.capabilities()
        testable = "testable" if capabilities.has_test_config else "untestable"
        typer.echo(
            f"{plugin.type:<12} {plugin.label:<16} {capabilities.action_count} actions, {testable}",
        )


@app.command()
def actions(
    filter_text: str = typer.Option("", "--filter", "-f", help="Search text"),
    show_hidden: bool = typer.Option(False, "--show-hidden", help="Include hidden categories"),
) -> None:
    """Show the action catalog grouped by category"""
    grid = ActionGrid(build_catalog(_registry()), _hidden_categories())
    grid.set_filter(filter_text)
    grid.set_show_hidden(show_hidden)
    view = grid.view()

    if view.status is GridStatus.NO_RESULTS:
        typer.echo("No actions found")
        return
    if view.status is GridStatus.ALL_HIDDEN:
        typer.echo(f"All groups are hidden ({view.hidden_count} hidden)")
        return

    for group in view.groups:
        suffix = " (hidden)" if group.hidden else ""
        typer.echo(f"{group.category}{suffix}")
        for action in group.actions:
            typer.echo(f"  {action.id:<28} {action.description}")


@app.command()
def hide(category: str = typer.Argument(..., help="Category to hide or show again")) -> None:
    """Toggle whether a category is hidden"""
    hidden = _hidden_categories().toggle(category)
    typer.echo(f"{category}: {'hidden' if hidden else 'shown'}")


@app.command()
def test(integration_type: str = typer.Argument(..., help="Integration type")) -> None:
    """Check credentials read from the integration's environment variables"""
    plugin = _registry().get(integration_type)
    if plugin is None:
        typer.echo(f"Unknown integration: {integration_type}", err=True)
        raise typer.Exit(code=2)

    credentials = {
        field.env_var: os.environ[field.env_var]
        for field in plugin.form_fields
        if field.env_var and field.env_var in os.environ
    }
    result = asyncio.run(run_credential_test(plugin, credentials))

    if result.success:
        typer.echo(f"{plugin.label}: connection OK")
        return
    typer.echo(f"{plugin.label}: {result.error}", err=True)
    raise typer.Exit(code=1)


@app.command()
def codegen(action_id: str = typer.Argument(..., help="Action id, e.g. linear/find-issues")) -> None:
    """Print the codegen template of a plugin action"""
    found = _registry().get_action(action_id)
    if found is None:
        typer.echo(f"Unknown action: {action_id}", err=True)
        raise typer.Exit(code=2)

    plugin, action = found
    try:
        typer.echo(resolve_codegen_template(plugin, action.slug))
    except CodegenTemplateNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e


@app.command()
def serve() -> None:
    """Run the catalog API server"""
    from actionkit.server import serve as serve_app

    settings = get_settings()
    serve_app(_registry(), store=JsonFileStore(settings.state_file), settings=settings)


def main() -> None:
    """Main entry point for the CLI"""

    app()


if __name__ == "__main__":
    main()
