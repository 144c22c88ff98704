from __future__ import annotations

from typing import Callable, cast

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from uvicorn import Config, Server

from actionkit.__version__ import __version__
from actionkit.accounts.directory import get_teams
from actionkit.accounts.exceptions import (
    FeatureDisabledError,
    NoLinkedAccountError,
    NotAuthenticatedError,
)
from actionkit.accounts.linking import AccountLinkingService, MemoryAccountLinkingService
from actionkit.accounts.schemas import TeamsResponse
from actionkit.catalog.builder import build_catalog
from actionkit.catalog.grouping import ActionGrid, GridView
from actionkit.catalog.storage import HiddenCategories, KeyValueStore, MemoryStore
from actionkit.config import Settings, get_settings
from actionkit.integrations.schemas import IntegrationDefinition
from actionkit.plugins.exceptions import (
    CodegenTemplateNotFoundError,
    PluginValidationError,
    RegistrationError,
)
from actionkit.plugins.hooks import resolve_codegen_template, run_credential_test
from actionkit.plugins.registry import PluginRegistry
from actionkit.plugins.schemas import Action, CredentialTestResult

# Exception handler configuration: (status_code, error_message, detail_extractor)
EXCEPTION_HANDLERS: dict[
    type[Exception],
    tuple[int, str, Callable[[Exception], str | list]],
] = {
    ValueError: (400, "Bad Request", str),
    ValidationError: (
        422,
        "Validation Error",
        lambda e: cast("ValidationError", e).errors(),
    ),
    PluginValidationError: (400, "Plugin Validation Error", str),
    RegistrationError: (409, "Registration Error", str),
    CodegenTemplateNotFoundError: (404, "Codegen Template Not Found", str),
    FeatureDisabledError: (403, "Feature not enabled", str),
    NotAuthenticatedError: (401, "Not authenticated", str),
    NoLinkedAccountError: (400, "No linked account", str),
    Exception: (500, "Internal Server Error", lambda _: "An unexpected error occurred"),
}


def _register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers from EXCEPTION_HANDLERS configuration"""

    def create_handler(
        exc_type: type[Exception],
        status_code: int,
        error_message: str,
        detail_extractor: Callable[[Exception], str | list],
    ):
        async def handler(_: Request, exc: Exception) -> JSONResponse:
            logger.error(f"{exc_type.__name__}: {exc}")
            detail = detail_extractor(exc)
            return JSONResponse(
                status_code=status_code,
                content={"error": error_message, "detail": detail},
            )

        return handler

    for exc_type, (
        status_code,
        error_message,
        detail_extractor,
    ) in EXCEPTION_HANDLERS.items():
        handler = create_handler(exc_type, status_code, error_message, detail_extractor)
        app.add_exception_handler(exc_type, handler)


def create_app(
    registry: PluginRegistry,
    store: KeyValueStore | None = None,
    linking: AccountLinkingService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Generates the catalog API for a populated registry"""

    settings = settings or get_settings()
    store = store if store is not None else MemoryStore()
    linking = linking if linking is not None else MemoryAccountLinkingService()

    logger.debug(f"Generating catalog API for {len(registry)} plugins")

    app = FastAPI(
        title="actionkit",
        description="Action catalog API for workflow builders",
        version=__version__,
    )

    _register_exception_handlers(app)

    def _get_plugin(integration_type: str):
        plugin = registry.get(integration_type)
        if plugin is None:
            error_msg = f"Integration '{integration_type}' not found. Available integrations: {registry.types()}"
            logger.error(error_msg)
            raise HTTPException(status_code=404, detail=error_msg)
        return plugin

    # =============================================================================
    # SYSTEM ENDPOINTS
    # =============================================================================

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint"""
        return {
            "status": "healthy",
            "plugins": len(registry),
            "service": "actionkit",
        }

    # =============================================================================
    # PLUGIN ENDPOINTS
    # =============================================================================

    @app.get("/plugins")
    def list_plugins() -> list[IntegrationDefinition]:
        """List registered integrations in registration order"""
        return [IntegrationDefinition.from_plugin(plugin) for plugin in registry.get_all()]

    @app.get("/plugins/{integration_type}")
    def get_plugin(integration_type: str) -> dict:
        """Full descriptor of one integration"""
        return _get_plugin(integration_type).model_dump(by_alias=True)

    @app.post("/integrations/{integration_type}/test")
    async def test_integration(
        integration_type: str,
        credentials: dict[str, str],
    ) -> CredentialTestResult:
        """Check credentials against the integration's own test"""
        logger.info(f"Testing credentials for integration: {integration_type}")
        return await run_credential_test(_get_plugin(integration_type), credentials)

    # =============================================================================
    # CATALOG ENDPOINTS
    # =============================================================================

    @app.get("/actions")
    def list_actions() -> list[Action]:
        """Flat catalog: system actions, then plugin actions"""
        return build_catalog(registry)

    @app.get("/catalog")
    def get_catalog(filter: str = "", show_hidden: bool = False) -> GridView:
        """Grouped catalog as shown in the action picker"""
        grid = ActionGrid(build_catalog(registry), HiddenCategories(store))
        grid.set_filter(filter)
        grid.set_show_hidden(show_hidden)
        return grid.view()

    @app.post("/categories/{category}/toggle-hidden")
    def toggle_category(category: str) -> dict:
        """Hide a shown category or show a hidden one"""
        hidden = HiddenCategories(store).toggle(category)
        return {"category": category, "hidden": hidden}

    @app.get("/codegen/{action_id:path}")
    def get_codegen(action_id: str) -> dict:
        """Codegen template for a plugin action"""
        found = registry.get_action(action_id)
        if found is None:
            raise HTTPException(status_code=404, detail=f"Action '{action_id}' not found")

        plugin, action = found
        return {
            "actionId": action_id,
            "stepFunction": action.step_function,
            "template": resolve_codegen_template(plugin, action.slug),
        }

    # =============================================================================
    # ACCOUNT ENDPOINTS
    # =============================================================================

    @app.get("/ai-gateway/teams")
    async def list_teams(x_user_id: str | None = Header(default=None)) -> TeamsResponse:
        """Personal account and teams of the linked provider account"""
        return await get_teams(x_user_id, settings, linking)

    return app


def serve(
    registry: PluginRegistry,
    store: KeyValueStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Serves the catalog API with uvicorn"""

    settings = settings or get_settings()
    fastapi_app = create_app(registry, store=store, settings=settings)

    logger.debug(f"Serving catalog API on {settings.host}:{settings.port}")

    config = Config(
        fastapi_app,
        log_level=settings.log_level.lower(),
        host=settings.host,
        port=settings.port,
        use_colors=True,
    )
    server = Server(config)
    server.run()

    return fastapi_app
