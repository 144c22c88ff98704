"""Tests for the catalog API."""

import pytest
from fastapi.testclient import TestClient

from actionkit.accounts.linking import MemoryAccountLinkingService
from actionkit.accounts.schemas import LinkedAccount
from actionkit.catalog.storage import MemoryStore
from actionkit.config import Settings
from actionkit.server import create_app
from tests.conftest import make_plugin


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def client(builtin_registry, store):
    app = create_app(builtin_registry, store=store, settings=Settings())
    return TestClient(app)


class TestPluginEndpoints:
    """Tests for plugin listing and credential tests."""

    def test_health(self, client):
        """Health reports the plugin count."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "plugins": 2, "service": "actionkit"}

    def test_list_plugins(self, client):
        """Plugins are listed in registration order."""
        data = client.get("/plugins").json()

        assert [p["type"] for p in data] == ["linear", "shopify"]
        shopify = data[1]
        assert shopify["action_count"] == 4
        assert shopify["testable"] is True
        assert shopify["form_fields"][0]["envVar"] == "SHOPIFY_STORE_DOMAIN"

    def test_get_plugin(self, client):
        """A descriptor is returned in camelCase without the test accessor."""
        data = client.get("/plugins/shopify").json()

        assert data["type"] == "shopify"
        assert data["actions"][0]["stepImportPath"] == "get-order"
        assert "testConfig" not in data

    def test_get_unknown_plugin(self, client):
        """Unknown integration types are 404s."""
        assert client.get("/plugins/nope").status_code == 404

    def test_credential_test_missing_field(self, client):
        """Missing credentials fail without a network call."""
        response = client.post("/integrations/shopify/test", json={})

        assert response.status_code == 200
        assert response.json() == {"success": False, "error": "SHOPIFY_STORE_DOMAIN is required"}

    def test_credential_test_unknown_type(self, client):
        """Testing an unknown integration is a 404."""
        assert client.post("/integrations/nope/test", json={}).status_code == 404


class TestCatalogEndpoints:
    """Tests for the catalog and visibility endpoints."""

    def test_actions(self, client):
        """The flat catalog starts with the system actions."""
        data = client.get("/actions").json()

        assert [a["id"] for a in data[:3]] == ["HTTP Request", "Database Query", "Condition"]
        assert data[3]["integration"] == "linear"

    def test_catalog_groups(self, client):
        """Groups are ordered System first, then by name."""
        data = client.get("/catalog").json()

        assert data["status"] == "ready"
        assert [g["category"] for g in data["groups"]] == ["System", "Linear", "Shopify"]
        assert data["groups"][0]["icon"]["kind"] == "system"

    def test_hide_then_filter_reaches_all_hidden(self, client, store):
        """Hiding Shopify and searching for orders leaves every group hidden."""
        toggle = client.post("/categories/Shopify/toggle-hidden").json()
        assert toggle == {"category": "Shopify", "hidden": True}

        data = client.get("/catalog", params={"filter": "order"}).json()
        assert data["status"] == "all_hidden"
        assert data["groups"] == []
        assert data["hidden_count"] == 1

        shown = client.get("/catalog", params={"filter": "order", "show_hidden": True}).json()
        assert shown["status"] == "ready"
        assert [g["category"] for g in shown["groups"]] == ["Shopify"]

    def test_no_results(self, client):
        """A filter matching nothing is reported as no results."""
        data = client.get("/catalog", params={"filter": "zzz"}).json()
        assert data["status"] == "no_results"

    def test_codegen(self, client):
        """Codegen templates are returned for plugin actions."""
        response = client.get("/codegen/linear/find-issues")

        assert response.status_code == 200
        data = response.json()
        assert data["stepFunction"] == "find_issues_step"
        assert "async def find_issues_step" in data["template"]

    def test_codegen_shopify_actions(self, client):
        """Every Shopify action serves its template."""
        for slug in ("get-order", "list-orders", "create-product", "update-inventory"):
            response = client.get(f"/codegen/shopify/{slug}")
            assert response.status_code == 200, slug

    def test_codegen_missing_template(self, registry, store):
        """Actions without a template map to 404."""
        registry.register(
            make_plugin(slugs=("absent",), codegen_package="actionkit.builtin.shopify.codegen"),
        )
        client = TestClient(create_app(registry, store=store, settings=Settings()))

        response = client.get("/codegen/acme/absent")

        assert response.status_code == 404
        assert response.json()["error"] == "Codegen Template Not Found"

    def test_codegen_unknown_action(self, client):
        """Unknown action ids are 404s."""
        assert client.get("/codegen/HTTP Request").status_code == 404


class TestTeamsEndpoint:
    """Tests for the teams endpoint guards."""

    def make_client(self, registry, **settings):
        linking = MemoryAccountLinkingService(
            [LinkedAccount(user_id="user-1", provider_id="vercel", access_token="tok")],
        )
        app = create_app(registry, linking=linking, settings=Settings(**settings))
        return TestClient(app)

    def test_feature_disabled(self, builtin_registry):
        """Disabled feature answers 403."""
        client = self.make_client(builtin_registry, ai_gateway_managed_keys_enabled=False)
        response = client.get("/ai-gateway/teams", headers={"X-User-Id": "user-1"})

        assert response.status_code == 403
        assert response.json()["error"] == "Feature not enabled"

    def test_not_authenticated(self, builtin_registry):
        """Requests without a user answer 401."""
        client = self.make_client(builtin_registry, ai_gateway_managed_keys_enabled=True)
        assert client.get("/ai-gateway/teams").status_code == 401

    def test_no_linked_account(self, builtin_registry):
        """Users without a linked account answer 400."""
        client = self.make_client(builtin_registry, ai_gateway_managed_keys_enabled=True)
        response = client.get("/ai-gateway/teams", headers={"X-User-Id": "user-2"})

        assert response.status_code == 400
        assert response.json()["detail"] == "No Vercel account linked"
