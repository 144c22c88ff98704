"""Tests for the bundled plugins' credential checks."""

import httpx
import pytest

from actionkit.builtin.linear import credentials as linear_credentials
from actionkit.builtin.shopify import credentials as shopify_credentials

SHOPIFY_CREDENTIALS = {
    "SHOPIFY_STORE_DOMAIN": "https://demo.myshopify.com/",
    "SHOPIFY_ACCESS_TOKEN": "shpat_123",
}


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestShopifyCredentials:
    """Tests for the Shopify credential check."""

    @pytest.mark.asyncio
    async def test_missing_domain_skips_network(self):
        """A missing domain fails before any request."""

        def handler(request):
            raise AssertionError("no request expected")

        async with mock_client(handler) as client:
            result = await shopify_credentials.check_credentials(
                {"SHOPIFY_ACCESS_TOKEN": "x"},
                client,
            )

        assert result.success is False
        assert result.error == "SHOPIFY_STORE_DOMAIN is required"

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """A missing token fails with the token's variable name."""
        result = await shopify_credentials.check_credentials({"SHOPIFY_STORE_DOMAIN": "a"})
        assert result.error == "SHOPIFY_ACCESS_TOKEN is required"

    @pytest.mark.asyncio
    async def test_success_normalizes_domain(self):
        """The domain is normalized and the token sent as a header."""
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["token"] = request.headers["X-Shopify-Access-Token"]
            return httpx.Response(200, json={"shop": {"name": "Demo", "email": "a@b.c"}})

        async with mock_client(handler) as client:
            result = await shopify_credentials.check_credentials(SHOPIFY_CREDENTIALS, client)

        assert result.success is True
        assert result.error is None
        assert seen["url"] == "https://demo.myshopify.com/admin/api/2024-01/shop.json"
        assert seen["token"] == "shpat_123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (401, "Invalid access token"),
            (404, "Store not found"),
            (500, "API validation failed: HTTP 500"),
        ],
    )
    async def test_error_statuses(self, status, message):
        """Upstream statuses map to distinct messages."""
        async with mock_client(lambda request: httpx.Response(status)) as client:
            result = await shopify_credentials.check_credentials(SHOPIFY_CREDENTIALS, client)

        assert result.success is False
        assert result.error.startswith(message)

    @pytest.mark.asyncio
    async def test_missing_shop_name(self):
        """A response without a shop name is not a verified connection."""
        async with mock_client(lambda request: httpx.Response(200, json={})) as client:
            result = await shopify_credentials.check_credentials(SHOPIFY_CREDENTIALS, client)

        assert result.error == "Failed to verify Shopify connection"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Network failures become a failed result carrying the message."""

        def handler(request):
            raise httpx.ConnectError("connection refused")

        async with mock_client(handler) as client:
            result = await shopify_credentials.check_credentials(SHOPIFY_CREDENTIALS, client)

        assert result.success is False
        assert result.error == "connection refused"

    def test_normalize_store_domain(self):
        """Protocol and trailing slash are stripped."""
        assert shopify_credentials.normalize_store_domain("http://a.myshopify.com/") == "a.myshopify.com"
        assert shopify_credentials.normalize_store_domain("a.myshopify.com") == "a.myshopify.com"


class TestLinearCredentials:
    """Tests for the Linear credential check."""

    @pytest.mark.asyncio
    async def test_missing_key(self):
        """A missing API key fails without a request."""
        result = await linear_credentials.check_credentials({})
        assert result.error == "LINEAR_API_KEY is required"

    @pytest.mark.asyncio
    async def test_success(self):
        """A viewer in the response verifies the key."""
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(200, json={"data": {"viewer": {"id": "u1", "name": "Jane"}}})

        async with mock_client(handler) as client:
            result = await linear_credentials.check_credentials({"LINEAR_API_KEY": "lin_api_1"}, client)

        assert result.success is True
        assert seen["auth"] == "lin_api_1"

    @pytest.mark.asyncio
    async def test_invalid_key(self):
        """Unauthorized responses report an invalid key."""
        async with mock_client(lambda request: httpx.Response(401)) as client:
            result = await linear_credentials.check_credentials({"LINEAR_API_KEY": "bad"}, client)

        assert result.error.startswith("Invalid API key")

    @pytest.mark.asyncio
    async def test_graphql_error(self):
        """GraphQL errors are surfaced as the failure reason."""
        body = {"errors": [{"message": "Authentication required"}]}
        async with mock_client(lambda request: httpx.Response(200, json=body)) as client:
            result = await linear_credentials.check_credentials({"LINEAR_API_KEY": "bad"}, client)

        assert result == linear_credentials.CredentialTestResult(
            success=False,
            error="Authentication required",
        )
