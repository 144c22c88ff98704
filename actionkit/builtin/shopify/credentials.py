from __future__ import annotations

import re
from collections.abc import Mapping

import httpx

from actionkit.plugins.schemas import CredentialTestResult

API_VERSION = "2024-01"

_PROTOCOL_RE = re.compile(r"^https?://")


def normalize_store_domain(domain: str) -> str:
    """Strip the protocol and a trailing slash from a store domain"""
    return _PROTOCOL_RE.sub("", domain).removesuffix("/")


async def check_credentials(
    credentials: Mapping[str, str],
    client: httpx.AsyncClient | None = None,
) -> CredentialTestResult:
    store_domain = credentials.get("SHOPIFY_STORE_DOMAIN")
    access_token = credentials.get("SHOPIFY_ACCESS_TOKEN")

    if not store_domain:
        return CredentialTestResult.failed("SHOPIFY_STORE_DOMAIN is required")
    if not access_token:
        return CredentialTestResult.failed("SHOPIFY_ACCESS_TOKEN is required")

    url = f"https://{normalize_store_domain(store_domain)}/admin/api/{API_VERSION}/shop.json"
    headers = {
        "X-Shopify-Access-Token": access_token,
        "Content-Type": "application/json",
    }

    try:
        if client is not None:
            response = await client.get(url, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=30.0) as http:
                response = await http.get(url, headers=headers)

        if response.status_code == 401:
            return CredentialTestResult.failed(
                "Invalid access token. Please check your Shopify Admin API access token.",
            )
        if response.status_code == 404:
            return CredentialTestResult.failed(
                "Store not found. Please check your store domain (e.g., your-store.myshopify.com).",
            )
        if not response.is_success:
            return CredentialTestResult.failed(
                f"API validation failed: HTTP {response.status_code}",
            )

        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        return CredentialTestResult.failed(str(e))

    shop = data.get("shop") if isinstance(data, dict) else None
    if not isinstance(shop, dict) or not shop.get("name"):
        return CredentialTestResult.failed("Failed to verify Shopify connection")

    return CredentialTestResult.ok()
