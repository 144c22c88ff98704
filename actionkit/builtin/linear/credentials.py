from __future__ import annotations

from collections.abc import Mapping

import httpx

from actionkit.plugins.schemas import CredentialTestResult

GRAPHQL_URL = "https://api.linear.app/graphql"
VIEWER_QUERY = "query { viewer { id name } }"


async def check_credentials(
    credentials: Mapping[str, str],
    client: httpx.AsyncClient | None = None,
) -> CredentialTestResult:
    api_key = credentials.get("LINEAR_API_KEY")
    if not api_key:
        return CredentialTestResult.failed("LINEAR_API_KEY is required")

    headers = {"Authorization": api_key, "Content-Type": "application/json"}
    payload = {"query": VIEWER_QUERY}

    try:
        if client is not None:
            response = await client.post(GRAPHQL_URL, headers=headers, json=payload)
        else:
            async with httpx.AsyncClient(timeout=30.0) as http:
                response = await http.post(GRAPHQL_URL, headers=headers, json=payload)

        # Linear answers bad keys with 400 or 401
        if response.status_code in (400, 401):
            return CredentialTestResult.failed(
                "Invalid API key. Please check your Linear API key.",
            )
        if not response.is_success:
            return CredentialTestResult.failed(
                f"API validation failed: HTTP {response.status_code}",
            )

        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        return CredentialTestResult.failed(str(e))

    if isinstance(data, dict) and data.get("errors"):
        return CredentialTestResult.failed(data["errors"][0].get("message", "Linear API error"))

    viewer = (data.get("data") or {}).get("viewer") if isinstance(data, dict) else None
    if not viewer or not viewer.get("id"):
        return CredentialTestResult.failed("Failed to verify Linear connection")

    return CredentialTestResult.ok()
