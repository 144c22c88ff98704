CODEGEN_TEMPLATE = '''import os

import httpx


async def list_orders_step(
    status: str = "any",
    financial_status: str = "",
    fulfillment_status: str = "",
    created_at_min: str = "",
    created_at_max: str = "",
    limit: int = 50,
) -> dict:
    domain = os.environ["SHOPIFY_STORE_DOMAIN"]
    token = os.environ["SHOPIFY_ACCESS_TOKEN"]

    params = {"status": status, "limit": limit}
    if financial_status:
        params["financial_status"] = financial_status
    if fulfillment_status:
        params["fulfillment_status"] = fulfillment_status
    if created_at_min:
        params["created_at_min"] = created_at_min
    if created_at_max:
        params["created_at_max"] = created_at_max

    async with httpx.AsyncClient() as client:
        response = await client.get(
            f"https://{domain}/admin/api/2024-01/orders.json",
            headers={"X-Shopify-Access-Token": token},
            params=params,
        )
        response.raise_for_status()
        orders = response.json()["orders"]

    return {"orders": orders, "count": len(orders)}
'''
