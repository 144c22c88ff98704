CODEGEN_TEMPLATE = '''import os

import httpx


async def get_order_step(order_id: str) -> dict:
    domain = os.environ["SHOPIFY_STORE_DOMAIN"]
    token = os.environ["SHOPIFY_ACCESS_TOKEN"]

    async with httpx.AsyncClient() as client:
        response = await client.get(
            f"https://{domain}/admin/api/2024-01/orders/{order_id}.json",
            headers={"X-Shopify-Access-Token": token},
        )
        response.raise_for_status()
        order = response.json()["order"]

    return {
        "id": order["id"],
        "orderNumber": order["order_number"],
        "name": order["name"],
        "email": order.get("email"),
        "totalPrice": order["total_price"],
        "currency": order["currency"],
        "financialStatus": order.get("financial_status"),
        "fulfillmentStatus": order.get("fulfillment_status"),
        "createdAt": order["created_at"],
        "lineItems": order.get("line_items", []),
        "shippingAddress": order.get("shipping_address"),
        "customer": order.get("customer"),
    }
'''
