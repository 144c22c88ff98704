CODEGEN_TEMPLATE = '''import os

import httpx


async def create_product_step(
    title: str,
    body_html: str = "",
    vendor: str = "",
    product_type: str = "",
    tags: str = "",
    status: str = "draft",
    price: str = "",
    sku: str = "",
    inventory_quantity: int = 0,
) -> dict:
    domain = os.environ["SHOPIFY_STORE_DOMAIN"]
    token = os.environ["SHOPIFY_ACCESS_TOKEN"]

    product = {"title": title, "status": status}
    if body_html:
        product["body_html"] = body_html
    if vendor:
        product["vendor"] = vendor
    if product_type:
        product["product_type"] = product_type
    if tags:
        product["tags"] = tags
    if price or sku:
        variant = {"inventory_quantity": inventory_quantity}
        if price:
            variant["price"] = price
        if sku:
            variant["sku"] = sku
        product["variants"] = [variant]

    async with httpx.AsyncClient() as client:
        response = await client.post(
            f"https://{domain}/admin/api/2024-01/products.json",
            headers={"X-Shopify-Access-Token": token},
            json={"product": product},
        )
        response.raise_for_status()
        created = response.json()["product"]

    return {
        "id": created["id"],
        "title": created["title"],
        "handle": created["handle"],
        "status": created["status"],
        "variants": created.get("variants", []),
        "createdAt": created["created_at"],
    }
'''
