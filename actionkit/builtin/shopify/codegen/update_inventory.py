CODEGEN_TEMPLATE = '''import os

import httpx


async def update_inventory_step(
    inventory_item_id: str,
    location_id: str,
    adjustment: int,
) -> dict:
    domain = os.environ["SHOPIFY_STORE_DOMAIN"]
    token = os.environ["SHOPIFY_ACCESS_TOKEN"]
    base_url = f"https://{domain}/admin/api/2024-01"
    headers = {"X-Shopify-Access-Token": token}

    async with httpx.AsyncClient() as client:
        levels = await client.get(
            f"{base_url}/inventory_levels.json",
            headers=headers,
            params={"inventory_item_ids": inventory_item_id, "location_ids": location_id},
        )
        levels.raise_for_status()
        current = levels.json()["inventory_levels"]
        previous = current[0]["available"] if current else 0

        response = await client.post(
            f"{base_url}/inventory_levels/adjust.json",
            headers=headers,
            json={
                "inventory_item_id": int(inventory_item_id),
                "location_id": int(location_id),
                "available_adjustment": int(adjustment),
            },
        )
        response.raise_for_status()
        level = response.json()["inventory_level"]

    return {
        "inventoryItemId": str(level["inventory_item_id"]),
        "locationId": str(level["location_id"]),
        "available": level["available"],
        "previousQuantity": previous,
    }
'''
