"""Shopify - orders, products and inventory"""

from actionkit.plugins.schemas import (
    ActionDescriptor,
    ConfigField,
    ConfigFieldOption,
    CredentialTestConfig,
    FormField,
    HelpLink,
    OutputField,
    PluginDescriptor,
)


def _options(*pairs: tuple[str, str]) -> list[ConfigFieldOption]:
    return [ConfigFieldOption(value=value, label=label) for value, label in pairs]


plugin = PluginDescriptor(
    type="shopify",
    label="Shopify",
    description="Manage orders, products, and inventory in your Shopify store",
    icon="shopify",
    form_fields=[
        FormField(
            id="storeDomain",
            label="Store Domain",
            type="text",
            placeholder="your-store.myshopify.com",
            config_key="storeDomain",
            env_var="SHOPIFY_STORE_DOMAIN",
            help_text="Your Shopify store domain (e.g., your-store.myshopify.com)",
        ),
        FormField(
            id="accessToken",
            label="Admin API Access Token",
            type="password",
            placeholder="shpat_...",
            config_key="accessToken",
            env_var="SHOPIFY_ACCESS_TOKEN",
            help_text="Create an access token from ",
            help_link=HelpLink(
                text="Shopify Admin > Apps > Develop apps",
                url="https://help.shopify.com/en/manual/apps/app-types/custom-apps",
            ),
        ),
    ],
    test_config=CredentialTestConfig.from_import_path(
        "actionkit.builtin.shopify.credentials:check_credentials",
    ),
    codegen_package="actionkit.builtin.shopify.codegen",
    actions=[
        ActionDescriptor(
            slug="get-order",
            label="Get Order",
            description="Retrieve details of a specific order by ID",
            category="Shopify",
            step_function="get_order_step",
            step_import_path="get-order",
            output_fields=[
                OutputField(field="id", description="Unique ID of the order"),
                OutputField(field="orderNumber", description="Human-readable order number"),
                OutputField(field="name", description="Order name (e.g., #1001)"),
                OutputField(field="email", description="Customer email address"),
                OutputField(field="totalPrice", description="Total price of the order"),
                OutputField(field="currency", description="Currency code (e.g., USD)"),
                OutputField(
                    field="financialStatus",
                    description="Payment status (pending, paid, refunded, etc.)",
                ),
                OutputField(
                    field="fulfillmentStatus",
                    description="Fulfillment status (unfulfilled, fulfilled, partial)",
                ),
                OutputField(field="createdAt", description="ISO timestamp when order was created"),
                OutputField(field="lineItems", description="Array of line item objects"),
                OutputField(
                    field="shippingAddress",
                    description="Shipping address object (if available)",
                ),
                OutputField(field="customer", description="Customer information object"),
            ],
            config_fields=[
                ConfigField(
                    key="orderId",
                    label="Order ID",
                    type="template-input",
                    placeholder="450789469 or {{NodeName.orderId}}",
                    example="450789469",
                    required=True,
                ),
            ],
        ),
        ActionDescriptor(
            slug="list-orders",
            label="List Orders",
            description="Search and list orders with optional filters",
            category="Shopify",
            step_function="list_orders_step",
            step_import_path="list-orders",
            output_fields=[
                OutputField(field="orders", description="Array of order objects"),
                OutputField(field="count", description="Number of orders returned"),
            ],
            config_fields=[
                ConfigField(
                    key="status",
                    label="Order Status",
                    type="select",
                    default_value="any",
                    options=_options(
                        ("any", "Any"),
                        ("open", "Open"),
                        ("closed", "Closed"),
                        ("cancelled", "Cancelled"),
                    ),
                ),
                ConfigField(
                    key="financialStatus",
                    label="Financial Status",
                    type="select",
                    default_value="",
                    options=_options(
                        ("", "Any"),
                        ("pending", "Pending"),
                        ("paid", "Paid"),
                        ("refunded", "Refunded"),
                        ("voided", "Voided"),
                        ("partially_refunded", "Partially Refunded"),
                    ),
                ),
                ConfigField(
                    key="fulfillmentStatus",
                    label="Fulfillment Status",
                    type="select",
                    default_value="",
                    options=_options(
                        ("", "Any"),
                        ("unfulfilled", "Unfulfilled"),
                        ("fulfilled", "Fulfilled"),
                        ("partial", "Partial"),
                    ),
                ),
                ConfigField(
                    key="createdAtMin",
                    label="Created After (ISO date)",
                    type="template-input",
                    placeholder="2024-01-01 or {{NodeName.date}}",
                ),
                ConfigField(
                    key="createdAtMax",
                    label="Created Before (ISO date)",
                    type="template-input",
                    placeholder="2024-12-31 or {{NodeName.date}}",
                ),
                ConfigField(
                    key="limit",
                    label="Limit",
                    type="number",
                    min=1,
                    default_value="50",
                ),
            ],
        ),
        ActionDescriptor(
            slug="create-product",
            label="Create Product",
            description="Create a new product in your Shopify store",
            category="Shopify",
            step_function="create_product_step",
            step_import_path="create-product",
            output_fields=[
                OutputField(field="id", description="Unique ID of the created product"),
                OutputField(field="title", description="Title of the product"),
                OutputField(field="handle", description="URL-friendly handle for the product"),
                OutputField(field="status", description="Product status (active, draft, archived)"),
                OutputField(field="variants", description="Array of product variants"),
                OutputField(field="createdAt", description="ISO timestamp when product was created"),
            ],
            config_fields=[
                ConfigField(
                    key="title",
                    label="Product Title",
                    type="template-input",
                    placeholder="Awesome T-Shirt or {{NodeName.title}}",
                    example="Awesome T-Shirt",
                    required=True,
                ),
                ConfigField(
                    key="bodyHtml",
                    label="Description (HTML)",
                    type="template-textarea",
                    placeholder="<p>Product description...</p>",
                    rows=4,
                    example="<p>A comfortable cotton t-shirt</p>",
                ),
                ConfigField(
                    key="vendor",
                    label="Vendor",
                    type="template-input",
                    placeholder="Your Brand or {{NodeName.vendor}}",
                    example="Acme Inc",
                ),
                ConfigField(
                    key="productType",
                    label="Product Type",
                    type="template-input",
                    placeholder="T-Shirts or {{NodeName.type}}",
                    example="Clothing",
                ),
                ConfigField(
                    key="tags",
                    label="Tags (comma-separated)",
                    type="template-input",
                    placeholder="summer, sale, new",
                    example="summer, featured",
                ),
                ConfigField(
                    key="status",
                    label="Status",
                    type="select",
                    default_value="draft",
                    options=_options(
                        ("draft", "Draft"),
                        ("active", "Active"),
                        ("archived", "Archived"),
                    ),
                ),
                ConfigField(
                    key="price",
                    label="Price",
                    type="template-input",
                    placeholder="29.99 or {{NodeName.price}}",
                    example="29.99",
                ),
                ConfigField(
                    key="sku",
                    label="SKU",
                    type="template-input",
                    placeholder="TSHIRT-001 or {{NodeName.sku}}",
                    example="TSHIRT-001",
                ),
                ConfigField(
                    key="inventoryQuantity",
                    label="Inventory Quantity",
                    type="number",
                    min=0,
                    default_value="0",
                ),
            ],
        ),
        ActionDescriptor(
            slug="update-inventory",
            label="Update Inventory",
            description="Update inventory levels for a product variant",
            category="Shopify",
            step_function="update_inventory_step",
            step_import_path="update-inventory",
            output_fields=[
                OutputField(field="inventoryItemId", description="ID of the inventory item updated"),
                OutputField(field="locationId", description="ID of the inventory location"),
                OutputField(field="available", description="New available inventory quantity"),
                OutputField(field="previousQuantity", description="Previous inventory quantity"),
            ],
            config_fields=[
                ConfigField(
                    key="inventoryItemId",
                    label="Inventory Item ID",
                    type="template-input",
                    placeholder="808950810 or {{NodeName.inventoryItemId}}",
                    example="808950810",
                    required=True,
                ),
                ConfigField(
                    key="locationId",
                    label="Location ID",
                    type="template-input",
                    placeholder="655441491 or {{NodeName.locationId}}",
                    example="655441491",
                    required=True,
                ),
                ConfigField(
                    key="adjustment",
                    label="Quantity Adjustment",
                    type="template-input",
                    placeholder="10 or -5 or {{NodeName.adjustment}}",
                    example="10",
                    required=True,
                ),
            ],
        ),
    ],
)
