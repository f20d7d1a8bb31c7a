"""
Product Tools

Products, their prices, inventory and collections. Inventory and
collection endpoints address the location as `altId`.
"""

from ..base import Operation, optional, required

CATEGORY = "product"

PRODUCT_ID = required("productId", "string", "Product ID")
PRODUCT_TYPES = ["DIGITAL", "PHYSICAL", "SERVICE", "PHYSICAL/DIGITAL"]

OPERATIONS = [
    Operation(
        "create_product", "Create a new product in GoHighLevel",
        "POST", "/products/",
        [
            required("name", "string", "Product name"),
            required("productType", "string", "Type of product", enum=PRODUCT_TYPES),
            optional("description", "string", "Product description"),
            optional("image", "string", "Product image URL"),
            optional("availableInStore", "boolean", "Whether product is available in store"),
            optional("slug", "string", "Product URL slug"),
        ],
    ),
    Operation(
        "list_products", "List products with optional filtering",
        "GET", "/products/",
        [
            optional("limit", "number", "Maximum number of products to return"),
            optional("offset", "number", "Number of products to skip"),
            optional("search", "string", "Search term for product names"),
            optional("storeId", "string", "Filter by store ID"),
            optional("includedInStore", "boolean", "Filter by store inclusion status"),
            optional("availableInStore", "boolean", "Filter by store availability"),
        ],
    ),
    Operation(
        "get_product", "Get a specific product by ID",
        "GET", "/products/{productId}",
        [PRODUCT_ID],
    ),
    Operation(
        "update_product", "Update an existing product",
        "PUT", "/products/{productId}",
        [
            PRODUCT_ID,
            optional("name", "string", "Product name"),
            optional("productType", "string", "Type of product", enum=PRODUCT_TYPES),
            optional("description", "string", "Product description"),
            optional("image", "string", "Product image URL"),
            optional("availableInStore", "boolean", "Whether product is available in store"),
        ],
    ),
    Operation(
        "delete_product", "Delete a product by ID",
        "DELETE", "/products/{productId}",
        [PRODUCT_ID],
    ),
    Operation(
        "create_price", "Create a price for a product",
        "POST", "/products/{productId}/price",
        [
            PRODUCT_ID,
            required("name", "string", "Price name/variant name"),
            required("type", "string", "Price type", enum=["one_time", "recurring"]),
            required("currency", "string", "Currency code (e.g., USD)"),
            required("amount", "number", "Price amount in cents"),
            optional("compareAtPrice", "number", "Compare at price (for discounts)"),
        ],
    ),
    Operation(
        "list_prices", "List prices for a product",
        "GET", "/products/{productId}/price",
        [
            PRODUCT_ID,
            optional("limit", "number", "Maximum number of prices to return"),
            optional("offset", "number", "Number of prices to skip"),
        ],
    ),
    Operation(
        "list_inventory", "List inventory items with stock levels",
        "GET", "/products/inventory",
        [
            optional("limit", "number", "Maximum number of items to return"),
            optional("offset", "number", "Number of items to skip"),
            optional("search", "string", "Search term for inventory items"),
        ],
        location_key="altId", extra={"altType": "location"},
    ),
    Operation(
        "create_product_collection", "Create a new product collection",
        "POST", "/products/collections",
        [
            required("name", "string", "Collection name"),
            required("slug", "string", "Collection URL slug"),
            optional("image", "string", "Collection image URL"),
            optional("seo", "object", "SEO settings: {title, description}"),
        ],
        location_key="altId", extra={"altType": "location"},
    ),
    Operation(
        "list_product_collections", "List product collections",
        "GET", "/products/collections",
        [
            optional("limit", "number", "Maximum number of collections to return"),
            optional("offset", "number", "Number of collections to skip"),
            optional("name", "string", "Search by collection name"),
        ],
        location_key="altId", extra={"altType": "location"},
    ),
]
