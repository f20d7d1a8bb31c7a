"""
Payment Tools

White-label integration providers, orders, fulfillments, transactions,
subscriptions, coupons and custom payment providers.
"""

from ..base import Operation, optional, required

CATEGORY = "payment"

ALT = {"location_key": "altId", "extra": {"altType": "location"}}

ORDER_ID = required("orderId", "string", "Order ID")

PAGING = [
    optional("limit", "number", "Maximum number of results"),
    optional("offset", "number", "Number of results to skip"),
]

COUPON_FIELDS = [
    required("name", "string", "Coupon name"),
    required("code", "string", "Coupon code"),
    required("discountType", "string", "Discount type", enum=["percentage", "amount"]),
    required("discountValue", "number", "Discount value"),
    required("startDate", "string", "Start date (ISO format)"),
    optional("endDate", "string", "End date (ISO format)"),
    optional("usageLimit", "number", "Maximum number of uses"),
    optional("productIds", "array", "Product IDs the coupon applies to"),
    optional("applyToFuturePayments", "boolean", "Apply to future recurring payments"),
    optional("limitPerCustomer", "boolean", "Limit to one use per customer"),
]

OPERATIONS = [
    # Integration Provider tools
    Operation(
        "create_whitelabel_integration_provider", "Create a white-label payment integration provider",
        "POST", "/payments/integrations/provider/whitelabel",
        [
            required("uniqueName", "string", "Unique provider name"),
            required("title", "string", "Display title"),
            required("provider", "string", "Underlying provider", enum=["authorize-net", "nmi"]),
            required("description", "string", "Provider description"),
            required("imageUrl", "string", "Provider logo URL"),
        ],
        **ALT,
    ),
    Operation(
        "list_whitelabel_integration_providers", "List white-label payment integration providers",
        "GET", "/payments/integrations/provider/whitelabel",
        PAGING,
        **ALT,
    ),
    # Order tools
    Operation(
        "list_orders", "List payment orders",
        "GET", "/payments/orders",
        [
            optional("status", "string", "Filter by order status"),
            optional("paymentMode", "string", "Filter by payment mode", enum=["live", "test"]),
            optional("startAt", "string", "Start date (YYYY-MM-DD)"),
            optional("endAt", "string", "End date (YYYY-MM-DD)"),
            optional("search", "string", "Search term"),
            optional("contactId", "string", "Filter by contact ID"),
            optional("funnelProductIds", "string", "Comma separated funnel product IDs"),
            *PAGING,
        ],
        **ALT,
    ),
    Operation(
        "get_order_by_id", "Get a payment order",
        "GET", "/payments/orders/{orderId}",
        [ORDER_ID],
        **ALT,
    ),
    # Order Fulfillment tools
    Operation(
        "create_order_fulfillment", "Record a fulfillment for an order",
        "POST", "/payments/orders/{orderId}/fulfillments",
        [
            ORDER_ID,
            required("trackings", "array", "Tracking details: {trackingNumber, shippingCarrier, trackingUrl}", items_type="object"),
            required("items", "array", "Fulfilled items: {priceId, qty}", items_type="object"),
            optional("notifyCustomer", "boolean", "Notify the customer", default=True),
        ],
        **ALT,
    ),
    Operation(
        "list_order_fulfillments", "List the fulfillments of an order",
        "GET", "/payments/orders/{orderId}/fulfillments",
        [ORDER_ID],
        **ALT,
    ),
    # Transaction tools
    Operation(
        "list_transactions", "List payment transactions",
        "GET", "/payments/transactions",
        [
            optional("paymentMode", "string", "Filter by payment mode", enum=["live", "test"]),
            optional("startAt", "string", "Start date (YYYY-MM-DD)"),
            optional("endAt", "string", "End date (YYYY-MM-DD)"),
            optional("entitySourceType", "string", "Filter by source type"),
            optional("entitySourceId", "string", "Filter by source ID"),
            optional("entityId", "string", "Filter by entity ID"),
            optional("subscriptionId", "string", "Filter by subscription ID"),
            optional("contactId", "string", "Filter by contact ID"),
            optional("search", "string", "Search term"),
            *PAGING,
        ],
        **ALT,
    ),
    Operation(
        "get_transaction_by_id", "Get a payment transaction",
        "GET", "/payments/transactions/{transactionId}",
        [required("transactionId", "string", "Transaction ID")],
        **ALT,
    ),
    # Subscription tools
    Operation(
        "list_subscriptions", "List payment subscriptions",
        "GET", "/payments/subscriptions",
        [
            optional("entityId", "string", "Filter by entity ID"),
            optional("paymentMode", "string", "Filter by payment mode", enum=["live", "test"]),
            optional("startAt", "string", "Start date (YYYY-MM-DD)"),
            optional("endAt", "string", "End date (YYYY-MM-DD)"),
            optional("entitySourceType", "string", "Filter by source type"),
            optional("search", "string", "Search term"),
            optional("contactId", "string", "Filter by contact ID"),
            optional("id", "string", "Filter by subscription ID"),
            *PAGING,
        ],
        **ALT,
    ),
    Operation(
        "get_subscription_by_id", "Get a payment subscription",
        "GET", "/payments/subscriptions/{subscriptionId}",
        [required("subscriptionId", "string", "Subscription ID")],
        **ALT,
    ),
    # Coupon tools
    Operation(
        "list_coupons", "List coupons",
        "GET", "/payments/coupon/list",
        [
            optional("status", "string", "Filter by status", enum=["scheduled", "active", "expired"]),
            optional("search", "string", "Search term"),
            *PAGING,
        ],
        **ALT,
    ),
    Operation(
        "create_coupon", "Create a coupon",
        "POST", "/payments/coupon",
        COUPON_FIELDS,
        **ALT,
    ),
    Operation(
        "update_coupon", "Update a coupon",
        "PUT", "/payments/coupon",
        [required("id", "string", "Coupon ID"), *COUPON_FIELDS],
        **ALT,
    ),
    Operation(
        "delete_coupon", "Delete a coupon",
        "DELETE", "/payments/coupon",
        [required("id", "string", "Coupon ID")],
        args_in="body", **ALT,
    ),
    Operation(
        "get_coupon", "Get a coupon by ID or code",
        "GET", "/payments/coupon",
        [
            required("id", "string", "Coupon ID"),
            required("code", "string", "Coupon code"),
        ],
        **ALT,
    ),
    # Custom Provider tools
    Operation(
        "create_custom_provider_integration", "Register a custom payment provider",
        "POST", "/payments/custom-provider/provider",
        [
            required("name", "string", "Provider name"),
            required("description", "string", "Provider description"),
            required("paymentsUrl", "string", "Payment page URL"),
            required("queryUrl", "string", "Query endpoint URL"),
            required("imageUrl", "string", "Provider logo URL"),
        ],
        location="query",
    ),
    Operation(
        "delete_custom_provider_integration", "Remove a custom payment provider",
        "DELETE", "/payments/custom-provider/provider",
        location="query",
    ),
    Operation(
        "get_custom_provider_config", "Get the custom payment provider configuration",
        "GET", "/payments/custom-provider/connect",
        location="query",
    ),
    Operation(
        "create_custom_provider_config", "Connect the custom payment provider with keys",
        "POST", "/payments/custom-provider/connect",
        [
            required("live", "object", "Live keys: {apiKey, publishableKey}"),
            required("test", "object", "Test keys: {apiKey, publishableKey}"),
        ],
        location="query",
    ),
    Operation(
        "disconnect_custom_provider_config", "Disconnect a custom payment provider mode",
        "POST", "/payments/custom-provider/disconnect",
        [required("liveMode", "boolean", "Disconnect the live (true) or test (false) mode")],
        location="query",
    ),
]
