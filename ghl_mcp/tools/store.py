"""
Store Tools

Shipping zones, shipping rates, shipping carriers and store settings.
Every store endpoint addresses the location as `altId`.
"""

from ..base import Operation, optional, required

CATEGORY = "store"

ALT = {"location_key": "altId", "extra": {"altType": "location"}}

ZONE_ID = required("shippingZoneId", "string", "Shipping zone ID")
RATE_ID = required("shippingRateId", "string", "Shipping rate ID")
CARRIER_ID = required("shippingCarrierId", "string", "Shipping carrier ID")

ZONE_FIELDS = [
    optional("countries", "array", "Countries: {code, states}", items_type="object"),
]

RATE_FIELDS = [
    optional("description", "string", "Rate description"),
    optional("currency", "string", "Currency code"),
    optional("amount", "number", "Shipping amount"),
    optional("conditionType", "string", "Rate condition", enum=["none", "price", "weight"]),
    optional("minCondition", "number", "Minimum condition value"),
    optional("maxCondition", "number", "Maximum condition value"),
    optional("isCarrierRate", "boolean", "Whether the rate comes from a carrier"),
    optional("shippingCarrierId", "string", "Carrier ID for carrier rates"),
    optional("percentageOfRateFee", "number", "Percentage added to carrier rates"),
    optional("shippingCarrierServices", "array", "Carrier services", items_type="object"),
]

CARRIER_FIELDS = [
    optional("services", "array", "Carrier services: {name, value}", items_type="object"),
    optional("allowsMultipleServiceSelection", "boolean", "Allow selecting several services"),
]

OPERATIONS = [
    # Shipping Zones
    Operation(
        "ghl_create_shipping_zone", "Create a shipping zone",
        "POST", "/store/shipping-zone",
        [required("name", "string", "Zone name"), *ZONE_FIELDS],
        **ALT,
    ),
    Operation(
        "ghl_list_shipping_zones", "List shipping zones",
        "GET", "/store/shipping-zone",
        [
            optional("limit", "number", "Maximum number of zones"),
            optional("offset", "number", "Number of zones to skip"),
            optional("withShippingRate", "boolean", "Include shipping rates"),
        ],
        **ALT,
    ),
    Operation(
        "ghl_get_shipping_zone", "Get a shipping zone",
        "GET", "/store/shipping-zone/{shippingZoneId}",
        [ZONE_ID, optional("withShippingRate", "boolean", "Include shipping rates")],
        **ALT,
    ),
    Operation(
        "ghl_update_shipping_zone", "Update a shipping zone",
        "PUT", "/store/shipping-zone/{shippingZoneId}",
        [ZONE_ID, optional("name", "string", "Zone name"), *ZONE_FIELDS],
        **ALT,
    ),
    Operation(
        "ghl_delete_shipping_zone", "Delete a shipping zone",
        "DELETE", "/store/shipping-zone/{shippingZoneId}",
        [ZONE_ID],
        **ALT,
    ),
    # Shipping Rates
    Operation(
        "ghl_get_available_shipping_rates", "Get the shipping rates available for an order",
        "POST", "/store/shipping-zone/shipping-rates",
        [
            required("country", "string", "Destination country code"),
            required("totalOrderAmount", "number", "Order amount"),
            required("totalOrderWeight", "number", "Order weight"),
            required("products", "array", "Order products: {id, quantity}", items_type="object"),
            optional("address", "object", "Destination address"),
            optional("source", "object", "Order source"),
        ],
        **ALT,
    ),
    Operation(
        "ghl_create_shipping_rate", "Create a shipping rate in a zone",
        "POST", "/store/shipping-zone/{shippingZoneId}/shipping-rate",
        [ZONE_ID, required("name", "string", "Rate name"), *RATE_FIELDS],
        **ALT,
    ),
    Operation(
        "ghl_list_shipping_rates", "List the shipping rates of a zone",
        "GET", "/store/shipping-zone/{shippingZoneId}/shipping-rate",
        [
            ZONE_ID,
            optional("limit", "number", "Maximum number of rates"),
            optional("offset", "number", "Number of rates to skip"),
        ],
        **ALT,
    ),
    Operation(
        "ghl_get_shipping_rate", "Get a shipping rate",
        "GET", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}",
        [ZONE_ID, RATE_ID],
        **ALT,
    ),
    Operation(
        "ghl_update_shipping_rate", "Update a shipping rate",
        "PUT", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}",
        [ZONE_ID, RATE_ID, optional("name", "string", "Rate name"), *RATE_FIELDS],
        **ALT,
    ),
    Operation(
        "ghl_delete_shipping_rate", "Delete a shipping rate",
        "DELETE", "/store/shipping-zone/{shippingZoneId}/shipping-rate/{shippingRateId}",
        [ZONE_ID, RATE_ID],
        **ALT,
    ),
    # Shipping Carriers
    Operation(
        "ghl_create_shipping_carrier", "Register a shipping carrier",
        "POST", "/store/shipping-carrier",
        [
            required("name", "string", "Carrier name"),
            required("callbackUrl", "string", "Rate callback URL"),
            *CARRIER_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "ghl_list_shipping_carriers", "List shipping carriers",
        "GET", "/store/shipping-carrier",
        **ALT,
    ),
    Operation(
        "ghl_get_shipping_carrier", "Get a shipping carrier",
        "GET", "/store/shipping-carrier/{shippingCarrierId}",
        [CARRIER_ID],
        **ALT,
    ),
    Operation(
        "ghl_update_shipping_carrier", "Update a shipping carrier",
        "PUT", "/store/shipping-carrier/{shippingCarrierId}",
        [
            CARRIER_ID,
            optional("name", "string", "Carrier name"),
            optional("callbackUrl", "string", "Rate callback URL"),
            *CARRIER_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "ghl_delete_shipping_carrier", "Delete a shipping carrier",
        "DELETE", "/store/shipping-carrier/{shippingCarrierId}",
        [CARRIER_ID],
        **ALT,
    ),
    # Store Settings
    Operation(
        "ghl_create_store_setting", "Create or update the store settings",
        "POST", "/store/store-setting",
        [
            required("shippingOrigin", "object", "Shipping origin address"),
            optional("storeOrderNotification", "object", "Order notification settings"),
            optional("storeOrderFulfillmentNotification", "object", "Fulfillment notification settings"),
        ],
        **ALT,
    ),
    Operation(
        "ghl_get_store_setting", "Get the store settings",
        "GET", "/store/store-setting",
        **ALT,
    ),
]
