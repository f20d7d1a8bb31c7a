"""
GHL Tool Catalog

Each module in this package describes one resource category as data:
    CATEGORY: str
    OPERATIONS: List[Operation]

Modules are loaded by registry.py in the order listed below; that order
is also the order tools are listed to the agent.
"""

CATEGORY_MODULES = [
    "contacts",
    "conversations",
    "blogs",
    "opportunities",
    "calendars",
    "email",
    "locations",
    "email_isv",
    "social_media",
    "media",
    "objects",
    "associations",
    "custom_fields",
    "workflows",
    "surveys",
    "store",
    "products",
    "payments",
    "invoices",
]
