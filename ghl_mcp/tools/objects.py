"""
Custom Object Tools

Object schemas and the records stored against them.
"""

from ..base import Operation, optional, required

CATEGORY = "object"

SCHEMA_KEY = required("schemaKey", "string", "Object key (e.g. custom_objects.pet)")
RECORD_ID = required("recordId", "string", "Record ID")

OPERATIONS = [
    Operation(
        "get_all_objects", "List all object schemas of a location",
        "GET", "/objects/",
    ),
    Operation(
        "create_object_schema", "Create a custom object schema",
        "POST", "/objects/",
        [
            required("labels", "object", "Singular and plural labels: {singular, plural}"),
            required("key", "string", "Object key (custom_objects.<name>)"),
            required("primaryDisplayPropertyDetails", "object", "Primary display property: {key, name, dataType}"),
            optional("description", "string", "Object description"),
        ],
    ),
    Operation(
        "get_object_schema", "Get an object schema and its fields",
        "GET", "/objects/{key}",
        [
            required("key", "string", "Object key"),
            optional("fetchProperties", "boolean", "Include field definitions", default=True),
        ],
    ),
    Operation(
        "update_object_schema", "Update an object schema",
        "PUT", "/objects/{key}",
        [
            required("key", "string", "Object key"),
            optional("labels", "object", "Singular and plural labels"),
            optional("description", "string", "Object description"),
            optional("searchableProperties", "array", "Searchable property keys"),
        ],
    ),
    Operation(
        "create_object_record", "Create a record of a custom object",
        "POST", "/objects/{schemaKey}/records",
        [
            SCHEMA_KEY,
            required("properties", "object", "Record properties"),
            optional("owner", "array", "Owner user IDs"),
            optional("followers", "array", "Follower user IDs"),
        ],
    ),
    Operation(
        "get_object_record", "Get a record of a custom object",
        "GET", "/objects/{schemaKey}/records/{recordId}",
        [SCHEMA_KEY, RECORD_ID], location=None,
    ),
    Operation(
        "update_object_record", "Update a record of a custom object",
        "PUT", "/objects/{schemaKey}/records/{recordId}",
        [
            SCHEMA_KEY, RECORD_ID,
            optional("properties", "object", "Record properties"),
            optional("owner", "array", "Owner user IDs"),
            optional("followers", "array", "Follower user IDs"),
        ],
        location="query",
    ),
    Operation(
        "delete_object_record", "Delete a record of a custom object",
        "DELETE", "/objects/{schemaKey}/records/{recordId}",
        [SCHEMA_KEY, RECORD_ID], location=None,
    ),
    Operation(
        "search_object_records", "Search records of a custom object",
        "POST", "/objects/{schemaKey}/records/search",
        [
            SCHEMA_KEY,
            required("query", "string", "Search query"),
            optional("page", "number", "Page number", default=1),
            optional("pageLimit", "number", "Records per page", default=10),
            optional("searchAfter", "array", "Cursor for the next page"),
        ],
    ),
]
