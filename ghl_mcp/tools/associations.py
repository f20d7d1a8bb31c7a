"""
Association Tools

Association definitions between object types and the relations that
link individual records through them.
"""

from ..base import Operation, optional, required

CATEGORY = "association"

ASSOCIATION_ID = required("associationId", "string", "Association ID")

OPERATIONS = [
    Operation(
        "ghl_get_all_associations", "List all associations of a location",
        "GET", "/associations/",
        [
            optional("skip", "number", "Number of associations to skip", default=0),
            optional("limit", "number", "Maximum number of associations", default=20),
        ],
    ),
    Operation(
        "ghl_create_association", "Create an association between two object types",
        "POST", "/associations/",
        [
            required("key", "string", "Association key"),
            required("firstObjectLabel", "string", "Label of the first object"),
            required("firstObjectKey", "string", "Key of the first object"),
            required("secondObjectLabel", "string", "Label of the second object"),
            required("secondObjectKey", "string", "Key of the second object"),
        ],
    ),
    Operation(
        "ghl_get_association_by_id", "Get an association by ID",
        "GET", "/associations/{associationId}",
        [ASSOCIATION_ID], location=None,
    ),
    Operation(
        "ghl_update_association", "Update the labels of an association",
        "PUT", "/associations/{associationId}",
        [
            ASSOCIATION_ID,
            required("firstObjectLabel", "string", "Label of the first object"),
            required("secondObjectLabel", "string", "Label of the second object"),
        ],
        location=None,
    ),
    Operation(
        "ghl_delete_association", "Delete an association and all its relations",
        "DELETE", "/associations/{associationId}",
        [ASSOCIATION_ID], location=None,
    ),
    Operation(
        "ghl_get_association_by_key", "Get an association by its key",
        "GET", "/associations/key/{keyName}",
        [required("keyName", "string", "Association key")],
    ),
    Operation(
        "ghl_get_association_by_object_key", "Get the associations of an object key",
        "GET", "/associations/objectKey/{objectKey}",
        [required("objectKey", "string", "Object key")],
    ),
    Operation(
        "ghl_create_relation", "Relate two records through an association",
        "POST", "/associations/relations",
        [
            required("associationId", "string", "Association ID"),
            required("firstRecordId", "string", "ID of the first record"),
            required("secondRecordId", "string", "ID of the second record"),
        ],
    ),
    Operation(
        "ghl_get_relations_by_record", "List the relations of a record",
        "GET", "/associations/relations/{recordId}",
        [
            required("recordId", "string", "Record ID"),
            optional("skip", "number", "Number of relations to skip", default=0),
            optional("limit", "number", "Maximum number of relations", default=20),
            optional("associationIds", "array", "Filter by association IDs"),
        ],
    ),
    Operation(
        "ghl_delete_relation", "Delete a relation between two records",
        "DELETE", "/associations/relations/{relationId}",
        [required("relationId", "string", "Relation ID")],
    ),
]
