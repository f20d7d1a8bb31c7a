"""
Custom Field Tools

Object-scoped custom fields and the folders that group them.
"""

from ..base import Operation, optional, required

CATEGORY = "custom_field"

FIELD_ID = required("id", "string", "Custom field ID")
FOLDER_ID = required("id", "string", "Folder ID")

FIELD_FIELDS = [
    optional("description", "string", "Field description"),
    optional("placeholder", "string", "Placeholder text"),
    optional("showInForms", "boolean", "Show the field in forms", default=True),
    optional("options", "array", "Options for choice fields: {key, label}", items_type="object"),
    optional("acceptedFormats", "string", "Accepted file formats"),
    optional("maxFileLimit", "number", "Maximum number of files"),
    optional("allowCustomOption", "boolean", "Allow custom options"),
]

OPERATIONS = [
    Operation(
        "ghl_get_custom_field_by_id", "Get a custom field or folder by ID",
        "GET", "/custom-fields/{id}",
        [FIELD_ID], location=None,
    ),
    Operation(
        "ghl_create_custom_field", "Create a custom field for an object",
        "POST", "/custom-fields/",
        [
            required("name", "string", "Field name"),
            required("dataType", "string", "Field data type", enum=[
                "TEXT", "LARGE_TEXT", "NUMERICAL", "PHONE", "MONETORY", "CHECKBOX",
                "SINGLE_OPTIONS", "MULTIPLE_OPTIONS", "DATE", "TEXTBOX_LIST", "FILE_UPLOAD", "RADIO", "EMAIL",
            ]),
            required("fieldKey", "string", "Field key (e.g. custom_object.pet.name)"),
            required("objectKey", "string", "Object key"),
            required("parentId", "string", "Parent folder ID"),
            *FIELD_FIELDS,
        ],
    ),
    Operation(
        "ghl_update_custom_field", "Update a custom field",
        "PUT", "/custom-fields/{id}",
        [FIELD_ID, optional("name", "string", "Field name"), *FIELD_FIELDS],
    ),
    Operation(
        "ghl_delete_custom_field", "Delete a custom field",
        "DELETE", "/custom-fields/{id}",
        [FIELD_ID], location=None,
    ),
    Operation(
        "ghl_get_custom_fields_by_object_key", "List the custom fields and folders of an object",
        "GET", "/custom-fields/object-key/{objectKey}",
        [required("objectKey", "string", "Object key")],
    ),
    Operation(
        "ghl_create_custom_field_folder", "Create a custom field folder",
        "POST", "/custom-fields/folder",
        [
            required("objectKey", "string", "Object key"),
            required("name", "string", "Folder name"),
        ],
    ),
    Operation(
        "ghl_update_custom_field_folder", "Rename a custom field folder",
        "PUT", "/custom-fields/folder/{id}",
        [FOLDER_ID, required("name", "string", "Folder name")],
    ),
    Operation(
        "ghl_delete_custom_field_folder", "Delete a custom field folder",
        "DELETE", "/custom-fields/folder/{id}",
        [FOLDER_ID],
    ),
]
