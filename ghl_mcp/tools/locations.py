"""
Location Tools

Sub-account (location) management: tags, tasks, custom fields, custom
values, templates and timezones. Most endpoints carry the location id
in the path.
"""

from ..base import Operation, optional, required

CATEGORY = "location"

TAG_ID = required("tagId", "string", "Tag ID")
FIELD_ID = required("customFieldId", "string", "Custom field ID")
VALUE_ID = required("customValueId", "string", "Custom value ID")

LOCATION_FIELDS = [
    optional("phone", "string", "Phone number"),
    optional("address", "string", "Street address"),
    optional("city", "string", "City"),
    optional("state", "string", "State"),
    optional("country", "string", "Country code"),
    optional("postalCode", "string", "Postal code"),
    optional("website", "string", "Website URL"),
    optional("timezone", "string", "Timezone"),
    optional("prospectInfo", "object", "Prospect information: {firstName, lastName, email}"),
    optional("settings", "object", "Location settings"),
    optional("social", "object", "Social profile links"),
]

OPERATIONS = [
    # Location Management
    Operation(
        "search_locations", "Search locations (sub-accounts) of a company",
        "GET", "/locations/search",
        [
            optional("companyId", "string", "Company ID"),
            optional("email", "string", "Filter by email"),
            optional("limit", "number", "Maximum number of results", default=10),
            optional("skip", "number", "Number of results to skip", default=0),
            optional("order", "string", "Sort order", enum=["asc", "desc"]),
        ],
        location=None,
    ),
    Operation(
        "get_location", "Get details of a location",
        "GET", "/locations/{locationId}",
        location=None,
    ),
    Operation(
        "create_location", "Create a new location (sub-account)",
        "POST", "/locations/",
        [
            required("name", "string", "Location name"),
            required("companyId", "string", "Company ID"),
            *LOCATION_FIELDS,
            optional("snapshotId", "string", "Snapshot to load into the location"),
        ],
        location=None,
    ),
    Operation(
        "update_location", "Update a location",
        "PUT", "/locations/{locationId}",
        [
            required("companyId", "string", "Company ID"),
            optional("name", "string", "Location name"),
            *LOCATION_FIELDS,
        ],
        location=None,
    ),
    Operation(
        "delete_location", "Delete a location",
        "DELETE", "/locations/{locationId}",
        [
            required("locationId", "string", "Location ID to delete"),
            optional("deleteTwilioAccount", "boolean", "Also delete the Twilio account", default=False),
        ],
        location=None,
    ),
    # Location Tags
    Operation(
        "get_location_tags", "List tags of a location",
        "GET", "/locations/{locationId}/tags",
        location=None,
    ),
    Operation(
        "create_location_tag", "Create a tag in a location",
        "POST", "/locations/{locationId}/tags",
        [required("name", "string", "Tag name")], location=None,
    ),
    Operation(
        "get_location_tag", "Get a location tag",
        "GET", "/locations/{locationId}/tags/{tagId}",
        [TAG_ID], location=None,
    ),
    Operation(
        "update_location_tag", "Rename a location tag",
        "PUT", "/locations/{locationId}/tags/{tagId}",
        [TAG_ID, required("name", "string", "New tag name")], location=None,
    ),
    Operation(
        "delete_location_tag", "Delete a location tag",
        "DELETE", "/locations/{locationId}/tags/{tagId}",
        [TAG_ID], location=None,
    ),
    # Location Tasks
    Operation(
        "search_location_tasks", "Search tasks across a location",
        "POST", "/locations/{locationId}/tasks/search",
        [
            optional("contactId", "array", "Filter by contact IDs"),
            optional("completed", "boolean", "Filter by completion status"),
            optional("assignedTo", "array", "Filter by assigned user IDs"),
            optional("query", "string", "Search query"),
            optional("limit", "number", "Maximum number of results", default=25),
            optional("skip", "number", "Number of results to skip", default=0),
            optional("businessId", "string", "Filter by business ID"),
        ],
        location=None,
    ),
    # Custom Fields
    Operation(
        "get_location_custom_fields", "List custom fields of a location",
        "GET", "/locations/{locationId}/customFields",
        [optional("model", "string", "Model the fields belong to", enum=["contact", "opportunity", "all"])],
        location=None,
    ),
    Operation(
        "create_location_custom_field", "Create a custom field in a location",
        "POST", "/locations/{locationId}/customFields",
        [
            required("name", "string", "Field name"),
            required("dataType", "string", "Field data type (TEXT, LARGE_TEXT, NUMERICAL, ...)"),
            optional("placeholder", "string", "Placeholder text"),
            optional("acceptedFormat", "array", "Accepted file formats"),
            optional("isMultipleFile", "boolean", "Allow multiple files"),
            optional("maxNumberOfFiles", "number", "Maximum number of files"),
            optional("textBoxListOptions", "array", "Options for list fields", items_type="object"),
            optional("position", "number", "Display position"),
            optional("model", "string", "Model the field belongs to", enum=["contact", "opportunity"]),
        ],
        location=None,
    ),
    Operation(
        "get_location_custom_field", "Get a location custom field",
        "GET", "/locations/{locationId}/customFields/{customFieldId}",
        [FIELD_ID], location=None,
    ),
    Operation(
        "update_location_custom_field", "Update a location custom field",
        "PUT", "/locations/{locationId}/customFields/{customFieldId}",
        [
            FIELD_ID,
            required("name", "string", "Field name"),
            optional("placeholder", "string", "Placeholder text"),
            optional("acceptedFormat", "array", "Accepted file formats"),
            optional("isMultipleFile", "boolean", "Allow multiple files"),
            optional("maxNumberOfFiles", "number", "Maximum number of files"),
            optional("textBoxListOptions", "array", "Options for list fields", items_type="object"),
            optional("position", "number", "Display position"),
            optional("model", "string", "Model the field belongs to", enum=["contact", "opportunity"]),
        ],
        location=None,
    ),
    Operation(
        "delete_location_custom_field", "Delete a location custom field",
        "DELETE", "/locations/{locationId}/customFields/{customFieldId}",
        [FIELD_ID], location=None,
    ),
    # Custom Values
    Operation(
        "get_location_custom_values", "List custom values of a location",
        "GET", "/locations/{locationId}/customValues",
        location=None,
    ),
    Operation(
        "create_location_custom_value", "Create a custom value in a location",
        "POST", "/locations/{locationId}/customValues",
        [required("name", "string", "Value name"), required("value", "string", "Value")],
        location=None,
    ),
    Operation(
        "get_location_custom_value", "Get a location custom value",
        "GET", "/locations/{locationId}/customValues/{customValueId}",
        [VALUE_ID], location=None,
    ),
    Operation(
        "update_location_custom_value", "Update a location custom value",
        "PUT", "/locations/{locationId}/customValues/{customValueId}",
        [VALUE_ID, required("name", "string", "Value name"), required("value", "string", "Value")],
        location=None,
    ),
    Operation(
        "delete_location_custom_value", "Delete a location custom value",
        "DELETE", "/locations/{locationId}/customValues/{customValueId}",
        [VALUE_ID], location=None,
    ),
    # Templates
    Operation(
        "get_location_templates", "List SMS and email templates of a location",
        "GET", "/locations/{locationId}/templates",
        [
            required("originId", "string", "Origin ID of the templates"),
            optional("deleted", "boolean", "Include deleted templates", default=False),
            optional("skip", "number", "Number of templates to skip", default=0),
            optional("limit", "number", "Maximum number of templates", default=25),
            optional("type", "string", "Template type", enum=["sms", "email", "whatsapp"]),
        ],
        location=None,
    ),
    Operation(
        "delete_location_template", "Delete a location template",
        "DELETE", "/locations/{locationId}/templates/{templateId}",
        [required("templateId", "string", "Template ID")], location=None,
    ),
    # Timezones
    Operation(
        "get_timezones", "List the timezones available to a location",
        "GET", "/locations/{locationId}/timezones",
        location=None,
    ),
]
