"""
Contact Tools

Contacts, their tasks, notes, tags, followers, campaigns and workflows.
"""

from ..base import Operation, optional, required

CATEGORY = "contact"

CONTACT_ID = required("contactId", "string", "Contact ID")
TASK_ID = required("taskId", "string", "Task ID")
NOTE_ID = required("noteId", "string", "Note ID")

CONTACT_FIELDS = [
    optional("lastName", "string", "Contact last name"),
    optional("email", "string", "Contact email address"),
    optional("phone", "string", "Contact phone number"),
    optional("tags", "array", "Tags to assign to the contact"),
    optional("source", "string", "Source of the contact"),
    optional("companyName", "string", "Company name"),
    optional("address1", "string", "Street address"),
    optional("city", "string", "City"),
    optional("state", "string", "State"),
    optional("country", "string", "Country"),
    optional("postalCode", "string", "Postal code"),
    optional("website", "string", "Website URL"),
    optional("timezone", "string", "Contact timezone"),
    optional("dnd", "boolean", "Do not disturb status"),
    optional("assignedTo", "string", "User ID the contact is assigned to"),
    optional("customFields", "array", "Custom field values as {id, value} objects", items_type="object"),
]

TASK_FIELDS = [
    optional("body", "string", "Task description"),
    optional("completed", "boolean", "Whether the task is completed"),
    optional("assignedTo", "string", "User ID the task is assigned to"),
]

OPERATIONS = [
    # Basic Contact Management
    Operation(
        "create_contact", "Create a new contact in GoHighLevel",
        "POST", "/contacts/",
        [required("firstName", "string", "Contact first name"), *CONTACT_FIELDS],
    ),
    Operation(
        "search_contacts", "Search for contacts with advanced filtering options",
        "POST", "/contacts/search",
        [
            optional("query", "string", "Search query (name, email, phone, etc.)"),
            optional("pageLimit", "number", "Maximum number of results", default=25),
            optional("page", "number", "Page number"),
            optional("filters", "array", "Advanced search filters", items_type="object"),
        ],
    ),
    Operation(
        "get_contact", "Get detailed information about a specific contact",
        "GET", "/contacts/{contactId}",
        [CONTACT_ID], location=None,
    ),
    Operation(
        "update_contact", "Update contact information",
        "PUT", "/contacts/{contactId}",
        [CONTACT_ID, optional("firstName", "string", "Contact first name"), *CONTACT_FIELDS],
        location=None,
    ),
    Operation(
        "add_contact_tags", "Add tags to a contact",
        "POST", "/contacts/{contactId}/tags",
        [CONTACT_ID, required("tags", "array", "Tags to add")], location=None,
    ),
    Operation(
        "remove_contact_tags", "Remove tags from a contact",
        "DELETE", "/contacts/{contactId}/tags",
        [CONTACT_ID, required("tags", "array", "Tags to remove")],
        location=None, args_in="body",
    ),
    Operation(
        "delete_contact", "Delete a contact from GoHighLevel",
        "DELETE", "/contacts/{contactId}",
        [CONTACT_ID], location=None,
    ),
    # Task Management
    Operation(
        "get_contact_tasks", "Get all tasks for a contact",
        "GET", "/contacts/{contactId}/tasks",
        [CONTACT_ID], location=None,
    ),
    Operation(
        "create_contact_task", "Create a new task for a contact",
        "POST", "/contacts/{contactId}/tasks",
        [
            CONTACT_ID,
            required("title", "string", "Task title"),
            required("dueDate", "string", "Due date (ISO format)"),
            *TASK_FIELDS,
        ],
        location=None,
    ),
    Operation(
        "get_contact_task", "Get a specific task for a contact",
        "GET", "/contacts/{contactId}/tasks/{taskId}",
        [CONTACT_ID, TASK_ID], location=None,
    ),
    Operation(
        "update_contact_task", "Update a task for a contact",
        "PUT", "/contacts/{contactId}/tasks/{taskId}",
        [
            CONTACT_ID, TASK_ID,
            optional("title", "string", "Task title"),
            optional("dueDate", "string", "Due date (ISO format)"),
            *TASK_FIELDS,
        ],
        location=None,
    ),
    Operation(
        "delete_contact_task", "Delete a task for a contact",
        "DELETE", "/contacts/{contactId}/tasks/{taskId}",
        [CONTACT_ID, TASK_ID], location=None,
    ),
    Operation(
        "update_task_completion", "Update task completion status",
        "PUT", "/contacts/{contactId}/tasks/{taskId}/completed",
        [CONTACT_ID, TASK_ID, required("completed", "boolean", "Completion status")],
        location=None,
    ),
    # Note Management
    Operation(
        "get_contact_notes", "Get all notes for a contact",
        "GET", "/contacts/{contactId}/notes",
        [CONTACT_ID], location=None,
    ),
    Operation(
        "create_contact_note", "Create a new note for a contact",
        "POST", "/contacts/{contactId}/notes",
        [
            CONTACT_ID,
            required("body", "string", "Note content"),
            optional("userId", "string", "User ID creating the note"),
        ],
        location=None,
    ),
    Operation(
        "get_contact_note", "Get a specific note for a contact",
        "GET", "/contacts/{contactId}/notes/{noteId}",
        [CONTACT_ID, NOTE_ID], location=None,
    ),
    Operation(
        "update_contact_note", "Update a note for a contact",
        "PUT", "/contacts/{contactId}/notes/{noteId}",
        [
            CONTACT_ID, NOTE_ID,
            required("body", "string", "Note content"),
            optional("userId", "string", "User ID updating the note"),
        ],
        location=None,
    ),
    Operation(
        "delete_contact_note", "Delete a note for a contact",
        "DELETE", "/contacts/{contactId}/notes/{noteId}",
        [CONTACT_ID, NOTE_ID], location=None,
    ),
    # Advanced Operations
    Operation(
        "upsert_contact", "Create or update a contact based on email/phone",
        "POST", "/contacts/upsert",
        [optional("firstName", "string", "Contact first name"), *CONTACT_FIELDS],
    ),
    Operation(
        "get_duplicate_contact", "Check for a duplicate contact by email or phone",
        "GET", "/contacts/search/duplicate",
        [
            optional("email", "string", "Email to check"),
            optional("number", "string", "Phone number to check"),
        ],
    ),
    Operation(
        "get_contacts_by_business", "Get contacts associated with a business",
        "GET", "/contacts/business/{businessId}",
        [
            required("businessId", "string", "Business ID"),
            optional("limit", "number", "Maximum number of results"),
            optional("skip", "number", "Number of results to skip"),
            optional("query", "string", "Search query"),
        ],
        location=None,
    ),
    Operation(
        "get_contact_appointments", "Get all appointments for a contact",
        "GET", "/contacts/{contactId}/appointments",
        [CONTACT_ID], location=None,
    ),
    # Bulk Operations
    Operation(
        "bulk_update_contact_tags", "Add or remove tags on multiple contacts",
        "POST", "/contacts/bulk/tags/update/{type}",
        [
            required("type", "string", "Operation type", enum=["add", "remove"]),
            required("contacts", "array", "Contact IDs"),
            required("tags", "array", "Tags to add or remove"),
            optional("removeAllTags", "boolean", "Remove all existing tags first"),
        ],
    ),
    Operation(
        "bulk_update_contact_business", "Assign or clear the business of multiple contacts",
        "POST", "/contacts/bulk/business",
        [
            required("ids", "array", "Contact IDs"),
            optional("businessId", "string", "Business ID (omit to remove)"),
        ],
    ),
    # Followers Management
    Operation(
        "add_contact_followers", "Add followers to a contact",
        "POST", "/contacts/{contactId}/followers",
        [CONTACT_ID, required("followers", "array", "User IDs of followers to add")],
        location=None,
    ),
    Operation(
        "remove_contact_followers", "Remove followers from a contact",
        "DELETE", "/contacts/{contactId}/followers",
        [CONTACT_ID, required("followers", "array", "User IDs of followers to remove")],
        location=None, args_in="body",
    ),
    # Campaign Management
    Operation(
        "add_contact_to_campaign", "Add a contact to a campaign",
        "POST", "/contacts/{contactId}/campaigns/{campaignId}",
        [CONTACT_ID, required("campaignId", "string", "Campaign ID")], location=None,
    ),
    Operation(
        "remove_contact_from_campaign", "Remove a contact from a campaign",
        "DELETE", "/contacts/{contactId}/campaigns/{campaignId}",
        [CONTACT_ID, required("campaignId", "string", "Campaign ID")], location=None,
    ),
    Operation(
        "remove_contact_from_all_campaigns", "Remove a contact from all campaigns",
        "DELETE", "/contacts/{contactId}/campaigns/removeAll",
        [CONTACT_ID], location=None,
    ),
    # Workflow Management
    Operation(
        "add_contact_to_workflow", "Add a contact to a workflow",
        "POST", "/contacts/{contactId}/workflow/{workflowId}",
        [
            CONTACT_ID,
            required("workflowId", "string", "Workflow ID"),
            optional("eventStartTime", "string", "Event start time (ISO format)"),
        ],
        location=None,
    ),
    Operation(
        "remove_contact_from_workflow", "Remove a contact from a workflow",
        "DELETE", "/contacts/{contactId}/workflow/{workflowId}",
        [CONTACT_ID, required("workflowId", "string", "Workflow ID")], location=None,
    ),
]
