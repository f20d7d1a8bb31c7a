"""
Email Marketing Tools
"""

from ..base import Operation, optional, required

CATEGORY = "email"

TEMPLATE_ID = required("templateId", "string", "Email template ID")

OPERATIONS = [
    Operation(
        "get_email_campaigns", "List email campaigns",
        "GET", "/emails/schedule",
        [
            optional("status", "string", "Filter by campaign status", enum=["active", "pause", "complete", "cancelled", "retry", "draft", "resend-scheduled"]),
            optional("limit", "number", "Maximum number of campaigns", default=10),
            optional("offset", "number", "Number of campaigns to skip", default=0),
        ],
    ),
    Operation(
        "create_email_template", "Create a new email template",
        "POST", "/emails/builder",
        [
            required("title", "string", "Template title"),
            required("html", "string", "HTML content of the template"),
            optional("isPlainText", "boolean", "Whether the template is plain text"),
        ],
        extra={"type": "html"},
    ),
    Operation(
        "get_email_templates", "List email templates",
        "GET", "/emails/builder",
        [
            optional("limit", "number", "Maximum number of templates", default=10),
            optional("offset", "number", "Number of templates to skip", default=0),
        ],
    ),
    Operation(
        "update_email_template", "Update an email template",
        "POST", "/emails/builder/data",
        [
            TEMPLATE_ID,
            required("html", "string", "Updated HTML content"),
            optional("previewText", "string", "Preview text"),
        ],
        extra={"editorType": "html"},
    ),
    Operation(
        "delete_email_template", "Delete an email template",
        "DELETE", "/emails/builder/{locationId}/{templateId}",
        [TEMPLATE_ID], location=None,
    ),
]
