"""
Invoice Tools

Invoice templates, invoice schedules, invoices, estimates and estimate
templates. Every invoice endpoint addresses the location as `altId`,
and list endpoints take `limit`/`offset` as strings.
"""

from ..base import Operation, optional, required

CATEGORY = "invoice"

ALT = {"location_key": "altId", "extra": {"altType": "location"}}

TEMPLATE_ID = required("templateId", "string", "Invoice template ID")
SCHEDULE_ID = required("scheduleId", "string", "Invoice schedule ID")
INVOICE_ID = required("invoiceId", "string", "Invoice ID")
ESTIMATE_ID = required("estimateId", "string", "Estimate ID")

LIST_FIELDS = [
    optional("limit", "string", "Maximum number of results", default="10"),
    optional("offset", "string", "Number of results to skip", default="0"),
    optional("search", "string", "Search term"),
]

DOCUMENT_FIELDS = [
    optional("currency", "string", "Currency code"),
    optional("items", "array", "Line items", items_type="object"),
    optional("discount", "object", "Discount: {type, value}"),
    optional("termsNotes", "string", "Terms and notes"),
    optional("title", "string", "Document title"),
    optional("businessDetails", "object", "Business details"),
]

SEND_FIELDS = [
    required("userId", "string", "User ID sending the document"),
    required("action", "string", "Delivery channel", enum=["sms_and_email", "send_manually", "email", "sms"]),
    required("liveMode", "boolean", "Send in live mode"),
    optional("sentFrom", "object", "Sender details"),
]

OPERATIONS = [
    # Invoice Template tools
    Operation(
        "create_invoice_template", "Create an invoice template",
        "POST", "/invoices/template",
        [
            required("name", "string", "Template name"),
            optional("internal", "boolean", "Internal template"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "list_invoice_templates", "List invoice templates",
        "GET", "/invoices/template",
        [
            *LIST_FIELDS,
            optional("status", "string", "Filter by status"),
            optional("paymentMode", "string", "Filter by payment mode", enum=["default", "live", "test"]),
        ],
        **ALT,
    ),
    Operation(
        "get_invoice_template", "Get an invoice template",
        "GET", "/invoices/template/{templateId}",
        [TEMPLATE_ID],
        **ALT,
    ),
    Operation(
        "update_invoice_template", "Update an invoice template",
        "PUT", "/invoices/template/{templateId}",
        [TEMPLATE_ID, optional("name", "string", "Template name"), *DOCUMENT_FIELDS],
        **ALT,
    ),
    Operation(
        "delete_invoice_template", "Delete an invoice template",
        "DELETE", "/invoices/template/{templateId}",
        [TEMPLATE_ID],
        **ALT,
    ),
    Operation(
        "update_invoice_template_late_fees", "Update the late fee configuration of an invoice template",
        "PATCH", "/invoices/template/{templateId}/late-fees-configuration",
        [TEMPLATE_ID, required("lateFeesConfiguration", "object", "Late fee configuration")],
        **ALT,
    ),
    Operation(
        "update_invoice_template_payment_methods", "Update the payment methods of an invoice template",
        "PATCH", "/invoices/template/{templateId}/payment-methods-configuration",
        [TEMPLATE_ID, required("paymentMethods", "object", "Payment method configuration")],
        **ALT,
    ),
    # Invoice Schedule tools
    Operation(
        "create_invoice_schedule", "Create a recurring invoice schedule",
        "POST", "/invoices/schedule",
        [
            required("name", "string", "Schedule name"),
            required("contactDetails", "object", "Contact details: {id, name, email, phoneNo}"),
            required("schedule", "object", "Recurrence rule"),
            required("liveMode", "boolean", "Run in live mode"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "list_invoice_schedules", "List invoice schedules",
        "GET", "/invoices/schedule",
        [*LIST_FIELDS, optional("status", "string", "Filter by status")],
        **ALT,
    ),
    Operation(
        "get_invoice_schedule", "Get an invoice schedule",
        "GET", "/invoices/schedule/{scheduleId}",
        [SCHEDULE_ID],
        **ALT,
    ),
    Operation(
        "update_invoice_schedule", "Update an invoice schedule",
        "PUT", "/invoices/schedule/{scheduleId}",
        [
            SCHEDULE_ID,
            optional("name", "string", "Schedule name"),
            optional("schedule", "object", "Recurrence rule"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "delete_invoice_schedule", "Delete an invoice schedule",
        "DELETE", "/invoices/schedule/{scheduleId}",
        [SCHEDULE_ID],
        **ALT,
    ),
    Operation(
        "schedule_invoice_schedule", "Start an invoice schedule",
        "POST", "/invoices/schedule/{scheduleId}/schedule",
        [
            SCHEDULE_ID,
            required("liveMode", "boolean", "Run in live mode"),
            optional("autoPayment", "object", "Auto payment configuration"),
        ],
        **ALT,
    ),
    Operation(
        "auto_payment_invoice_schedule", "Configure auto payment for an invoice schedule",
        "POST", "/invoices/schedule/{scheduleId}/auto-payment",
        [SCHEDULE_ID, required("autoPayment", "object", "Auto payment configuration")],
        **ALT,
    ),
    Operation(
        "cancel_invoice_schedule", "Cancel an invoice schedule",
        "POST", "/invoices/schedule/{scheduleId}/cancel",
        [SCHEDULE_ID],
        **ALT,
    ),
    # Invoice Management tools
    Operation(
        "create_invoice", "Create an invoice",
        "POST", "/invoices/",
        [
            required("name", "string", "Invoice name"),
            required("contactDetails", "object", "Contact details: {id, name, email, phoneNo}"),
            required("issueDate", "string", "Issue date (YYYY-MM-DD)"),
            optional("dueDate", "string", "Due date (YYYY-MM-DD)"),
            optional("invoiceNumber", "string", "Invoice number"),
            optional("sentTo", "object", "Recipients: {email, phoneNo}"),
            optional("liveMode", "boolean", "Create in live mode"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "list_invoices", "List invoices",
        "GET", "/invoices/",
        [
            *LIST_FIELDS,
            optional("status", "string", "Filter by status"),
            optional("startAt", "string", "Start date (YYYY-MM-DD)"),
            optional("endAt", "string", "End date (YYYY-MM-DD)"),
            optional("contactId", "string", "Filter by contact ID"),
            optional("paymentMode", "string", "Filter by payment mode", enum=["default", "live", "test"]),
        ],
        **ALT,
    ),
    Operation(
        "get_invoice", "Get an invoice",
        "GET", "/invoices/{invoiceId}",
        [INVOICE_ID],
        **ALT,
    ),
    Operation(
        "update_invoice", "Update an invoice",
        "PUT", "/invoices/{invoiceId}",
        [
            INVOICE_ID,
            optional("name", "string", "Invoice name"),
            optional("contactDetails", "object", "Contact details"),
            optional("issueDate", "string", "Issue date (YYYY-MM-DD)"),
            optional("dueDate", "string", "Due date (YYYY-MM-DD)"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "delete_invoice", "Delete an invoice",
        "DELETE", "/invoices/{invoiceId}",
        [INVOICE_ID],
        **ALT,
    ),
    Operation(
        "void_invoice", "Void an invoice",
        "POST", "/invoices/{invoiceId}/void",
        [INVOICE_ID],
        **ALT,
    ),
    Operation(
        "send_invoice", "Send an invoice to its contact",
        "POST", "/invoices/{invoiceId}/send",
        [INVOICE_ID, *SEND_FIELDS],
        **ALT,
    ),
    Operation(
        "record_invoice_payment", "Record a manual payment against an invoice",
        "POST", "/invoices/{invoiceId}/record-payment",
        [
            INVOICE_ID,
            required("mode", "string", "Payment mode", enum=["cash", "card", "cheque", "bank_transfer", "other"]),
            required("notes", "string", "Payment notes"),
            optional("amount", "number", "Amount paid (defaults to the amount due)"),
            optional("card", "object", "Card details: {brand, last4}"),
            optional("cheque", "object", "Cheque details: {number}"),
        ],
        **ALT,
    ),
    Operation(
        "generate_invoice_number", "Generate the next invoice number",
        "GET", "/invoices/generate-invoice-number",
        **ALT,
    ),
    Operation(
        "text2pay_invoice", "Create and send an invoice with a payment link by text",
        "POST", "/invoices/text2pay",
        [
            required("name", "string", "Invoice name"),
            required("contactDetails", "object", "Contact details: {id, name, email, phoneNo}"),
            required("issueDate", "string", "Issue date (YYYY-MM-DD)"),
            required("action", "string", "Delivery channel", enum=["sms_and_email", "send_manually", "email", "sms"]),
            required("userId", "string", "User ID sending the invoice"),
            required("liveMode", "boolean", "Send in live mode"),
            optional("id", "string", "Existing invoice ID to update"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "update_invoice_last_visited", "Mark an invoice as last visited by its contact",
        "PATCH", "/invoices/stats/last-visited-at",
        [INVOICE_ID],
        location=None,
    ),
    # Estimate tools
    Operation(
        "create_estimate", "Create an estimate",
        "POST", "/invoices/estimate",
        [
            required("name", "string", "Estimate name"),
            required("contactDetails", "object", "Contact details: {id, name, email, phoneNo}"),
            optional("issueDate", "string", "Issue date (YYYY-MM-DD)"),
            optional("expiryDate", "string", "Expiry date (YYYY-MM-DD)"),
            optional("estimateNumber", "number", "Estimate number"),
            optional("liveMode", "boolean", "Create in live mode"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "list_estimates", "List estimates",
        "GET", "/invoices/estimate/list",
        [
            *LIST_FIELDS,
            optional("status", "string", "Filter by status", enum=["all", "draft", "sent", "accepted", "declined", "invoiced", "viewed"]),
            optional("startAt", "string", "Start date (YYYY-MM-DD)"),
            optional("endAt", "string", "End date (YYYY-MM-DD)"),
            optional("contactId", "string", "Filter by contact ID"),
        ],
        **ALT,
    ),
    Operation(
        "update_estimate", "Update an estimate",
        "PUT", "/invoices/estimate/{estimateId}",
        [
            ESTIMATE_ID,
            optional("name", "string", "Estimate name"),
            optional("contactDetails", "object", "Contact details"),
            optional("expiryDate", "string", "Expiry date (YYYY-MM-DD)"),
            optional("estimateStatus", "string", "Estimate status"),
            *DOCUMENT_FIELDS,
        ],
        **ALT,
    ),
    Operation(
        "delete_estimate", "Delete an estimate",
        "DELETE", "/invoices/estimate/{estimateId}",
        [ESTIMATE_ID],
        args_in="body", **ALT,
    ),
    Operation(
        "send_estimate", "Send an estimate to its contact",
        "POST", "/invoices/estimate/{estimateId}/send",
        [ESTIMATE_ID, *SEND_FIELDS, optional("estimateName", "string", "Estimate name")],
        **ALT,
    ),
    Operation(
        "create_invoice_from_estimate", "Create an invoice from an accepted estimate",
        "POST", "/invoices/estimate/{estimateId}/invoice",
        [
            ESTIMATE_ID,
            required("markAsInvoiced", "boolean", "Mark the estimate as invoiced"),
            optional("version", "string", "Invoice version", enum=["v1", "v2"]),
        ],
        **ALT,
    ),
    Operation(
        "generate_estimate_number", "Generate the next estimate number",
        "GET", "/invoices/estimate/number/generate",
        **ALT,
    ),
    Operation(
        "update_estimate_last_visited", "Mark an estimate as last visited by its contact",
        "PATCH", "/invoices/estimate/stats/last-visited-at",
        [ESTIMATE_ID],
        location=None,
    ),
    # Estimate Template tools
    Operation(
        "list_estimate_templates", "List estimate templates",
        "GET", "/invoices/estimate/template",
        LIST_FIELDS,
        **ALT,
    ),
    Operation(
        "create_estimate_template", "Create an estimate template",
        "POST", "/invoices/estimate/template",
        [required("name", "string", "Template name"), *DOCUMENT_FIELDS],
        **ALT,
    ),
    Operation(
        "update_estimate_template", "Update an estimate template",
        "PUT", "/invoices/estimate/template/{templateId}",
        [TEMPLATE_ID, optional("name", "string", "Template name"), *DOCUMENT_FIELDS],
        **ALT,
    ),
    Operation(
        "delete_estimate_template", "Delete an estimate template",
        "DELETE", "/invoices/estimate/template/{templateId}",
        [TEMPLATE_ID],
        args_in="body", **ALT,
    ),
    Operation(
        "preview_estimate_template", "Preview an estimate template",
        "GET", "/invoices/estimate/template/preview",
        [TEMPLATE_ID],
        **ALT,
    ),
]
