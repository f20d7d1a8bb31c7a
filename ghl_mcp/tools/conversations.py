"""
Conversation Tools

Messaging (SMS, email, calls), conversation threads, recordings,
transcriptions and scheduled-message management.
"""

from ..base import Operation, optional, required

CATEGORY = "conversation"

CONVERSATION_ID = required("conversationId", "string", "Conversation ID")
MESSAGE_ID = required("messageId", "string", "Message ID")
EMAIL_MESSAGE_ID = required("emailMessageId", "string", "Email message ID")

OPERATIONS = [
    # Basic conversation operations
    Operation(
        "send_sms", "Send an SMS message to a contact",
        "POST", "/conversations/messages",
        [
            required("contactId", "string", "Contact ID to send the SMS to"),
            required("message", "string", "SMS message content"),
            optional("fromNumber", "string", "Sender phone number (optional)"),
        ],
        location=None, extra={"type": "SMS"},
    ),
    Operation(
        "send_email", "Send an email message to a contact",
        "POST", "/conversations/messages",
        [
            required("contactId", "string", "Contact ID to send the email to"),
            required("subject", "string", "Email subject"),
            optional("message", "string", "Plain text email body"),
            optional("html", "string", "HTML email body"),
            optional("emailFrom", "string", "Sender email address"),
            optional("emailCc", "array", "CC recipients"),
            optional("emailBcc", "array", "BCC recipients"),
            optional("attachments", "array", "Attachment URLs"),
        ],
        location=None, extra={"type": "Email"},
    ),
    Operation(
        "search_conversations", "Search conversations with filters",
        "GET", "/conversations/search",
        [
            optional("contactId", "string", "Filter by contact ID"),
            optional("query", "string", "Search query"),
            optional("status", "string", "Conversation status", enum=["all", "read", "unread", "starred", "recents"]),
            optional("assignedTo", "string", "Filter by assigned user ID"),
            optional("limit", "number", "Maximum number of results", default=20),
        ],
    ),
    Operation(
        "get_conversation", "Get a conversation with its messages",
        "GET", "/conversations/{conversationId}",
        [CONVERSATION_ID], location=None,
    ),
    Operation(
        "create_conversation", "Create a new conversation with a contact",
        "POST", "/conversations/",
        [required("contactId", "string", "Contact ID")],
    ),
    Operation(
        "update_conversation", "Update conversation properties",
        "PUT", "/conversations/{conversationId}",
        [
            CONVERSATION_ID,
            optional("unreadCount", "number", "Number of unread messages"),
            optional("starred", "boolean", "Star the conversation"),
            optional("feedback", "object", "Feedback object"),
        ],
    ),
    Operation(
        "delete_conversation", "Delete a conversation",
        "DELETE", "/conversations/{conversationId}",
        [CONVERSATION_ID], location=None,
    ),
    Operation(
        "get_recent_messages", "Get the most recently active conversations",
        "GET", "/conversations/search",
        [
            optional("limit", "number", "Maximum number of conversations", default=10),
            optional("status", "string", "Conversation status", enum=["all", "unread"]),
        ],
        extra={"sortBy": "last_message_date", "sort": "desc"},
    ),
    # Message management
    Operation(
        "get_email_message", "Get an email message by ID",
        "GET", "/conversations/messages/email/{emailMessageId}",
        [EMAIL_MESSAGE_ID], location=None,
    ),
    Operation(
        "get_message", "Get a message by ID",
        "GET", "/conversations/messages/{messageId}",
        [MESSAGE_ID], location=None,
    ),
    Operation(
        "upload_message_attachments", "Upload file attachments for messages",
        "POST", "/conversations/messages/upload",
        [
            CONVERSATION_ID,
            required("attachmentUrls", "array", "URLs of the files to attach"),
        ],
        location=None,
    ),
    Operation(
        "update_message_status", "Update the delivery status of a message",
        "PUT", "/conversations/messages/{messageId}/status",
        [
            MESSAGE_ID,
            required("status", "string", "Message status", enum=["delivered", "failed", "pending", "read"]),
            optional("error", "object", "Error details for failed messages"),
            optional("emailMessageId", "string", "Email message ID"),
            optional("recipients", "array", "Email recipients"),
        ],
        location=None,
    ),
    # Manual message creation
    Operation(
        "add_inbound_message", "Manually add an inbound message to a conversation",
        "POST", "/conversations/messages/inbound",
        [
            required("type", "string", "Message type", enum=["SMS", "Email", "WhatsApp", "GMB", "IG", "FB", "Custom", "WebChat", "Live_Chat", "Call"]),
            CONVERSATION_ID,
            required("conversationProviderId", "string", "Conversation provider ID"),
            optional("message", "string", "Message content"),
            optional("attachments", "array", "Attachment URLs"),
            optional("html", "string", "HTML content (email)"),
            optional("subject", "string", "Subject (email)"),
            optional("emailFrom", "string", "Sender email"),
            optional("emailTo", "string", "Recipient email"),
            optional("date", "string", "Message date (ISO format)"),
        ],
        location=None,
    ),
    Operation(
        "add_outbound_call", "Manually add an outbound call record to a conversation",
        "POST", "/conversations/messages/outbound",
        [
            CONVERSATION_ID,
            required("conversationProviderId", "string", "Conversation provider ID"),
            required("call", "object", "Call details: {to, from, status}"),
            optional("attachments", "array", "Attachment URLs"),
            optional("date", "string", "Call date (ISO format)"),
        ],
        location=None, extra={"type": "Call"},
    ),
    # Call recordings & transcriptions
    Operation(
        "get_message_recording", "Get the recording of a call message",
        "GET", "/conversations/messages/{messageId}/locations/{locationId}/recording",
        [MESSAGE_ID], location=None,
    ),
    Operation(
        "get_message_transcription", "Get the transcription of a call message",
        "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription",
        [MESSAGE_ID], location=None,
    ),
    Operation(
        "download_transcription", "Download the transcription of a call message as text",
        "GET", "/conversations/locations/{locationId}/messages/{messageId}/transcription/download",
        [MESSAGE_ID], location=None,
    ),
    # Scheduling management
    Operation(
        "cancel_scheduled_message", "Cancel a scheduled message",
        "DELETE", "/conversations/messages/{messageId}/schedule",
        [MESSAGE_ID], location=None,
    ),
    Operation(
        "cancel_scheduled_email", "Cancel a scheduled email",
        "DELETE", "/conversations/messages/email/{emailMessageId}/schedule",
        [EMAIL_MESSAGE_ID], location=None,
    ),
    # Live chat features
    Operation(
        "live_chat_typing", "Send a live chat typing indicator",
        "POST", "/conversations/providers/live-chat/typing",
        [
            required("visitorId", "string", "Live chat visitor ID"),
            CONVERSATION_ID,
            required("isTyping", "boolean", "Whether the agent is typing"),
        ],
    ),
]
