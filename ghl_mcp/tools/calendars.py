"""
Calendar Tools

Calendars, calendar groups, appointments and blocked slots.
"""

from ..base import Operation, optional, required

CATEGORY = "calendar"

CALENDAR_ID = required("calendarId", "string", "Calendar ID")
APPOINTMENT_ID = required("appointmentId", "string", "Appointment ID")
APPOINTMENT_STATUS = ["new", "confirmed", "cancelled", "showed", "noshow", "invalid"]

CALENDAR_FIELDS = [
    optional("description", "string", "Calendar description"),
    optional(
        "calendarType", "string", "Calendar type",
        enum=["round_robin", "event", "class_booking", "collective", "service_booking", "personal"],
    ),
    optional("groupId", "string", "Calendar group ID"),
    optional("slotDuration", "number", "Slot duration in minutes"),
    optional("slotInterval", "number", "Slot interval in minutes"),
    optional("teamMembers", "array", "Team member configuration", items_type="object"),
    optional("isActive", "boolean", "Whether the calendar is active"),
]

APPOINTMENT_FIELDS = [
    optional("endTime", "string", "End time (ISO format)"),
    optional("title", "string", "Appointment title"),
    optional("appointmentStatus", "string", "Appointment status", enum=APPOINTMENT_STATUS),
    optional("assignedUserId", "string", "Assigned user ID"),
    optional("address", "string", "Meeting address or link"),
    optional("meetingLocationType", "string", "Meeting location type"),
    optional("ignoreDateRange", "boolean", "Ignore the calendar's date range limits"),
    optional("toNotify", "boolean", "Send notifications"),
]

OPERATIONS = [
    Operation(
        "get_calendar_groups", "List all calendar groups",
        "GET", "/calendars/groups",
    ),
    Operation(
        "get_calendars", "List all calendars",
        "GET", "/calendars/",
        [
            optional("groupId", "string", "Filter by calendar group ID"),
            optional("showDrafted", "boolean", "Include draft calendars"),
        ],
    ),
    Operation(
        "create_calendar", "Create a new calendar",
        "POST", "/calendars/",
        [required("name", "string", "Calendar name"), *CALENDAR_FIELDS],
    ),
    Operation(
        "get_calendar", "Get a specific calendar",
        "GET", "/calendars/{calendarId}",
        [CALENDAR_ID], location=None,
    ),
    Operation(
        "update_calendar", "Update a calendar",
        "PUT", "/calendars/{calendarId}",
        [CALENDAR_ID, optional("name", "string", "Calendar name"), *CALENDAR_FIELDS],
        location=None,
    ),
    Operation(
        "delete_calendar", "Delete a calendar",
        "DELETE", "/calendars/{calendarId}",
        [CALENDAR_ID], location=None,
    ),
    Operation(
        "get_calendar_events", "Get calendar events within a time range",
        "GET", "/calendars/events",
        [
            required("startTime", "string", "Start time (epoch milliseconds)"),
            required("endTime", "string", "End time (epoch milliseconds)"),
            optional("calendarId", "string", "Filter by calendar ID"),
            optional("userId", "string", "Filter by user ID"),
            optional("groupId", "string", "Filter by calendar group ID"),
        ],
    ),
    Operation(
        "get_free_slots", "Get available booking slots of a calendar",
        "GET", "/calendars/{calendarId}/free-slots",
        [
            CALENDAR_ID,
            required("startDate", "number", "Start date (epoch milliseconds)"),
            required("endDate", "number", "End date (epoch milliseconds)"),
            optional("timezone", "string", "Timezone for the returned slots"),
            optional("userId", "string", "Filter by user ID"),
        ],
        location=None,
    ),
    Operation(
        "create_appointment", "Book a new appointment",
        "POST", "/calendars/events/appointments",
        [
            CALENDAR_ID,
            required("contactId", "string", "Contact ID"),
            required("startTime", "string", "Start time (ISO format)"),
            *APPOINTMENT_FIELDS,
        ],
    ),
    Operation(
        "get_appointment", "Get a specific appointment",
        "GET", "/calendars/events/appointments/{appointmentId}",
        [APPOINTMENT_ID], location=None,
    ),
    Operation(
        "update_appointment", "Update an appointment",
        "PUT", "/calendars/events/appointments/{appointmentId}",
        [
            APPOINTMENT_ID,
            optional("calendarId", "string", "Calendar ID"),
            optional("startTime", "string", "Start time (ISO format)"),
            *APPOINTMENT_FIELDS,
        ],
        location=None,
    ),
    Operation(
        "delete_appointment", "Delete an appointment",
        "DELETE", "/calendars/events/{appointmentId}",
        [APPOINTMENT_ID], location=None,
    ),
    Operation(
        "create_block_slot", "Block a time slot on a calendar",
        "POST", "/calendars/events/block-slots",
        [
            required("startTime", "string", "Start time (ISO format)"),
            required("endTime", "string", "End time (ISO format)"),
            optional("title", "string", "Block title"),
            optional("calendarId", "string", "Calendar ID"),
            optional("assignedUserId", "string", "Assigned user ID"),
        ],
    ),
    Operation(
        "update_block_slot", "Update a blocked time slot",
        "PUT", "/calendars/events/block-slots/{blockSlotId}",
        [
            required("blockSlotId", "string", "Block slot ID"),
            optional("startTime", "string", "Start time (ISO format)"),
            optional("endTime", "string", "End time (ISO format)"),
            optional("title", "string", "Block title"),
            optional("calendarId", "string", "Calendar ID"),
            optional("assignedUserId", "string", "Assigned user ID"),
        ],
    ),
]
