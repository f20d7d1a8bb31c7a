"""
Survey Tools
"""

from ..base import Operation, optional

CATEGORY = "survey"

OPERATIONS = [
    Operation(
        "ghl_get_surveys", "List the surveys of a location",
        "GET", "/surveys/",
        [
            optional("skip", "number", "Number of surveys to skip"),
            optional("limit", "number", "Maximum number of surveys (max 50)"),
            optional("type", "string", "Filter by survey type"),
        ],
    ),
    Operation(
        "ghl_get_survey_submissions", "List survey submissions",
        "GET", "/surveys/submissions",
        [
            optional("page", "number", "Page number"),
            optional("limit", "number", "Submissions per page (max 100)"),
            optional("surveyId", "string", "Filter by survey ID"),
            optional("q", "string", "Search by contact name, email or ID"),
            optional("startAt", "string", "Start date (YYYY-MM-DD)"),
            optional("endAt", "string", "End date (YYYY-MM-DD)"),
        ],
    ),
]
