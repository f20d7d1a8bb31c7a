"""
Opportunity Tools

Sales pipeline opportunities. The search endpoint expects the location
id under `location_id` rather than `locationId`.
"""

from ..base import Operation, optional, required

CATEGORY = "opportunity"

OPPORTUNITY_ID = required("opportunityId", "string", "Opportunity ID")
STATUS = ["open", "won", "lost", "abandoned"]

OPPORTUNITY_FIELDS = [
    optional("pipelineStageId", "string", "Pipeline stage ID"),
    optional("status", "string", "Opportunity status", enum=STATUS),
    optional("monetaryValue", "number", "Monetary value of the opportunity"),
    optional("assignedTo", "string", "User ID the opportunity is assigned to"),
]

OPERATIONS = [
    Operation(
        "search_opportunities", "Search opportunities in the sales pipeline",
        "GET", "/opportunities/search",
        [
            optional("q", "string", "Search query"),
            optional("pipelineId", "string", "Filter by pipeline ID"),
            optional("pipelineStageId", "string", "Filter by pipeline stage ID"),
            optional("contactId", "string", "Filter by contact ID"),
            optional("status", "string", "Filter by status", enum=STATUS + ["all"]),
            optional("assignedTo", "string", "Filter by assigned user ID"),
            optional("limit", "number", "Maximum number of results", default=20),
        ],
        location_key="location_id",
    ),
    Operation(
        "get_pipelines", "List all sales pipelines and their stages",
        "GET", "/opportunities/pipelines",
    ),
    Operation(
        "get_opportunity", "Get a specific opportunity",
        "GET", "/opportunities/{opportunityId}",
        [OPPORTUNITY_ID], location=None,
    ),
    Operation(
        "create_opportunity", "Create a new opportunity",
        "POST", "/opportunities/",
        [
            required("name", "string", "Opportunity name"),
            required("pipelineId", "string", "Pipeline ID"),
            required("contactId", "string", "Contact ID"),
            *OPPORTUNITY_FIELDS,
        ],
    ),
    Operation(
        "update_opportunity_status", "Update the status of an opportunity",
        "PUT", "/opportunities/{opportunityId}/status",
        [OPPORTUNITY_ID, required("status", "string", "New status", enum=STATUS)],
        location=None,
    ),
    Operation(
        "delete_opportunity", "Delete an opportunity",
        "DELETE", "/opportunities/{opportunityId}",
        [OPPORTUNITY_ID], location=None,
    ),
    Operation(
        "update_opportunity", "Update an opportunity",
        "PUT", "/opportunities/{opportunityId}",
        [
            OPPORTUNITY_ID,
            optional("name", "string", "Opportunity name"),
            optional("pipelineId", "string", "Pipeline ID"),
            *OPPORTUNITY_FIELDS,
        ],
        location=None,
    ),
    Operation(
        "upsert_opportunity", "Create or update an opportunity for a contact in a pipeline",
        "POST", "/opportunities/upsert",
        [
            required("pipelineId", "string", "Pipeline ID"),
            required("contactId", "string", "Contact ID"),
            optional("name", "string", "Opportunity name"),
            *OPPORTUNITY_FIELDS,
        ],
    ),
    Operation(
        "add_opportunity_followers", "Add followers to an opportunity",
        "POST", "/opportunities/{opportunityId}/followers",
        [OPPORTUNITY_ID, required("followers", "array", "User IDs of followers to add")],
        location=None,
    ),
    Operation(
        "remove_opportunity_followers", "Remove followers from an opportunity",
        "DELETE", "/opportunities/{opportunityId}/followers",
        [OPPORTUNITY_ID, required("followers", "array", "User IDs of followers to remove")],
        location=None, args_in="body",
    ),
]
