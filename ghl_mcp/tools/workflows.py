"""
Workflow Tools
"""

from ..base import Operation

CATEGORY = "workflow"

OPERATIONS = [
    Operation(
        "ghl_get_workflows", "List the automation workflows of a location",
        "GET", "/workflows/",
    ),
]
