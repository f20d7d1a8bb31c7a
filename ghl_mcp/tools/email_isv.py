"""
Email Verification Tools
"""

from ..base import Operation, required

CATEGORY = "email_isv"

OPERATIONS = [
    Operation(
        "verify_email", "Verify an email address or the email of a contact",
        "POST", "/email/verify",
        [
            required("type", "string", "What `verify` refers to", enum=["email", "contact"]),
            required("verify", "string", "Email address or contact ID to verify"),
        ],
        location="query",
    ),
]
