"""
Social Media Posting Tools

Posts, connected accounts, CSV bulk uploads, categories, tags and
OAuth onboarding for the social planner.
"""

from ..base import Operation, optional, required

CATEGORY = "social_media"

BASE = "/social-media-posting/{locationId}"
POST_ID = required("postId", "string", "Social post ID")
PLATFORMS = ["google", "facebook", "instagram", "linkedin", "twitter", "tiktok", "tiktok-business"]

POST_FIELDS = [
    optional("media", "array", "Media items: {url, caption, type}", items_type="object"),
    optional("status", "string", "Post status", enum=["draft", "scheduled", "published", "failed", "in_review", "deleted"]),
    optional("scheduleDate", "string", "Scheduled publish date (ISO format)"),
    optional("followUpComment", "string", "Comment posted after publishing"),
    optional("tags", "array", "Tag IDs"),
    optional("categoryId", "string", "Category ID"),
    optional("userId", "string", "User ID creating the post"),
]

OPERATIONS = [
    # Post Management
    Operation(
        "search_social_posts", "Search social media posts",
        "POST", BASE + "/posts/list",
        [
            optional("type", "string", "Post type filter", enum=["recent", "all", "scheduled", "draft", "failed", "in_review", "published", "in_progress", "deleted"]),
            optional("accounts", "string", "Comma separated account IDs"),
            optional("skip", "number", "Number of posts to skip", default=0),
            optional("limit", "number", "Maximum number of posts", default=10),
            optional("fromDate", "string", "Start date (ISO format)"),
            optional("toDate", "string", "End date (ISO format)"),
            optional("includeUsers", "boolean", "Include user data", default=True),
            optional("postType", "string", "Post format", enum=["post", "story", "reel"]),
        ],
        location=None,
    ),
    Operation(
        "create_social_post", "Create or schedule a social media post",
        "POST", BASE + "/posts",
        [
            required("accountIds", "array", "Social account IDs to post to"),
            required("summary", "string", "Post content"),
            *POST_FIELDS,
        ],
        location=None, extra={"type": "post"},
    ),
    Operation(
        "get_social_post", "Get a social media post",
        "GET", BASE + "/posts/{postId}",
        [POST_ID], location=None,
    ),
    Operation(
        "update_social_post", "Update a social media post",
        "PUT", BASE + "/posts/{postId}",
        [
            POST_ID,
            optional("accountIds", "array", "Social account IDs"),
            optional("summary", "string", "Post content"),
            *POST_FIELDS,
        ],
        location=None,
    ),
    Operation(
        "delete_social_post", "Delete a social media post",
        "DELETE", BASE + "/posts/{postId}",
        [POST_ID], location=None,
    ),
    Operation(
        "bulk_delete_social_posts", "Delete multiple social media posts",
        "POST", BASE + "/posts/bulk-delete",
        [required("postIds", "array", "Post IDs to delete (max 50)")], location=None,
    ),
    # Account Management
    Operation(
        "get_social_accounts", "List connected social media accounts",
        "GET", BASE + "/accounts",
        location=None,
    ),
    Operation(
        "delete_social_account", "Disconnect a social media account",
        "DELETE", BASE + "/accounts/{accountId}",
        [
            required("accountId", "string", "Account ID"),
            optional("companyId", "string", "Company ID"),
            optional("userId", "string", "User ID"),
        ],
        location=None,
    ),
    # CSV Operations
    Operation(
        "upload_social_csv", "Upload a CSV file of posts for bulk scheduling",
        "POST", BASE + "/csv",
        [required("file", "string", "CSV file URL or content")], location=None,
    ),
    Operation(
        "get_csv_upload_status", "Get the status of CSV uploads",
        "GET", BASE + "/csv",
        [
            optional("skip", "number", "Number of uploads to skip", default=0),
            optional("limit", "number", "Maximum number of uploads", default=10),
            optional("includeUsers", "boolean", "Include user data"),
            optional("userId", "string", "Filter by user ID"),
        ],
        location=None,
    ),
    Operation(
        "set_csv_accounts", "Assign accounts to an uploaded CSV",
        "POST", BASE + "/set-accounts",
        [
            required("accountIds", "array", "Account IDs"),
            required("filePath", "string", "Path of the uploaded CSV"),
            required("rowsCount", "number", "Number of rows"),
            required("fileName", "string", "CSV file name"),
            optional("approver", "string", "Approver user ID"),
            optional("userId", "string", "User ID"),
        ],
        location=None,
    ),
    # Categories & Tags
    Operation(
        "get_social_categories", "List social post categories",
        "GET", BASE + "/categories",
        [
            optional("searchText", "string", "Search text"),
            optional("limit", "number", "Maximum number of categories", default=10),
            optional("skip", "number", "Number of categories to skip", default=0),
        ],
        location=None,
    ),
    Operation(
        "get_social_category", "Get a social post category",
        "GET", BASE + "/categories/{id}",
        [required("id", "string", "Category ID")], location=None,
    ),
    Operation(
        "get_social_tags", "List social post tags",
        "GET", BASE + "/tags",
        [
            optional("searchText", "string", "Search text"),
            optional("limit", "number", "Maximum number of tags", default=10),
            optional("skip", "number", "Number of tags to skip", default=0),
        ],
        location=None,
    ),
    Operation(
        "get_social_tags_by_ids", "Get social post tags by their IDs",
        "POST", BASE + "/tags/details",
        [required("tagIds", "array", "Tag IDs")], location=None,
    ),
    # OAuth Integration
    Operation(
        "start_social_oauth", "Start the OAuth flow to connect a social platform",
        "GET", "/social-media-posting/oauth/{platform}/start",
        [
            required("platform", "string", "Social platform", enum=PLATFORMS),
            required("userId", "string", "User ID initiating the flow"),
            optional("page", "string", "Page context"),
            optional("reconnect", "boolean", "Reconnect an existing account"),
        ],
    ),
    Operation(
        "get_platform_accounts", "List accounts available after OAuth for a platform",
        "GET", "/social-media-posting/oauth/{locationId}/{platform}/accounts/{accountId}",
        [
            required("platform", "string", "Social platform", enum=PLATFORMS),
            required("accountId", "string", "OAuth account ID"),
        ],
        location=None,
    ),
]
