"""
Media Library Tools
"""

from ..base import Operation, optional, required

CATEGORY = "media"

OPERATIONS = [
    Operation(
        "get_media_files", "List files and folders in the media library",
        "GET", "/medias/files",
        [
            optional("sortBy", "string", "Sort field", default="createdAt"),
            optional("sortOrder", "string", "Sort order", enum=["asc", "desc"], default="desc"),
            optional("type", "string", "Item type", enum=["file", "folder"]),
            optional("query", "string", "Search query"),
            optional("limit", "number", "Maximum number of items"),
            optional("offset", "number", "Number of items to skip"),
            optional("parentId", "string", "Parent folder ID"),
        ],
        location_key="altId", extra={"altType": "location"},
    ),
    Operation(
        "upload_media_file", "Upload a hosted file into the media library",
        "POST", "/medias/upload-file",
        [
            required("fileUrl", "string", "URL of the hosted file"),
            optional("name", "string", "File name"),
            optional("parentId", "string", "Parent folder ID"),
        ],
        location_key="altId", extra={"altType": "location", "hosted": True},
    ),
    Operation(
        "delete_media_file", "Delete a file or folder from the media library",
        "DELETE", "/medias/{id}",
        [required("id", "string", "File or folder ID")],
        location_key="altId", extra={"altType": "location"},
    ),
]
