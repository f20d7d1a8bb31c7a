"""
Blog Tools
"""

from ..base import Operation, optional, required

CATEGORY = "blog"

POST_FIELDS = [
    optional("author", "string", "Author ID"),
    optional("categories", "array", "Category IDs"),
    optional("tags", "array", "Post tags"),
    optional("status", "string", "Publication status", enum=["DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED"]),
    optional("publishedAt", "string", "Publish date (ISO format)"),
    optional("canonicalLink", "string", "Canonical URL"),
]

OPERATIONS = [
    Operation(
        "create_blog_post", "Create a new blog post",
        "POST", "/blogs/posts",
        [
            required("title", "string", "Blog post title"),
            required("blogId", "string", "Blog site ID"),
            required("rawHTML", "string", "Full HTML content of the post"),
            required("description", "string", "Short description / excerpt"),
            required("imageUrl", "string", "Featured image URL"),
            required("imageAltText", "string", "Featured image alt text"),
            required("urlSlug", "string", "URL slug"),
            *POST_FIELDS,
        ],
    ),
    Operation(
        "update_blog_post", "Update an existing blog post",
        "PUT", "/blogs/posts/{postId}",
        [
            required("postId", "string", "Blog post ID"),
            required("blogId", "string", "Blog site ID"),
            optional("title", "string", "Blog post title"),
            optional("rawHTML", "string", "Full HTML content of the post"),
            optional("description", "string", "Short description / excerpt"),
            optional("imageUrl", "string", "Featured image URL"),
            optional("imageAltText", "string", "Featured image alt text"),
            optional("urlSlug", "string", "URL slug"),
            *POST_FIELDS,
        ],
    ),
    Operation(
        "get_blog_posts", "List posts of a blog site",
        "GET", "/blogs/posts/all",
        [
            required("blogId", "string", "Blog site ID"),
            optional("limit", "number", "Maximum number of posts", default=10),
            optional("offset", "number", "Number of posts to skip", default=0),
            optional("searchTerm", "string", "Search term"),
            optional("status", "string", "Filter by status", enum=["DRAFT", "PUBLISHED", "SCHEDULED", "ARCHIVED"]),
        ],
    ),
    Operation(
        "get_blog_sites", "List blog sites",
        "GET", "/blogs/site/all",
        [
            optional("limit", "number", "Maximum number of sites", default=10),
            optional("skip", "number", "Number of sites to skip", default=0),
            optional("searchTerm", "string", "Search term"),
        ],
    ),
    Operation(
        "get_blog_authors", "List blog authors",
        "GET", "/blogs/authors",
        [
            optional("limit", "number", "Maximum number of authors", default=10),
            optional("offset", "number", "Number of authors to skip", default=0),
        ],
    ),
    Operation(
        "get_blog_categories", "List blog categories",
        "GET", "/blogs/categories",
        [
            optional("limit", "number", "Maximum number of categories", default=10),
            optional("offset", "number", "Number of categories to skip", default=0),
        ],
    ),
    Operation(
        "check_url_slug", "Check whether a blog post URL slug is already taken",
        "GET", "/blogs/posts/url-slug-exists",
        [
            required("urlSlug", "string", "URL slug to check"),
            optional("postId", "string", "Post ID to exclude (when updating)"),
        ],
    ),
]
