"""Shared utilities for the SaveIt Cloud Function."""

from .tag_utils import (
    format_tags,
)

from .page_utils import (
    FAVICON_PROXY_URL,
    get_favicon_url,
    extract_title,
    extract_og_image,
    extract_page_details,
)

from .notion_utils import (
    NOTION_API_URL,
    NOTION_VERSION,
    build_notion_headers,
    build_notion_payload,
)

__all__ = [
    # Tag utilities
    'format_tags',
    # Page utilities
    'FAVICON_PROXY_URL',
    'get_favicon_url',
    'extract_title',
    'extract_og_image',
    'extract_page_details',
    # Notion utilities
    'NOTION_API_URL',
    'NOTION_VERSION',
    'build_notion_headers',
    'build_notion_payload',
]
