"""
Notion request building for SaveIt.

The payload targets the "create page" endpoint. The parent database is
expected to have these properties:
- Name (title)
- Tags (multi_select)
- URL (url)
"""

import os
from typing import List, Dict

NOTION_API_URL = os.environ.get('NOTION_API_URL', 'https://api.notion.com/v1/pages')
NOTION_VERSION = os.environ.get('NOTION_VERSION', '2022-06-28')


def build_notion_headers(integration_token: str) -> Dict[str, str]:
    """Headers for an authenticated Notion API call."""
    return {
        'Authorization': f'Bearer {integration_token}',
        'Content-Type': 'application/json',
        'Notion-Version': NOTION_VERSION,
    }


def build_notion_payload(details: dict, tags: List[Dict[str, str]], database_id: str) -> dict:
    """
    Build the create-page body from scraped page details.

    The page icon is the bookmarked URL itself. The Open Graph image, when
    present, becomes a single image block; without one there is no
    `children` key at all.
    """
    payload = {
        'parent': {
            'database_id': database_id
        },
        'icon': {
            'external': {
                'url': details['url']
            }
        },
    }

    if details.get('image'):
        payload['children'] = [
            {
                'object': 'block',
                'image': {
                    'external': {
                        'url': details['image']
                    }
                }
            }
        ]

    payload['properties'] = {
        'Name': {
            'title': [
                {
                    'text': {
                        'content': details.get('title', '')
                    }
                }
            ]
        },
        'Tags': {
            'multi_select': tags
        },
        'URL': {
            'url': details['url']
        },
    }

    return payload
