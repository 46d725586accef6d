"""
Tag formatting for Notion multi_select properties.

Tags arrive as a single comma-separated string, e.g. "reading, go, notion".
Each segment becomes one {"name": ...} option, trimmed of surrounding spaces.
Empty segments are kept as-is, so an empty string yields [{"name": ""}].
"""

from typing import List, Dict


def format_tags(raw_tags: str) -> List[Dict[str, str]]:
    """
    Split a comma-separated tag string into Notion multi_select options.

    Examples:
        >>> format_tags("go, notion , cli")
        [{'name': 'go'}, {'name': 'notion'}, {'name': 'cli'}]

        >>> format_tags("")
        [{'name': ''}]
    """
    return [{'name': tag.strip(' ')} for tag in raw_tags.split(',')]
