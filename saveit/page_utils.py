"""
Page detail extraction for SaveIt.

Works on an already-parsed BeautifulSoup document. Fetching lives in the
Cloud Function itself so this module stays free of network calls.
"""

import os
from urllib.parse import urlparse
from bs4 import BeautifulSoup

# Third-party favicon proxy, referenced by URL only
FAVICON_PROXY_URL = os.environ.get('FAVICON_PROXY_URL', 'https://icon.horse/icon/')


def get_favicon_url(url: str) -> str:
    """Build the favicon proxy URL for the host of `url`, without port or userinfo."""
    host = urlparse(url).hostname or ''
    return FAVICON_PROXY_URL + host


def extract_title(soup: BeautifulSoup) -> str:
    """Text of the first <title> element, or '' when there is none."""
    if not soup:
        return ''

    title_tag = soup.find('title')
    return title_tag.get_text(strip=True) if title_tag else ''


def extract_og_image(soup: BeautifulSoup) -> str:
    """Content of <meta property="og:image">, or '' when missing."""
    if not soup:
        return ''

    og_image = soup.find('meta', property='og:image')
    return (og_image.get('content') or '') if og_image else ''


def extract_page_details(url: str, soup: BeautifulSoup) -> dict:
    """
    Collect the details SaveIt sends to Notion.

    Returns dict with:
        title: str - page title, '' if absent
        image: str - Open Graph image URL, '' if absent
        favicon: str - favicon proxy URL for the page's host
        url: str - the page URL as requested
    """
    return {
        'title': extract_title(soup),
        'image': extract_og_image(soup),
        'favicon': get_favicon_url(url),
        'url': url,
    }
