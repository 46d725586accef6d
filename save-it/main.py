"""
SaveIt Cloud Function

Saves a webpage as a new page in a Notion database.

Responsibilities:
- Parse the incoming request (token, database id, url, tags)
- Fetch the webpage and extract title, Open Graph image and favicon
- Build the Notion "create page" payload
- Call Notion and relay its response

Does NOT:
- Authenticate the caller (the integration token is forwarded as-is)
- Retry failed calls
- Persist anything
"""

import functions_framework
import requests
from bs4 import BeautifulSoup
import json
import os
import sys
import traceback

# Add saveit package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from saveit.tag_utils import format_tags
from saveit.page_utils import extract_page_details
from saveit.notion_utils import NOTION_API_URL, build_notion_headers, build_notion_payload

# Configuration
FETCH_TIMEOUT = float(os.environ.get('FETCH_TIMEOUT', '30'))
NOTION_TIMEOUT = float(os.environ.get('NOTION_TIMEOUT', '30'))
USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'

PARSE_ERROR_MESSAGE = 'The body could not be parsed'
REQUEST_FIELDS = ['integrationToken', 'databaseId', 'url', 'tags']


def parse_incoming_request(request) -> tuple:
    """
    Read the JSON body. Returns (payload, error).

    Missing fields default to ''. A body that is not a JSON object, or a
    field that is not a string, is a parse error.
    """
    request_json = request.get_json(force=True, silent=True)

    if not isinstance(request_json, dict):
        return None, PARSE_ERROR_MESSAGE

    payload = {}
    for field in REQUEST_FIELDS:
        value = request_json.get(field, '')
        if value is None:
            value = ''
        if not isinstance(value, str):
            return None, PARSE_ERROR_MESSAGE
        payload[field] = value

    return payload, None


def fetch_page(url: str) -> tuple:
    """Fetch webpage content as raw bytes. Returns (html, error)."""
    headers = {
        'User-Agent': USER_AGENT,
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    }

    try:
        with requests.get(url, headers=headers, timeout=FETCH_TIMEOUT) as response:
            if response.status_code != 200:
                return None, f'The page returned a {response.status_code} error'
            return response.content, None
    except requests.exceptions.RequestException as e:
        print(f"Page fetch failed for {url}: {e}")
        return None, 'The page could not be fetched'


def parse_html(html: bytes) -> tuple:
    """
    Parse HTML into a BeautifulSoup document. Returns (soup, error).

    Takes raw bytes so the encoding comes from the page's own <meta charset>
    rather than the Content-Type header.
    """
    try:
        return BeautifulSoup(html, 'html.parser'), None
    except Exception as e:
        return None, f'The page could not be parsed: {e}'


def get_page_details(url: str) -> tuple:
    """Fetch and scrape a page. Returns (details, error)."""
    html, fetch_error = fetch_page(url)
    if fetch_error:
        return None, fetch_error

    soup, parse_error = parse_html(html)
    if parse_error:
        return None, parse_error

    return extract_page_details(url, soup), None


def create_notion_page(integration_token: str, payload: dict) -> tuple:
    """
    POST the payload to Notion's create-page endpoint.

    Returns (status_code, body, error). On a transport failure status_code
    and body are None.
    """
    try:
        with requests.post(
            NOTION_API_URL,
            headers=build_notion_headers(integration_token),
            data=json.dumps(payload),
            timeout=NOTION_TIMEOUT
        ) as response:
            return response.status_code, response.text, None
    except requests.exceptions.RequestException as e:
        print(f"Notion call failed: {e}")
        return None, None, str(e)


def error_response(message: str, status_code: int, headers: dict) -> tuple:
    return (json.dumps({'error': message}), status_code, headers)


@functions_framework.http
def save_it(request):
    """
    Main Cloud Function entry point.

    Expected JSON input:
    {
        "integrationToken": "secret_...",
        "databaseId": "0123456789abcdef0123456789abcdef",
        "url": "https://example.com/article",
        "tags": "reading, go, notion"
    }

    Relays Notion's response body. Notion 200 maps to 200, any other
    Notion status to 400.
    """
    # Handle CORS
    if request.method == 'OPTIONS':
        headers = {
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Methods': 'POST',
            'Access-Control-Allow-Headers': 'Content-Type',
            'Access-Control-Max-Age': '3600'
        }
        return ('', 204, headers)

    headers = {
        'Access-Control-Allow-Origin': '*',
        'Content-Type': 'application/json',
    }

    try:
        incoming, parse_error = parse_incoming_request(request)
        if parse_error:
            return error_response(parse_error, 400, headers)

        url = incoming['url']
        print(f"Saving page: {url}")

        tags = format_tags(incoming['tags'])

        details, details_error = get_page_details(url)
        if details_error:
            print(f"Page details error: {details_error}")
            return error_response(details_error, 400, headers)

        payload = build_notion_payload(details, tags, incoming['databaseId'])

        status_code, body, notion_error = create_notion_page(incoming['integrationToken'], payload)
        if notion_error:
            return error_response(notion_error, 400, headers)

        print(f"Notion responded with {status_code}")
        if status_code != 200:
            return (body, 400, headers)

        return (body, 200, headers)

    except Exception as e:
        print(f"Error: {str(e)}\n{traceback.format_exc()}")
        return error_response(str(e), 500, headers)
