"""
Shared pytest fixtures for SaveIt tests.
"""

import pytest
import sys
import importlib.util
from pathlib import Path
from bs4 import BeautifulSoup
from flask import Request
from werkzeug.test import EnvironBuilder

# Project root for finding the Cloud Function module
PROJECT_ROOT = Path(__file__).parent.parent


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load the Cloud Function module with a unique name at module load time
_save_it_module = _load_module_from_path(
    'save_it_main',
    PROJECT_ROOT / 'save-it' / 'main.py'
)


# ============================================================================
# Cloud Function Fixtures
# ============================================================================

@pytest.fixture
def parse_incoming_request():
    """Returns parse_incoming_request function from save-it."""
    return _save_it_module.parse_incoming_request


@pytest.fixture
def fetch_page():
    """Returns fetch_page function from save-it."""
    return _save_it_module.fetch_page


@pytest.fixture
def get_page_details():
    """Returns get_page_details function from save-it."""
    return _save_it_module.get_page_details


@pytest.fixture
def create_notion_page():
    """Returns create_notion_page function from save-it."""
    return _save_it_module.create_notion_page


@pytest.fixture
def save_it():
    """Returns main entry point from save-it."""
    return _save_it_module.save_it


@pytest.fixture
def notion_api_url():
    return _save_it_module.NOTION_API_URL


# ============================================================================
# HTML Fixtures
# ============================================================================

@pytest.fixture
def sample_article_html():
    """Returns raw HTML of a page with a title and an og:image."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Example</title>
        <meta property="og:title" content="Example Article">
        <meta property="og:image" content="https://ex.com/a.png">
    </head>
    <body>
        <article>
            <h1>Example</h1>
            <p>Some text worth saving.</p>
        </article>
    </body>
    </html>
    """


@pytest.fixture
def sample_plain_html():
    """Returns raw HTML of a page without any Open Graph tags."""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Plain Page</title></head>
    <body><p>Nothing fancy here.</p></body>
    </html>
    """


@pytest.fixture
def sample_article_soup(sample_article_html):
    return BeautifulSoup(sample_article_html, 'html.parser')


@pytest.fixture
def empty_soup():
    """Returns empty BeautifulSoup."""
    return BeautifulSoup("", 'html.parser')


# ============================================================================
# Request Fixtures
# ============================================================================

@pytest.fixture
def mock_flask_request():
    """Factory for creating Flask request objects with a raw or JSON body."""
    def _make(json_data=None, data=None, method='POST'):
        builder = EnvironBuilder(
            method=method,
            json=json_data,
            data=data,
            content_type=None if json_data is not None else 'application/json'
        )
        return builder.get_request(Request)

    return _make


@pytest.fixture
def incoming_payload():
    """A valid SaveIt request body."""
    return {
        'integrationToken': 'secret_test_token',
        'databaseId': 'db123',
        'url': 'https://example.com/article',
        'tags': 'reading, go, notion'
    }
