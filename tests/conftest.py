import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def product_html():
    return '<div class="product"><h2>Widget</h2><p class="price">$9.99</p></div>'


@pytest.fixture
def product_doc(product_html):
    return BeautifulSoup(product_html, 'lxml')


@pytest.fixture
def parse():
    """Parse markup into a BeautifulSoup document."""

    def _parse(markup: str, parser: str = 'lxml') -> BeautifulSoup:
        return BeautifulSoup(markup, parser)

    return _parse


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        file_path = str(item.path)

        # Add marks based on directory
        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
