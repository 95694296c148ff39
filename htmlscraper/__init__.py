"""htmlscraper - declarative HTML scraping into pydantic models.

Describe where data lives with CSS selectors and extract specs, scrape it
with BeautifulSoup.
"""

from htmlscraper.binder import Binder, Mode
from htmlscraper.config import ScraperConfig, load_config
from htmlscraper.exceptions import (
    AggregateError,
    AttributeNotFoundError,
    ExtractionError,
    InvalidSelectorError,
    InvalidTargetShapeError,
    NilInputError,
    NotFoundError,
    ScrapeError,
    UnresolvedExtractSpecError,
)
from htmlscraper.extractors import (
    ATTRIBUTE_PREFIX,
    BUILTIN_METHODS,
    DEEP_TEXT,
    TEXT,
    ExtractMethod,
    Extractor,
    ExtractorRegistry,
    Match,
    exact_match,
    extract_attribute,
    extract_deep_text,
    extract_method,
    extract_text,
    prefix_match,
)
from htmlscraper.models import (
    Directive,
    Field,
    FieldSpec,
    OptionalShape,
    PrimitiveShape,
    RecordShape,
    SequenceShape,
    Shape,
    shape_of,
)
from htmlscraper.report import error_table, print_error_report
from htmlscraper.scraper import Scraper, scrape
from htmlscraper.selection import Selection

__all__ = [
    # Entry points
    'Scraper',
    'scrape',
    'Mode',
    'Binder',
    'Selection',
    # Configuration
    'ScraperConfig',
    'load_config',
    # Models and shapes
    'Directive',
    'Field',
    'FieldSpec',
    'OptionalShape',
    'PrimitiveShape',
    'RecordShape',
    'SequenceShape',
    'Shape',
    'shape_of',
    # Extract methods
    'ATTRIBUTE_PREFIX',
    'BUILTIN_METHODS',
    'DEEP_TEXT',
    'TEXT',
    'ExtractMethod',
    'Extractor',
    'ExtractorRegistry',
    'Match',
    'exact_match',
    'extract_attribute',
    'extract_deep_text',
    'extract_method',
    'extract_text',
    'prefix_match',
    # Errors
    'AggregateError',
    'AttributeNotFoundError',
    'ExtractionError',
    'InvalidSelectorError',
    'InvalidTargetShapeError',
    'NilInputError',
    'NotFoundError',
    'ScrapeError',
    'UnresolvedExtractSpecError',
    'error_table',
    'print_error_report',
]
