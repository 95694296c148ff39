"""Scrape entry points.

Example:
    >>> class Product(BaseModel):
    ...     name: str = Field(select='h2', extract='text')
    ...     price: str = Field(select='.price', extract='text')
    ...     image: str | None = Field(select='img', extract='@src')
    >>> soup = BeautifulSoup(html, 'lxml')
    >>> product = Scraper().scrape(soup, Product, '.product')

"""

import logging
from collections.abc import Iterable
from typing import Any

import logfire
from bs4.element import Tag
from pydantic import BaseModel

from htmlscraper.binder import Binder, Mode, Trail
from htmlscraper.config import DEFAULT_PARSER, ScraperConfig
from htmlscraper.exceptions import AggregateError, InvalidTargetShapeError, NilInputError, ScrapeError
from htmlscraper.extractors import ExtractMethod, ExtractorRegistry
from htmlscraper.models import Directive, Shape, shape_of
from htmlscraper.selection import Selection


class Scraper:
    """Scrapes parsed HTML documents into strings, lists and pydantic models.

    Attributes:
        mode: Failure tolerance policy applied to every scrape
        parser: BeautifulSoup tree builder used for markup string documents
        registry: Built-in extract methods followed by the custom ones
        logger: Logger instance for scrape tracking

    """

    def __init__(
        self, mode: Mode | str = Mode.STRICT, extractors: Iterable[ExtractMethod] = (), parser: str = DEFAULT_PARSER
    ):
        """Initialize the scraper.

        Args:
            mode: 'strict', 'tolerant' or 'silent'. Defaults to strict.
            extractors: Custom extract methods. Built-in methods (text,
                deeptext, @attr) take precedence over them.
            parser: BeautifulSoup parser for markup strings. Defaults to 'lxml'.

        """
        self.mode = Mode(mode)
        self.registry = ExtractorRegistry(extractors)
        self.parser = parser
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: ScraperConfig, extractors: Iterable[ExtractMethod] = ()) -> 'Scraper':
        """Create a scraper from configuration."""
        return cls(mode=config.mode, extractors=extractors, parser=config.parser)

    def scrape(self, document: str | Tag | Selection, target: Any, selector: str = '', extract: str = '') -> Any:
        """Scrape a document into ``target``.

        Args:
            document: HTML markup, a parsed document (BeautifulSoup or any Tag)
                or a Selection
            target: Type to produce (``str``, ``list[X]``, a pydantic model,
                ``X | None``, a Shape) or a model instance to populate in place
            selector: CSS selector applied to the document first. Defaults to ''.
            extract: Extract spec for str and list targets. Defaults to ''.

        Returns:
            The bound value. Model instances passed as target are returned
            after being populated.

        Raises:
            NilInputError: If document or target is None.
            InvalidTargetShapeError: If target is not a supported shape.
            ScrapeError: In strict mode, the first failure.
            AggregateError: In tolerant mode, if any failure was recorded.

        """
        if document is None:
            raise NilInputError('document')
        if target is None:
            raise NilInputError('target')

        shape, instance = self._resolve_target(target)
        selection = self._resolve_document(document)
        directive = Directive(select=selector, extract=extract)

        with logfire.span('scrape', mode=self.mode.value, selector=selector, extract=extract):
            self.logger.debug(f'Scraping {type(shape).__name__} (mode={self.mode.value}, selector={selector!r})')
            binder = Binder(self.mode, self.registry)
            try:
                value = binder.bind(selection, shape, directive, Trail(), instance)
            except ScrapeError as e:
                logfire.warn('Scrape aborted', error=str(e))
                self.logger.info(f'Scrape aborted: {e}')
                raise

            logfire.info('Scrape complete', mode=self.mode.value, errors=len(binder.errors))
            if binder.errors:
                raise AggregateError(binder.errors, value=value)
            return value

    def _resolve_target(self, target: Any) -> tuple[Shape, BaseModel | None]:
        """Split a target into its shape and, for model instances, the instance itself."""
        if isinstance(target, BaseModel):
            if target.model_config.get('frozen'):
                raise InvalidTargetShapeError(type(target), 'frozen model instances cannot be populated in place')
            return shape_of(type(target)), target
        return shape_of(target), None

    def _resolve_document(self, document: str | Tag | Selection) -> Selection:
        """Wrap a document as a Selection, parsing markup strings with the configured parser."""
        if isinstance(document, Selection):
            return document
        if isinstance(document, str):
            return Selection.from_html(document, self.parser)
        return Selection.from_document(document)


def scrape(
    document: str | Tag | Selection,
    target: Any,
    selector: str = '',
    extract: str = '',
    mode: Mode | str = Mode.STRICT,
    extractors: Iterable[ExtractMethod] = (),
    parser: str = DEFAULT_PARSER,
) -> Any:
    """Scrape a document with a one-off Scraper. See :meth:`Scraper.scrape`."""
    return Scraper(mode=mode, extractors=extractors, parser=parser).scrape(document, target, selector, extract)
