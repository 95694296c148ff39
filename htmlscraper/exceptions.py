"""Custom exceptions for htmlscraper."""

from typing import Any


def format_path(path: tuple[str, ...]) -> str:
    """Render a selector path as a single string.

    Selector segments are joined with ``' > '``; element indexes (segments
    starting with ``[``) are glued to the segment before them.

    Args:
        path: Selector and index segments from root to failure point

    Returns:
        The rendered path, e.g. ``'.product > li[2] > .price'``.

    """
    rendered = ''
    for segment in path:
        if segment.startswith('[') or not rendered:
            rendered += segment
        else:
            rendered += f' > {segment}'
    return rendered


class ScrapeError(Exception):
    """Base class for all scraping failures.

    Attributes:
        reason: Human readable description of the failure
        path: Selectors (and element indexes) active from the root to the failure point
        field: Dotted field path of the failing value, if any

    """

    def __init__(self, reason: str):
        """Initialize the error.

        Args:
            reason: Human readable description of the failure

        """
        super().__init__(reason)
        self.reason = reason
        self.path: tuple[str, ...] = ()
        self.field: str | None = None

    def locate(self, path: tuple[str, ...], field: str | None = None) -> 'ScrapeError':
        """Return a copy of the error annotated with the selector path and field where it happened.

        The receiver is left untouched, so one error instance raised from
        several places yields one located error per place.
        """
        # Bypass __init__: subclasses take their own constructor arguments
        located = type(self).__new__(type(self), *self.args)
        located.__dict__.update(self.__dict__)
        located.path = path
        located.field = field or None
        return located

    @property
    def location(self) -> str:
        """Rendered selector path."""
        return format_path(self.path)

    @property
    def kind(self) -> str:
        """Short name of the failure kind."""
        return type(self).__name__

    def __str__(self) -> str:
        """Return the path-annotated message."""
        location = self.location
        if location:
            return f'{location}: {self.reason}'
        return self.reason

    def __repr__(self) -> str:
        """Return detailed string representation for debugging."""
        return f'{self.kind}({str(self)!r})'


class NilInputError(ScrapeError):
    """Raised when a required input is None."""

    def __init__(self, name: str):
        """Initialize the error.

        Args:
            name: Name of the missing input

        """
        self.name = name
        super().__init__(f'{name} is nil')


class InvalidTargetShapeError(ScrapeError):
    """Raised when a target cannot be described as a supported shape."""

    def __init__(self, target: Any, reason: str = 'must be a str, list, pydantic model or optional'):
        """Initialize the error.

        Args:
            target: The rejected target
            reason: Why the target is not supported

        """
        self.target = target
        super().__init__(f'invalid target {target!r}: {reason}')


class NotFoundError(ScrapeError):
    """Raised when a required selector matches no nodes."""

    def __init__(self, selector: str = ''):
        """Initialize the error.

        Args:
            selector: Selector that matched nothing. Defaults to the inherited selection.

        """
        self.selector = selector
        super().__init__('no nodes found')


class UnresolvedExtractSpecError(ScrapeError):
    """Raised when no registered extract method accepts an extract spec."""

    def __init__(self, spec: str):
        """Initialize the error.

        Args:
            spec: Extract spec no method accepted

        """
        self.spec = spec
        super().__init__(f'invalid extract: {spec!r}')


class AttributeNotFoundError(ScrapeError):
    """Raised when the selected node lacks the requested attribute."""

    def __init__(self, attribute: str):
        """Initialize the error.

        Args:
            attribute: Name of the missing attribute

        """
        self.attribute = attribute
        super().__init__(f'attribute {attribute} not found')


class InvalidSelectorError(ScrapeError):
    """Raised when a selector cannot be parsed by the CSS engine."""

    def __init__(self, selector: str, detail: str = ''):
        """Initialize the error.

        Args:
            selector: Selector that failed to parse
            detail: Parser message, if any

        """
        self.selector = selector
        self.detail = detail
        message = f'invalid selector {selector!r}'
        if detail:
            message += f' ({detail})'
        super().__init__(message)


class ExtractionError(ScrapeError):
    """Raised by custom extractors that cannot produce a value."""

    pass


class AggregateError(ScrapeError):
    """All failures recorded during a tolerant scrape.

    Attributes:
        errors: Recorded failures in traversal order
        value: The target, populated with everything that could be bound

    """

    def __init__(self, errors: list[ScrapeError], value: Any = None):
        """Initialize the aggregate.

        Args:
            errors: Recorded failures in traversal order
            value: The partially populated target

        """
        self.errors = list(errors)
        self.value = value
        noun = 'error' if len(self.errors) == 1 else 'errors'
        lines = [f'{len(self.errors)} {noun} occurred while scraping:']
        lines.extend(f'  - {error}' for error in self.errors)
        super().__init__('\n'.join(lines))

    def __len__(self) -> int:
        """Number of recorded failures."""
        return len(self.errors)
