"""Extract methods: turn a selected node into a string.

An extract spec (the ``extract`` directive of a field) is routed to an
extractor by an ordered list of (match, extractor) pairs. Built-in methods
are always consulted before custom ones and the first match wins.
"""

from collections.abc import Callable, Iterable
from typing import NamedTuple

from bs4.element import PageElement, Tag

from htmlscraper.exceptions import AttributeNotFoundError, UnresolvedExtractSpecError
from htmlscraper.selection import is_text_node, node_attributes

TEXT = 'text'  # text of the node's own text children
DEEP_TEXT = 'deeptext'  # text of all descendant text nodes
ATTRIBUTE_PREFIX = '@'  # attribute value, e.g. '@href'

Match = Callable[[str], tuple[str, bool]]
Extractor = Callable[[PageElement, str], str]


class ExtractMethod(NamedTuple):
    """A match paired with the extractor it routes to."""

    match: Match
    extractor: Extractor


def exact_match(expected: str) -> Match:
    """Create a Match accepting only specs equal to ``expected``."""

    def match(spec: str) -> tuple[str, bool]:
        return spec, spec == expected

    return match


def prefix_match(prefix: str) -> Match:
    """Create a Match accepting specs that start with ``prefix``.

    The prefix is stripped from the spec handed to the extractor
    (``'@href'`` -> ``'href'``).
    """

    def match(spec: str) -> tuple[str, bool]:
        if spec.startswith(prefix):
            return spec[len(prefix) :], True
        return spec, False

    return match


def extract_text(node: PageElement) -> str:
    """Return the concatenated text of the node's immediate text children."""
    if is_text_node(node):
        return str(node)
    if not isinstance(node, Tag):
        return ''
    return ''.join(str(child) for child in node.children if is_text_node(child))


def extract_deep_text(node: PageElement) -> str:
    """Return the concatenated text of all descendant text nodes, in document order."""
    if is_text_node(node):
        return str(node)
    if not isinstance(node, Tag):
        return ''
    return ''.join(str(descendant) for descendant in node.descendants if is_text_node(descendant))


def extract_attribute(node: PageElement, attribute: str) -> str:
    """Return the value of an attribute.

    Raises:
        AttributeNotFoundError: If the node has no such attribute.

    """
    attributes = node_attributes(node)
    if attribute not in attributes:
        raise AttributeNotFoundError(attribute)
    return attributes[attribute]


def extract_method(match: Match | str) -> Callable[[Extractor], ExtractMethod]:
    """Create an extract method with decorator syntax.

    Example:
        >>> @extract_method('*upper')
        ... def upper_text(node, spec):
        ...     return extract_text(node).upper()

    A string is shorthand for ``exact_match(string)``.
    """
    if isinstance(match, str):
        match = exact_match(match)

    def decorator(func: Extractor) -> ExtractMethod:
        return ExtractMethod(match, func)

    return decorator


BUILTIN_METHODS: tuple[ExtractMethod, ...] = (
    ExtractMethod(exact_match(TEXT), lambda node, _spec: extract_text(node)),
    ExtractMethod(exact_match(DEEP_TEXT), lambda node, _spec: extract_deep_text(node)),
    ExtractMethod(prefix_match(ATTRIBUTE_PREFIX), extract_attribute),
)


class ExtractorRegistry:
    """Ordered, immutable list of extract methods.

    Attributes:
        methods: Built-in methods followed by custom methods, in resolution order

    """

    def __init__(self, custom: Iterable[ExtractMethod] = (), builtins: Iterable[ExtractMethod] = BUILTIN_METHODS):
        """Initialize the registry.

        Args:
            custom: User supplied methods, consulted after the built-ins
            builtins: Built-in methods. Defaults to BUILTIN_METHODS.

        """
        self.methods: tuple[ExtractMethod, ...] = (*builtins, *custom)

    def with_methods(self, *methods: ExtractMethod) -> 'ExtractorRegistry':
        """Return a new registry with ``methods`` appended."""
        return ExtractorRegistry(custom=methods, builtins=self.methods)

    def resolve(self, spec: str) -> tuple[Extractor, str]:
        """Find the extractor for a spec.

        Args:
            spec: Extract spec from a directive

        Returns:
            Tuple of (extractor, transformed spec) for the first matching method.

        Raises:
            UnresolvedExtractSpecError: If no method matches.

        """
        for match, extractor in self.methods:
            transformed, matched = match(spec)
            if matched:
                return extractor, transformed
        raise UnresolvedExtractSpecError(spec)

    def extract(self, node: PageElement, spec: str) -> str:
        """Resolve ``spec`` and run its extractor on ``node``."""
        extractor, transformed = self.resolve(spec)
        return extractor(node, transformed)

    def __len__(self) -> int:
        return len(self.methods)
