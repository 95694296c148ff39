"""Node selections over BeautifulSoup documents."""

from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from soupsieve import SelectorSyntaxError

from htmlscraper.exceptions import InvalidSelectorError


def is_text_node(node: PageElement) -> bool:
    """Check whether a node is a plain text node.

    Comments, doctypes, CDATA sections and processing instructions are
    strings in bs4 but not text content.
    """
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def node_attributes(node: PageElement) -> dict[str, str]:
    """Return a node's attributes as name -> value strings.

    Multi-valued attributes such as ``class`` are joined with a space.
    Text nodes have no attributes.
    """
    if not isinstance(node, Tag):
        return {}
    attributes = {}
    for name, value in node.attrs.items():
        attributes[name] = ' '.join(value) if isinstance(value, list) else value
    return attributes


class Selection:
    """An ordered set of nodes within a document.

    Selections are values: narrowing returns a new Selection and never
    touches the underlying tree.

    Attributes:
        nodes: Selected nodes in order, without duplicates

    """

    def __init__(self, nodes: Iterable[PageElement] = ()):
        """Initialize the selection.

        Args:
            nodes: Nodes to select. Duplicates (by identity) are dropped.

        """
        self.nodes: list[PageElement] = []
        seen: set[int] = set()
        for node in nodes:
            if id(node) not in seen:
                seen.add(id(node))
                self.nodes.append(node)

    @classmethod
    def from_document(cls, document: Tag) -> 'Selection':
        """Select the root of a parsed document (or any tag)."""
        return cls([document])

    @classmethod
    def from_html(cls, markup: str, parser: str = 'lxml') -> 'Selection':
        """Parse markup and select the document root.

        Args:
            markup: HTML text
            parser: BeautifulSoup tree builder. Defaults to 'lxml'.

        """
        return cls.from_document(BeautifulSoup(markup, parser))

    def find(self, selector: str) -> 'Selection':
        """Narrow to the descendants of each selected node matching a CSS selector.

        Args:
            selector: CSS selector

        Returns:
            New Selection with matches in source-node order.

        Raises:
            InvalidSelectorError: If the selector cannot be parsed.

        """
        matches: list[PageElement] = []
        for node in self.nodes:
            if not isinstance(node, Tag):
                continue
            try:
                matches.extend(node.select(selector))
            except SelectorSyntaxError as e:
                raise InvalidSelectorError(selector, str(e).splitlines()[0]) from e
        return Selection(matches)

    def size(self) -> int:
        """Number of selected nodes."""
        return len(self.nodes)

    def first(self) -> 'Selection':
        """Selection holding only the first node (empty if nothing is selected)."""
        return Selection(self.nodes[:1])

    @property
    def first_node(self) -> PageElement | None:
        """The first selected node, or None."""
        return self.nodes[0] if self.nodes else None

    def each(self) -> Iterator[tuple[int, 'Selection']]:
        """Iterate over (index, singleton Selection) pairs in order."""
        for index, node in enumerate(self.nodes):
            yield index, Selection([node])

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f'Selection(size={len(self.nodes)})'
