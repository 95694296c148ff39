"""Type-driven binding of selections into target shapes."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from htmlscraper.exceptions import NotFoundError, ScrapeError
from htmlscraper.extractors import ExtractorRegistry
from htmlscraper.models import Directive, OptionalShape, PrimitiveShape, RecordShape, SequenceShape, Shape
from htmlscraper.selection import Selection

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Failure tolerance of a scrape.

    - STRICT: the first failure aborts the whole scrape.
    - TOLERANT: failures are recorded, zero values are left in place and
      scraping continues; all failures are reported at the end.
    - SILENT: like TOLERANT, but failures are never reported.
    """

    STRICT = 'strict'
    TOLERANT = 'tolerant'
    SILENT = 'silent'


@dataclass(frozen=True)
class Trail:
    """Selectors and field names leading from the root to the current value."""

    selectors: tuple[str, ...] = ()
    fields: tuple[str, ...] = ()

    def select(self, selector: str) -> 'Trail':
        if not selector:
            return self
        return Trail((*self.selectors, selector), self.fields)

    def field(self, name: str) -> 'Trail':
        return Trail(self.selectors, (*self.fields, name))

    def element(self, index: int) -> 'Trail':
        tag = f'[{index}]'
        fields = (*self.fields[:-1], self.fields[-1] + tag) if self.fields else (tag,)
        return Trail((*self.selectors, tag), fields)

    @property
    def field_path(self) -> str:
        return '.'.join(self.fields)


class Binder:
    """Walks a selection and fills a value of the requested shape.

    One Binder serves a single scrape; its mode never changes while binding.

    Attributes:
        mode: Failure tolerance policy
        registry: Extract methods used at primitive leaves
        errors: Failures recorded so far (TOLERANT only)

    """

    def __init__(self, mode: Mode, registry: ExtractorRegistry):
        """Initialize the binder.

        Args:
            mode: Failure tolerance policy
            registry: Extract methods used at primitive leaves

        """
        self.mode = mode
        self.registry = registry
        self.errors: list[ScrapeError] = []

    def bind(
        self,
        selection: Selection,
        shape: Shape,
        directive: Directive,
        trail: Trail = Trail(),
        target: Any = None,
    ) -> Any:
        """Bind ``selection`` into a value of ``shape``.

        Args:
            selection: Inherited selection
            shape: Shape of the value to produce
            directive: Selector and extract spec for this value
            trail: Path from the root, used to annotate failures
            target: Existing record instance to populate in place

        Returns:
            The bound value (zero-valued where binding failed).

        Raises:
            ScrapeError: In STRICT mode, on the first failure.

        """
        trail = trail.select(directive.select)
        if directive.select:
            try:
                selection = selection.find(directive.select)
            except ScrapeError as e:
                self._fail(e, trail)
                return target if target is not None else shape.zero()

        if isinstance(shape, PrimitiveShape):
            return self._bind_primitive(selection, directive, trail)
        if isinstance(shape, SequenceShape):
            return self._bind_sequence(selection, shape, directive, trail)
        if isinstance(shape, RecordShape):
            return self._bind_record(selection, shape, directive, trail, target)
        if isinstance(shape, OptionalShape):
            return self._bind_optional(selection, shape, directive, trail, target)
        raise TypeError(f'Unsupported shape: {shape!r}')

    def _bind_primitive(self, selection: Selection, directive: Directive, trail: Trail) -> str:
        node = selection.first_node
        if node is None:
            self._fail(NotFoundError(directive.select), trail)
            return ''
        try:
            return self.registry.extract(node, directive.extract)
        except ScrapeError as e:
            self._fail(e, trail)
            return ''

    def _bind_sequence(
        self, selection: Selection, shape: SequenceShape, directive: Directive, trail: Trail
    ) -> list[Any]:
        # No matches is a valid empty list in every mode
        element_directive = directive.consumed()
        return [
            self.bind(element, shape.element, element_directive, trail.element(index))
            for index, element in selection.each()
        ]

    def _bind_record(
        self, selection: Selection, shape: RecordShape, directive: Directive, trail: Trail, target: Any
    ) -> Any:
        if not selection:
            self._fail(NotFoundError(directive.select), trail)
            return target if target is not None else shape.new()

        context = selection.first()
        if target is not None:
            # Instances are filled field by field so a strict abort keeps earlier fields
            for spec in shape.fields:
                value = self.bind(context, spec.shape, spec.directive, trail.field(spec.name))
                setattr(target, spec.name, value)
            return target

        values = {
            spec.name: self.bind(context, spec.shape, spec.directive, trail.field(spec.name)) for spec in shape.fields
        }
        return shape.model.model_construct(**values)

    def _bind_optional(
        self, selection: Selection, shape: OptionalShape, directive: Directive, trail: Trail, target: Any
    ) -> Any:
        if not selection:
            if self.mode is Mode.STRICT:
                self._fail(NotFoundError(directive.select), trail)
            return None
        return self.bind(selection, shape.inner, directive.consumed(), trail, target)

    def _fail(self, error: ScrapeError, trail: Trail) -> None:
        """Apply the mode policy to a failure."""
        error = error.locate(trail.selectors, trail.field_path)
        if self.mode is Mode.STRICT:
            raise error
        if self.mode is Mode.TOLERANT:
            logger.debug('Recorded scrape error: %s', error)
            self.errors.append(error)
        else:
            logger.debug('Suppressed scrape error: %s', error)
