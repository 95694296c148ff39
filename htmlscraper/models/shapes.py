"""Target shapes: the closed set of value structures the binder can populate.

A shape is derived once per target type with :func:`shape_of` or built
explicitly from the dataclasses below.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from functools import lru_cache
from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel

from htmlscraper.exceptions import InvalidTargetShapeError
from htmlscraper.models.directives import Directive, directive_of


@dataclass(frozen=True)
class PrimitiveShape:
    """A single string."""

    def zero(self) -> str:
        return ''


@dataclass(frozen=True)
class SequenceShape:
    """An ordered list of ``element`` values, one per selected node."""

    element: 'Shape'

    def zero(self) -> list[Any]:
        return []


@dataclass(frozen=True)
class FieldSpec:
    """A named record field with its own shape and directive."""

    name: str
    shape: 'Shape'
    directive: Directive = Directive()


@dataclass(frozen=True)
class RecordShape:
    """A pydantic model whose fields are bound in declaration order."""

    model: type[BaseModel]
    fields: tuple[FieldSpec, ...]

    def new(self) -> BaseModel:
        """Create a model instance with every field at its zero value."""
        return self.model.model_construct(**{spec.name: spec.shape.zero() for spec in self.fields})

    def zero(self) -> BaseModel:
        return self.new()


@dataclass(frozen=True)
class OptionalShape:
    """A value that may be absent (None)."""

    inner: 'Shape'

    def zero(self) -> None:
        return None


Shape = PrimitiveShape | SequenceShape | RecordShape | OptionalShape
SHAPE_TYPES = (PrimitiveShape, SequenceShape, RecordShape, OptionalShape)


def shape_of(target: Any) -> Shape:
    """Describe a target type as a shape.

    Args:
        target: ``str``, ``list[X]``, a pydantic model class, ``X | None``,
            or an already built shape

    Returns:
        The shape. Derived shapes are memoised per type.

    Raises:
        InvalidTargetShapeError: If the target is none of the supported kinds.

    """
    if isinstance(target, SHAPE_TYPES):
        return target
    if not isinstance(target, Hashable):
        raise InvalidTargetShapeError(target)
    return _cached_shape(target)


@lru_cache(maxsize=None)
def _cached_shape(annotation: Any) -> Shape:
    return _derive(annotation, ())


def _derive(annotation: Any, building: tuple[type, ...]) -> Shape:
    if annotation is str:
        return PrimitiveShape()

    origin = get_origin(annotation)
    if origin is list:
        args = get_args(annotation)
        if len(args) != 1:
            raise InvalidTargetShapeError(annotation, 'list must declare a single element type')
        return SequenceShape(_derive(args[0], building))

    if origin is Union or origin is UnionType:
        members = get_args(annotation)
        present = [member for member in members if member is not NoneType]
        if len(present) != 1 or len(present) == len(members):
            raise InvalidTargetShapeError(annotation, 'only X | None unions are supported')
        return OptionalShape(_derive(present[0], building))

    if origin is None and isinstance(annotation, type) and issubclass(annotation, BaseModel):
        if annotation in building:
            raise InvalidTargetShapeError(annotation, 'recursive models are not supported')
        inner = (*building, annotation)
        fields = tuple(
            FieldSpec(name, _derive(info.annotation, inner), directive_of(info))
            for name, info in annotation.model_fields.items()
        )
        return RecordShape(annotation, fields)

    if annotation is list:
        raise InvalidTargetShapeError(annotation, 'list must declare a single element type')
    raise InvalidTargetShapeError(annotation)
