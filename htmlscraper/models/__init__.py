"""Directive and shape models."""

from htmlscraper.models.directives import Directive, Field, directive_of
from htmlscraper.models.shapes import (
    FieldSpec,
    OptionalShape,
    PrimitiveShape,
    RecordShape,
    SequenceShape,
    Shape,
    shape_of,
)

__all__ = [
    'Directive',
    'Field',
    'directive_of',
    'FieldSpec',
    'OptionalShape',
    'PrimitiveShape',
    'RecordShape',
    'SequenceShape',
    'Shape',
    'shape_of',
]
