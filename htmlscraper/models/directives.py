"""Pydantic models for field directives."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.fields import FieldInfo

METADATA_KEY = 'htmlscraper'


class Directive(BaseModel):
    """Where to find a value and how to read it.

    Attributes:
        select: CSS selector narrowing the inherited selection ('' keeps it unchanged)
        extract: Extract spec naming how to turn a node into a string

    """

    select: str = PydanticField(default='', description='CSS selector')
    extract: str = PydanticField(default='', description='Extract spec (text, deeptext, @attr, custom)')

    model_config = ConfigDict(frozen=True)

    def consumed(self) -> 'Directive':
        """Return this directive with its selector already applied."""
        return Directive(extract=self.extract)


def Field(select: str = '', extract: str = '', description: str | None = None, **kwargs: Any) -> Any:
    """Create a model field carrying a scraping directive.

    Example:
        >>> class Product(BaseModel):
        ...     name: str = Field(select='h2', extract='text')
        ...     image: str | None = Field(select='img', extract='@src')

    """
    directive = Directive(select=select, extract=extract)
    return PydanticField(description=description, json_schema_extra={METADATA_KEY: directive.model_dump()}, **kwargs)


def directive_of(field_info: FieldInfo) -> Directive:
    """Read the directive stored on a pydantic field (empty if none was declared)."""
    extra = field_info.json_schema_extra
    if isinstance(extra, dict) and isinstance(extra.get(METADATA_KEY), dict):
        return Directive(**extra[METADATA_KEY])
    return Directive()
