"""Template DTOs."""

from dataclasses import dataclass
from typing import Any


@dataclass
class TemplateCreateInput:
    """Input for creating a template lineage."""

    name: str
    fields_schema: dict[str, Any]
    description: str = ""
    category: str = ""
    is_shared: bool = False


@dataclass
class TemplateUpdateInput:
    """Changes carried into a new version. None keeps the previous value."""

    name: str | None = None
    description: str | None = None
    category: str | None = None
    fields_schema: dict[str, Any] | None = None
    is_active: bool | None = None
    is_shared: bool | None = None
