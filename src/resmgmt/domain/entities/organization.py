"""Organization entity - tenant boundary."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Organization:
    """Organization owning users and templates."""

    id: UUID
    name: str
    created_at: datetime
