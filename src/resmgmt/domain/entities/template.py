"""Template entity - one version in a template lineage."""

from copy import deepcopy
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from resmgmt.domain.value_objects import LifecycleState

INITIAL_VERSION_NOTES = "Initial version"
DEFAULT_VERSION_NOTES = "Template updated"


@dataclass
class Template:
    """Template version row.

    Rows of one lineage share ``lineage_id`` (the id of the version-1 root) and
    are chained through ``parent_template_id`` to the immediately preceding
    version. ``fields_schema`` is fixed once the row is written; changes go
    into a new version.
    """

    id: UUID
    organization_id: UUID
    lineage_id: UUID
    name: str
    fields_schema: dict[str, Any]
    version: int
    created_by: UUID
    created_at: datetime
    updated_at: datetime
    description: str = ""
    category: str = ""
    parent_template_id: UUID | None = None
    is_latest_version: bool = True
    version_notes: str = INITIAL_VERSION_NOTES
    is_active: bool = True
    is_shared: bool = False
    state: LifecycleState = LifecycleState.ACTIVE
    deleted_at: datetime | None = None

    @property
    def is_root(self) -> bool:
        return self.parent_template_id is None

    @property
    def is_deleted(self) -> bool:
        return self.state is LifecycleState.DELETED

    @classmethod
    def new_lineage(
        cls,
        organization_id: UUID,
        created_by: UUID,
        name: str,
        fields_schema: dict[str, Any],
        now: datetime,
        description: str = "",
        category: str = "",
        is_shared: bool = False,
    ) -> "Template":
        """Root row of a new lineage: version 1, latest."""
        template_id = uuid4()
        return cls(
            id=template_id,
            organization_id=organization_id,
            lineage_id=template_id,
            name=name,
            description=description,
            category=category,
            fields_schema=fields_schema,
            version=1,
            parent_template_id=None,
            is_latest_version=True,
            version_notes=INITIAL_VERSION_NOTES,
            is_shared=is_shared,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )

    def successor(
        self,
        now: datetime,
        notes: str | None = None,
        **changes: Any,
    ) -> "Template":
        """Next version in this lineage, with ``changes`` applied on top of this row."""
        successor_id = uuid4()
        next_row = Template(
            id=successor_id,
            organization_id=self.organization_id,
            lineage_id=self.lineage_id,
            name=self.name,
            description=self.description,
            category=self.category,
            fields_schema=deepcopy(self.fields_schema),
            version=self.version + 1,
            parent_template_id=self.id,
            is_latest_version=True,
            version_notes=notes or DEFAULT_VERSION_NOTES,
            is_active=self.is_active,
            is_shared=self.is_shared,
            created_by=self.created_by,
            created_at=now,
            updated_at=now,
        )
        return replace(next_row, **{k: v for k, v in changes.items() if v is not None})

