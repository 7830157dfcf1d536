"""JSON request bodies and views of domain records."""

import falcon.asgi

from resmgmt.domain.entities import Template, User
from resmgmt.domain.exceptions import ValidationError
from resmgmt.domain.value_objects import IdentityClaim


async def read_object(req: falcon.asgi.Request) -> dict:
    """Request body as a JSON object; an empty body reads as {}."""
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def template_to_media(t: Template) -> dict:
    return {
        "id": str(t.id),
        "organization_id": str(t.organization_id),
        "lineage_id": str(t.lineage_id),
        "name": t.name,
        "description": t.description,
        "category": t.category,
        "fields_schema": t.fields_schema,
        "version": t.version,
        "parent_template_id": str(t.parent_template_id) if t.parent_template_id else None,
        "is_latest_version": t.is_latest_version,
        "version_notes": t.version_notes,
        "is_active": t.is_active,
        "is_shared": t.is_shared,
        "created_by": str(t.created_by),
        "created_at": t.created_at.isoformat(),
        "updated_at": t.updated_at.isoformat(),
    }


def user_to_media(u: User) -> dict:
    return {
        "id": str(u.id),
        "organization_id": str(u.organization_id),
        "email": u.email,
        "name": u.name,
        "role": u.role.value,
        "permissions_override": (
            u.permissions_override.to_mapping() if u.permissions_override else None
        ),
    }


def claim_to_media(c: IdentityClaim) -> dict:
    return {
        "user_id": str(c.user_id),
        "organization_id": str(c.organization_id),
        "email": c.email,
        "role": c.role.value,
        "permissions": c.permissions.to_mapping(),
        "expires_at": c.expires_at.isoformat(),
    }
