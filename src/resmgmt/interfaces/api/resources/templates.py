"""Template API resources."""

from typing import Any
from uuid import UUID

import falcon.asgi

from resmgmt.application.dto.template_dto import TemplateCreateInput, TemplateUpdateInput
from resmgmt.application.use_cases.template.create_template import CreateTemplateUseCase
from resmgmt.application.use_cases.template.delete_template import DeleteTemplateUseCase
from resmgmt.application.use_cases.template.duplicate_template import DuplicateTemplateUseCase
from resmgmt.application.use_cases.template.get_template import (
    GetLatestTemplateUseCase,
    GetTemplateVersionUseCase,
    ListTemplateVersionsUseCase,
)
from resmgmt.application.use_cases.template.list_categories import (
    ListTemplateCategoriesUseCase,
)
from resmgmt.application.use_cases.template.publish_template_version import (
    PublishTemplateVersionUseCase,
)
from resmgmt.domain.exceptions import ValidationError
from resmgmt.interfaces.api.middleware.auth import require_claim
from resmgmt.interfaces.api.resources.serializers import read_object, template_to_media


def _optional(body: dict[str, Any], key: str, kind: type) -> Any:
    value = body.get(key)
    if value is not None and not isinstance(value, kind):
        raise ValidationError(f"{key} must be of type {kind.__name__}")
    return value


class TemplatesResource:
    """POST /v1/templates - create a template lineage."""

    def __init__(self, create_template: CreateTemplateUseCase) -> None:
        self._create = create_template

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        claim = require_claim(req)
        body = await read_object(req)
        input_data = TemplateCreateInput(
            name=_optional(body, "name", str) or "",
            fields_schema=body.get("fields_schema"),
            description=_optional(body, "description", str) or "",
            category=_optional(body, "category", str) or "",
            is_shared=bool(_optional(body, "is_shared", bool)),
        )
        template = await self._create.execute(claim, input_data)
        resp.media = template_to_media(template)
        resp.status = falcon.HTTP_201


class TemplateCategoriesResource:
    """GET /v1/templates/categories - categories in use in the caller's organization."""

    def __init__(self, list_categories: ListTemplateCategoriesUseCase) -> None:
        self._list = list_categories

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        categories = await self._list.execute(require_claim(req))
        resp.media = {"items": categories}
        resp.status = falcon.HTTP_200


class TemplateResource:
    """GET/DELETE /v1/templates/{template_id} - latest version, soft delete."""

    def __init__(
        self,
        get_latest: GetLatestTemplateUseCase,
        delete_template: DeleteTemplateUseCase,
    ) -> None:
        self._get_latest = get_latest
        self._delete = delete_template

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        template_id: UUID,
    ) -> None:
        template = await self._get_latest.execute(require_claim(req), template_id)
        resp.media = template_to_media(template)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        template_id: UUID,
    ) -> None:
        """Delete one version, or the whole lineage with ?lineage=true."""
        whole_lineage = req.get_param_as_bool("lineage", default=False)
        await self._delete.execute(require_claim(req), template_id, whole_lineage=whole_lineage)
        resp.status = falcon.HTTP_204


class TemplateVersionsResource:
    """GET/POST /v1/templates/{template_id}/versions - lineage history, publish."""

    def __init__(
        self,
        list_versions: ListTemplateVersionsUseCase,
        publish_version: PublishTemplateVersionUseCase,
    ) -> None:
        self._list = list_versions
        self._publish = publish_version

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        template_id: UUID,
    ) -> None:
        versions = await self._list.execute(require_claim(req), template_id)
        resp.media = {"items": [template_to_media(t) for t in versions]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        template_id: UUID,
    ) -> None:
        claim = require_claim(req)
        body = await read_object(req)
        fields_schema = body.get("fields_schema")
        if fields_schema is not None and not isinstance(fields_schema, dict):
            raise ValidationError("fields_schema must be an object")
        updates = TemplateUpdateInput(
            name=_optional(body, "name", str),
            description=_optional(body, "description", str),
            category=_optional(body, "category", str),
            fields_schema=fields_schema,
            is_active=_optional(body, "is_active", bool),
            is_shared=_optional(body, "is_shared", bool),
        )
        template = await self._publish.execute(
            claim, template_id, updates, notes=_optional(body, "version_notes", str)
        )
        resp.media = template_to_media(template)
        resp.status = falcon.HTTP_201


class TemplateVersionResource:
    """GET /v1/templates/{template_id}/versions/{version} - one version of a lineage."""

    def __init__(self, get_version: GetTemplateVersionUseCase) -> None:
        self._get_version = get_version

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        template_id: UUID,
        version: int,
    ) -> None:
        template = await self._get_version.execute(require_claim(req), template_id, version)
        resp.media = template_to_media(template)
        resp.status = falcon.HTTP_200


class TemplateDuplicateResource:
    """POST /v1/templates/{template_id}/duplicate - copy into a new lineage."""

    def __init__(self, duplicate_template: DuplicateTemplateUseCase) -> None:
        self._duplicate = duplicate_template

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        template_id: UUID,
    ) -> None:
        template = await self._duplicate.execute(require_claim(req), template_id)
        resp.media = template_to_media(template)
        resp.status = falcon.HTTP_201
