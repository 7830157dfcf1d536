"""User administration API resources."""

from uuid import UUID

import falcon.asgi

from resmgmt.application.use_cases.user.assign_role import AssignRoleUseCase
from resmgmt.domain.exceptions import ValidationError
from resmgmt.interfaces.api.middleware.auth import require_claim
from resmgmt.interfaces.api.resources.serializers import read_object, user_to_media


class UserRoleResource:
    """PUT /v1/users/{user_id}/role - assign role and permission override."""

    def __init__(self, assign_role: AssignRoleUseCase) -> None:
        self._assign = assign_role

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: UUID,
    ) -> None:
        claim = require_claim(req)
        body = await read_object(req)
        override = body.get("permissions")
        if override is not None and not isinstance(override, dict):
            raise ValidationError("permissions must be an object")

        result = await self._assign.execute(claim, user_id, body.get("role"), override)
        resp.media = {
            "user": user_to_media(result.user),
            "effective_permissions": result.effective_permissions.to_mapping(),
        }
        resp.status = falcon.HTTP_200
