"""Role lookup and permission grants for the content API."""

import logging
from typing import Iterable, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..content_types import get_content_type
from ..core.exceptions import NotFoundError
from ..core.observability import metrics_collector
from ..models import AUTHENTICATED_ROLE, PUBLIC_ROLE, Permission, Role

logger = logging.getLogger(__name__)

DEFAULT_ROLES = {
    PUBLIC_ROLE: ("Public", "Default role given to unauthenticated user."),
    AUTHENTICATED_ROLE: ("Authenticated", "Default role given to authenticated user."),
}


class PermissionService:
    """Service for role and permission operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def ensure_default_roles(self) -> list[Role]:
        """Create the public and authenticated roles when they are missing."""
        roles = []
        created = False
        for role_type, (name, description) in DEFAULT_ROLES.items():
            role = await self.get_role(role_type)
            if role is None:
                role = Role(name=name, type=role_type, description=description)
                self.db.add(role)
                created = True
            roles.append(role)

        if created:
            await self.db.commit()
            logger.info("Default roles created", extra={"roles": list(DEFAULT_ROLES)})
        return roles

    async def get_role(self, role_type: str) -> Optional[Role]:
        result = await self.db.execute(select(Role).where(Role.type == role_type))
        return result.scalar_one_or_none()

    async def get_public_role(self) -> Role:
        """
        Find the public role.

        Raises:
            NotFoundError: If the role has not been bootstrapped
        """
        role = await self.get_role(PUBLIC_ROLE)
        if role is None:
            logger.warning("Public role not found")
            raise NotFoundError(resource_type="role", resource_id=PUBLIC_ROLE)
        return role

    async def grant(self, role: Role, actions: Iterable[str]) -> list[Permission]:
        """
        Link actions to a role, skipping those it already holds.

        All new permissions are committed together.
        """
        existing = set(
            (await self.db.execute(
                select(Permission.action).where(Permission.role_id == role.id)
            )).scalars()
        )

        permissions = []
        for action in dict.fromkeys(actions):
            if action in existing:
                continue
            permissions.append(Permission(action=action, role_id=role.id))

        if permissions:
            self.db.add_all(permissions)
            await self.db.commit()
            metrics_collector.record_permissions_granted(role.type, len(permissions))

        logger.info(
            "Permissions granted",
            extra={
                "role": role.type,
                "granted": [permission.action for permission in permissions],
                "already_granted": sorted(existing),
            },
        )
        return permissions

    async def set_public_permissions(self, new_permissions: Mapping[str, Sequence[str]]) -> list[Permission]:
        """
        Grant the public role actions on content types.

        Args:
            new_permissions: Content type singular name → actions,
                e.g. ``{"tour": ["find", "findOne"]}``

        Returns:
            Newly created permissions

        Raises:
            UnknownContentTypeError: If a content type is not registered
            NotFoundError: If the public role is missing
        """
        public_role = await self.get_public_role()
        actions = [
            get_content_type(controller).action(action)
            for controller, controller_actions in new_permissions.items()
            for action in controller_actions
        ]
        return await self.grant(public_role, actions)

    async def is_allowed(self, role_type: str, action: str) -> bool:
        stmt = (
            select(Permission.id)
            .join(Role, Permission.role_id == Role.id)
            .where(Role.type == role_type, Permission.action == action)
            .limit(1)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None
