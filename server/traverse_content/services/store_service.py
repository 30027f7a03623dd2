"""Scoped key/value core store."""

import json
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import StoreEntry


class CoreStore:
    """Key/value access scoped by environment, type and name."""

    def __init__(self, db: AsyncSession, environment: str, type: str, name: str):
        self.db = db
        self.environment = environment
        self.type = type
        self.name = name

    async def _entry(self, key: str) -> Optional[StoreEntry]:
        stmt = select(StoreEntry).where(
            StoreEntry.environment == self.environment,
            StoreEntry.type == self.type,
            StoreEntry.name == self.name,
            StoreEntry.key == key,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, key: str) -> Any:
        """Return the decoded value, or None when the key is unset."""
        entry = await self._entry(key)
        return json.loads(entry.value) if entry is not None else None

    async def set(self, key: str, value: Any) -> None:
        encoded = json.dumps(value)
        entry = await self._entry(key)
        if entry is None:
            self.db.add(StoreEntry(
                key=key,
                value=encoded,
                environment=self.environment,
                type=self.type,
                name=self.name,
            ))
        else:
            entry.value = encoded
        await self.db.commit()
