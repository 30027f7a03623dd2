"""Seed entry point: ``python -m traverse_content.seed`` or ``seed-tours``.

Takes no arguments. Exits 0 on success (including a skipped run) and 1 on
any uncaught error.
"""

import asyncio
import sys

from ..core.database import close_db, init_db, session_scope
from ..core.observability import get_logger, setup_structured_logging
from ..services.permission_service import PermissionService
from .tours import seed_tours

logger = get_logger(__name__)


async def main() -> None:
    await init_db()
    try:
        async with session_scope() as session:
            await PermissionService(session).ensure_default_roles()
            await seed_tours(session)
    finally:
        await close_db()


def run() -> None:
    setup_structured_logging()
    try:
        asyncio.run(main())
    except Exception:
        logger.exception("seed_failed")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    run()
