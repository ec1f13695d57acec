"""Management command for creating accounts directly in the user store.

No API operation grants the ``admin`` role, so administrators are created
here::

    python -m task_tracker.db.seed --username root --email root@example.com \
        --password s3cret --admin
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from ..core.config import get_settings
from ..core.logging import configure_logging
from ..models import User, UserRole
from ..services import UserService
from .connection import close_database, init_database

logger = logging.getLogger(__name__)


async def seed_user(*, username: str, email: str, password: str, role: UserRole) -> User:
    """Create the account unless a user with the same email already exists."""
    user_service = UserService()
    existing = await user_service.get_user_by_email(email)
    if existing is not None:
        logger.info("User already present", extra={"user_id": str(existing.id)})
        return existing
    user = await user_service.create_user(
        username=username,
        email=email,
        password=password,
        role=role,
    )
    logger.info("User created", extra={"user_id": str(user.id), "role": role.value})
    return user


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a task tracker user.")
    parser.add_argument("--username", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--admin", action="store_true", help="grant the admin role")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> None:
    await init_database()
    try:
        await seed_user(
            username=args.username,
            email=args.email,
            password=args.password,
            role=UserRole.ADMIN if args.admin else UserRole.USER,
        )
    finally:
        await close_database()


def main(argv: Sequence[str] | None = None) -> None:
    """Entry-point hook for ``python -m`` execution."""
    configure_logging(get_settings())
    asyncio.run(_run(_parse_args(argv)))


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    main()
