#!/usr/bin/env python3
"""Seed the database with the sample users and posts.

Idempotent: users that already exist are left alone, and posts are only
added to an empty posts table.
"""

import asyncio
import sys
from datetime import datetime, timezone

import logfire

from microblog.config import Settings
from microblog.domain.model import NewPost, NewUser
from microblog.domain.service import ProofService
from microblog.domain.value import Handle
from microblog.persistence.database import create_engine, create_session_factory
from microblog.persistence.repository import (
    PostgresPostRepository,
    PostgresUserRepository,
)
from microblog.util.observability import configure_logfire

SAMPLE_USERS = [
    # (handle, provider subject id, member since)
    ("SampleUser", "sample-google-1", datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)),
    ("AnotherUser", "sample-google-2", datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc)),
]

SAMPLE_POSTS = [
    # (title, body, author, created at)
    (
        "Sample Post",
        "This is a sample post.",
        "SampleUser",
        datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
    ),
    (
        "Another Post",
        "This is another sample post.",
        "AnotherUser",
        datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc),
    ),
]


async def seed(settings: Settings) -> None:
    """Insert the sample data.

    Args:
        settings: Application settings
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    proof_service = ProofService(settings.auth)

    try:
        async with session_factory() as session:
            users = PostgresUserRepository(session)
            posts = PostgresPostRepository(session)

            for handle, subject_id, member_since in SAMPLE_USERS:
                if await users.find_by_handle(Handle(handle)):
                    logfire.info("Sample user exists", handle=handle)
                    continue
                await users.insert(
                    NewUser(
                        handle=Handle(handle),
                        external_proof=proof_service.derive(subject_id),
                        member_since=member_since,
                    )
                )

            if not await posts.find_all():
                for title, body, author, created_at in SAMPLE_POSTS:
                    await posts.insert(
                        NewPost(
                            title=title,
                            body=body,
                            author_handle=Handle(author),
                            created_at=created_at,
                        )
                    )

            await session.commit()
            logfire.info("Database seeded")
    finally:
        await engine.dispose()


def main() -> int:
    """Seed the configured database."""
    settings = Settings()
    configure_logfire(settings)
    asyncio.run(seed(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
