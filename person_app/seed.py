"""초기 데이터 시드 스크립트 / 샘플 사람 데이터 생성.

Seed script / Creates the schema and a handful of sample persons.

Usage:
    python -m person_app.seed
"""

import asyncio
import logging

from person_app.database import async_session, engine, Base
from person_app.models import Person
from person_app.repositories.person_repository import person_repository

logger = logging.getLogger(__name__)

SAMPLE_PERSONS: list[tuple[str, str]] = [
    ("John", "Smith"),
    ("Jane", "Doe"),
    ("Ada", "Lovelace"),
    ("Alan", "Turing"),
]


async def seed() -> int:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Seed the database with sample persons.
    Idempotent: 이미 데이터가 있으면 건너뜁니다 (Skips when any person exists).

    Returns:
        int: 추가된 사람 수 (Number of persons inserted)
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await person_repository.count(db) > 0:
            logger.info("Already seeded. Skipping.")
            return 0

        for first_name, last_name in SAMPLE_PERSONS:
            await person_repository.save(db, Person(first_name=first_name, last_name=last_name))
        await db.commit()

    logger.info("Seeded %d persons", len(SAMPLE_PERSONS))
    return len(SAMPLE_PERSONS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
