"""SQLAlchemy ORM 모델 패키지 / 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package / Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations.

Modules:
    person: 사람 엔티티 (Person entity)
"""

from person_app.models.person import Person

__all__ = [
    "Person",
]
