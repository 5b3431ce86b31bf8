"""기본 CRUD 레포지토리 / 모든 레포지토리의 부모 클래스.

Base CRUD Repository / Parent class for all domain repositories.
Provides generic save, lookup, listing and delete operations over an
async session. Repositories are stateless; the session is passed per call.

Usage:
    class PersonRepository(BaseRepository[Person]):
        def __init__(self) -> None:
            super().__init__(Person)
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from person_app.database import Base

# 제네릭 타입 변수 / SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def find_one(
        self,
        db: AsyncSession,
        record_id: Any,
    ) -> ModelType | None:
        """기본 키로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 기본 키 (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def find_all(
        self,
        db: AsyncSession,
        where: ColumnElement[bool] | None = None,
        order_by: Any | None = None,
    ) -> list[ModelType]:
        """조건과 정렬에 맞는 모든 레코드를 조회합니다.

        Retrieve all records, optionally filtered by a predicate and ordered.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            where: SQL 조건식, None이면 전체 조회
                   (Boolean SQL expression; None returns every row)
            order_by: 정렬 기준 (ORDER BY clause, e.g. ``Model.col.asc()``)

        Returns:
            list[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        if where is not None:
            query = query.where(where)

        if order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def save(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> ModelType:
        """레코드를 저장합니다 (신규 INSERT 또는 변경 UPDATE).

        Persist a new or modified record and return it with its
        database-generated values (id, timestamps, version) loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 저장할 모델 인스턴스 (Model instance to persist)

        Returns:
            ModelType: 저장된 레코드 (The persisted record)
        """
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        """레코드를 삭제합니다.

        Delete the given record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 삭제할 모델 인스턴스 (Model instance to delete)
        """
        await db.delete(db_obj)
        await db.flush()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 (Return the total number of rows)."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0
