"""사람 서비스 / 사람 CRUD 및 검색 비즈니스 로직.

Person Service / Orchestrates person CRUD and search over PersonRepository.
Converts PersonDTO input into Person entities, delegates storage to the
injected repository, and translates missing ids into PersonNotFoundError.
"""

import logging

from sqlalchemy import ColumnElement, or_
from sqlalchemy.ext.asyncio import AsyncSession

from person_app.models.person import Person
from person_app.repositories.person_repository import PersonRepository, person_repository
from person_app.schemas.person import PersonDTO
from person_app.utils.exceptions import PersonNotFoundError

logger = logging.getLogger(__name__)


def name_contains(search_term: str) -> ColumnElement[bool]:
    """이름 또는 성에 검색어가 포함된 사람을 찾는 조건식 (대소문자 무시).

    Build a predicate matching persons whose first or last name contains
    the search term, ignoring case. LIKE wildcards in the term match literally.
    """
    return or_(
        Person.first_name.icontains(search_term, autoescape=True),
        Person.last_name.icontains(search_term, autoescape=True),
    )


class PersonService:
    """사람 관련 비즈니스 로직을 처리하는 서비스.

    Service handling person business logic.

    Attributes:
        repository: 저장소 협력자 (Repository the service delegates to)
    """

    def __init__(self, repository: PersonRepository) -> None:
        self.repository: PersonRepository = repository

    async def create(self, db: AsyncSession, dto: PersonDTO) -> Person:
        """새 사람을 생성합니다.

        Create a new person from the DTO's names. Any id on the DTO is ignored;
        the repository assigns the identity.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            dto: 생성 데이터 (Person data)

        Returns:
            Person: 저장된 사람 (The persisted person as returned by the repository)
        """
        logger.debug("Creating a new person with information: %s", dto)
        person: Person = Person(first_name=dto.first_name, last_name=dto.last_name)
        return await self.repository.save(db, person)

    async def delete(self, db: AsyncSession, person_id: int) -> Person:
        """사람을 삭제합니다.

        Delete the person with the given id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            person_id: 사람 ID (Person id)

        Returns:
            Person: 삭제된 사람 (The deleted person)

        Raises:
            PersonNotFoundError: 해당 ID의 사람이 없을 때 (No person with the id)
        """
        logger.debug("Deleting person with id: %s", person_id)
        deleted: Person | None = await self.repository.find_one(db, person_id)
        if deleted is None:
            logger.debug("No person found with id: %s", person_id)
            raise PersonNotFoundError(person_id)

        await self.repository.delete(db, deleted)
        logger.info("Deleted person %s", person_id)
        return deleted

    async def find_all(self, db: AsyncSession) -> list[Person]:
        """모든 사람을 성 오름차순으로 조회합니다 (List every person ordered by last name)."""
        logger.debug("Finding all persons")
        return await self.repository.find_all(db, order_by=Person.last_name.asc())

    async def find_by_id(self, db: AsyncSession, person_id: int) -> Person | None:
        """ID로 사람을 조회합니다. 없으면 None을 반환합니다.

        Return the person with the given id, or None when absent.
        """
        logger.debug("Finding person by id: %s", person_id)
        return await self.repository.find_one(db, person_id)

    async def search(self, db: AsyncSession, search_term: str) -> list[Person]:
        """이름에 검색어가 포함된 사람을 성 오름차순으로 조회합니다.

        Search persons whose first or last name contains the term, ignoring
        case, ordered by last name ascending.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search_term: 검색어 (Search term)

        Returns:
            list[Person]: 검색 결과 (Matching persons)
        """
        logger.debug("Searching persons with search term: %s", search_term)
        return await self.repository.find_all(
            db,
            where=name_contains(search_term),
            order_by=Person.last_name.asc(),
        )

    async def update(self, db: AsyncSession, dto: PersonDTO) -> Person:
        """사람 정보를 수정합니다.

        Copy the DTO's names onto the existing person and save it explicitly.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            dto: 수정 데이터, id로 대상 지정 (Update data; id selects the target)

        Returns:
            Person: 수정된 사람 (The updated person)

        Raises:
            PersonNotFoundError: 해당 ID의 사람이 없을 때 (No person with the id)
        """
        logger.debug("Updating person with information: %s", dto)
        person: Person | None = await self.repository.find_one(db, dto.id)
        if person is None:
            logger.debug("No person found with id: %s", dto.id)
            raise PersonNotFoundError(dto.id)

        person.update(dto.first_name, dto.last_name)
        return await self.repository.save(db, person)


# 싱글턴 인스턴스 / Singleton instance
person_service: PersonService = PersonService(person_repository)
