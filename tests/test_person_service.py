"""사람 서비스 유닛 테스트 (Mock 레포지토리).

PersonService unit tests against a mocked PersonRepository.
Each test checks the exact repository interaction, mirroring
"called once, nothing else" verification.
"""

from unittest.mock import AsyncMock, call

import pytest

from person_app.models.person import Person
from person_app.repositories.person_repository import PersonRepository
from person_app.schemas.person import PersonDTO
from person_app.services.person_service import PersonService
from person_app.utils.exceptions import NotFoundError, PersonNotFoundError

PERSON_ID = 5
FIRST_NAME = "Foo"
FIRST_NAME_UPDATED = "FooUpdated"
LAST_NAME = "Bar"
LAST_NAME_UPDATED = "BarUpdated"
SEARCH_TERM = "foo"


@pytest.fixture
def repository() -> AsyncMock:
    return AsyncMock(spec=PersonRepository)


@pytest.fixture
def service(repository: AsyncMock) -> PersonService:
    return PersonService(repository)


@pytest.fixture
def db() -> AsyncMock:
    return AsyncMock()


def assert_person(expected: PersonDTO, actual: Person) -> None:
    assert actual.id == expected.id
    assert actual.first_name == expected.first_name
    assert actual.last_name == expected.last_name


class TestCreate:

    async def test_create(self, service, repository, db):
        """DTO 이름으로 만든 엔티티를 한 번 저장하고 저장 결과를 반환."""
        created = PersonDTO(id=None, first_name=FIRST_NAME, last_name=LAST_NAME)
        persisted = Person(id=PERSON_ID, first_name=FIRST_NAME, last_name=LAST_NAME)
        repository.save.return_value = persisted

        returned = await service.create(db, created)

        repository.save.assert_awaited_once()
        saved: Person = repository.save.await_args.args[1]
        assert repository.mock_calls == [call.save(db, saved)]
        assert_person(created, saved)
        assert returned is persisted

    async def test_create_ignores_dto_id(self, service, repository, db):
        """DTO에 id가 있어도 새 엔티티에는 복사하지 않음."""
        repository.save.side_effect = lambda session, person: person

        returned = await service.create(
            db, PersonDTO(id=99, first_name=FIRST_NAME, last_name=LAST_NAME)
        )

        assert returned.id is None
        assert returned.first_name == FIRST_NAME
        assert returned.last_name == LAST_NAME


class TestDelete:

    async def test_delete(self, service, repository, db):
        """존재하는 사람을 한 번 삭제하고 반환."""
        deleted = Person(id=PERSON_ID, first_name=FIRST_NAME, last_name=LAST_NAME)
        repository.find_one.return_value = deleted

        returned = await service.delete(db, PERSON_ID)

        assert repository.mock_calls == [
            call.find_one(db, PERSON_ID),
            call.delete(db, deleted),
        ]
        assert returned is deleted

    async def test_delete_when_person_is_not_found(self, service, repository, db):
        """없는 ID 삭제 시 PersonNotFoundError, delete 호출 없음."""
        repository.find_one.return_value = None

        with pytest.raises(PersonNotFoundError) as exc_info:
            await service.delete(db, PERSON_ID)

        assert repository.mock_calls == [call.find_one(db, PERSON_ID)]
        repository.delete.assert_not_awaited()
        assert exc_info.value.person_id == PERSON_ID
        assert exc_info.value.status_code == 404
        assert isinstance(exc_info.value, NotFoundError)


class TestFind:

    async def test_find_all(self, service, repository, db):
        """성 오름차순 정렬을 요청하고 결과를 그대로 반환."""
        persons: list[Person] = []
        repository.find_all.return_value = persons

        returned = await service.find_all(db)

        repository.find_all.assert_awaited_once()
        assert len(repository.mock_calls) == 1
        kwargs = repository.find_all.await_args.kwargs
        assert kwargs.get("where") is None
        assert str(kwargs["order_by"]) == "persons.last_name ASC"
        assert returned is persons

    async def test_find_by_id(self, service, repository, db):
        """find_one 결과를 변환 없이 반환."""
        person = Person(id=PERSON_ID, first_name=FIRST_NAME, last_name=LAST_NAME)
        repository.find_one.return_value = person

        returned = await service.find_by_id(db, PERSON_ID)

        assert repository.mock_calls == [call.find_one(db, PERSON_ID)]
        assert returned is person

    async def test_find_by_id_when_person_is_not_found(self, service, repository, db):
        """없는 ID 조회는 예외 없이 None."""
        repository.find_one.return_value = None

        assert await service.find_by_id(db, PERSON_ID) is None
        assert repository.mock_calls == [call.find_one(db, PERSON_ID)]


class TestSearch:

    async def test_search(self, service, repository, db):
        """조건식과 성 오름차순 정렬로 한 번 조회하고 결과를 그대로 반환."""
        expected: list[Person] = []
        repository.find_all.return_value = expected

        actual = await service.search(db, SEARCH_TERM)

        repository.find_all.assert_awaited_once()
        assert len(repository.mock_calls) == 1
        kwargs = repository.find_all.await_args.kwargs
        assert str(kwargs["order_by"]) == "persons.last_name ASC"
        predicate = str(kwargs["where"])
        assert "persons.first_name" in predicate
        assert "persons.last_name" in predicate
        assert actual is expected


class TestUpdate:

    async def test_update(self, service, repository, db):
        """기존 엔티티의 이름을 DTO 값으로 덮어쓰고 명시적으로 저장."""
        updated = PersonDTO(id=PERSON_ID, first_name=FIRST_NAME_UPDATED, last_name=LAST_NAME_UPDATED)
        person = Person(id=PERSON_ID, first_name=FIRST_NAME, last_name=LAST_NAME)
        repository.find_one.return_value = person
        repository.save.side_effect = lambda session, entity: entity

        returned = await service.update(db, updated)

        assert repository.mock_calls == [
            call.find_one(db, PERSON_ID),
            call.save(db, person),
        ]
        assert returned is person
        assert_person(updated, returned)

    async def test_update_when_person_is_not_found(self, service, repository, db):
        """없는 ID 수정 시 PersonNotFoundError, 저장 호출 없음."""
        updated = PersonDTO(id=PERSON_ID, first_name=FIRST_NAME_UPDATED, last_name=LAST_NAME_UPDATED)
        repository.find_one.return_value = None

        with pytest.raises(PersonNotFoundError):
            await service.update(db, updated)

        assert repository.mock_calls == [call.find_one(db, PERSON_ID)]
        repository.save.assert_not_awaited()

    async def test_storage_errors_propagate(self, service, repository, db):
        """레포지토리 예외는 변환 없이 전파."""
        repository.find_one.side_effect = ConnectionError("database unavailable")

        with pytest.raises(ConnectionError):
            await service.update(
                db, PersonDTO(id=PERSON_ID, first_name=FIRST_NAME, last_name=LAST_NAME)
            )
