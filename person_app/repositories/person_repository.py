"""사람 레포지토리 / 사람 CRUD 쿼리.

Person Repository / CRUD queries for persons.
Extends BaseRepository with the Person model; sorting and filtering are
supplied by the caller as SQLAlchemy expressions.
"""

from person_app.models.person import Person
from person_app.repositories.base import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """persons 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the persons table.
    """

    def __init__(self) -> None:
        super().__init__(Person)


# 싱글턴 인스턴스 / Singleton instance
person_repository: PersonRepository = PersonRepository()
