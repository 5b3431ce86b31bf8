"""사람 라우터 / 사람 CRUD 및 검색 엔드포인트.

Person Router / CRUD and search endpoints for persons.
Write endpoints commit the session once the service call succeeds.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from person_app.api.deps import get_person_service
from person_app.database import get_db
from person_app.models.person import Person
from person_app.schemas.person import PERSON_ID_MAX, PersonDTO, PersonResponse
from person_app.services.person_service import PersonService
from person_app.utils.exceptions import PersonNotFoundError

router: APIRouter = APIRouter()

# 범위 밖 ID는 DB 드라이버에 도달하기 전에 422 / Out-of-range ids are rejected with 422
PersonIdPath = Annotated[int, Path(ge=1, le=PERSON_ID_MAX)]


@router.get("/persons", response_model=list[PersonResponse])
async def list_persons(
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> list[Person]:
    """모든 사람을 성 오름차순으로 조회합니다.

    List all persons ordered by last name.
    """
    return await service.find_all(db)


@router.get("/persons/search", response_model=list[PersonResponse])
async def search_persons(
    search_term: Annotated[str, Query(min_length=1, max_length=100)],
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> list[Person]:
    """이름에 검색어가 포함된 사람을 조회합니다.

    Search persons whose first or last name contains the term.
    """
    return await service.search(db, search_term)


@router.get("/persons/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: PersonIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> Person:
    """사람 상세 정보를 조회합니다. 없으면 404.

    Retrieve a single person. Responds 404 when the id is unknown.
    """
    person: Person | None = await service.find_by_id(db, person_id)
    if person is None:
        raise PersonNotFoundError(person_id)
    return person


@router.post("/persons", response_model=PersonResponse, status_code=201)
async def create_person(
    data: PersonDTO,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> Person:
    """새 사람을 등록합니다.

    Create a new person. Any id in the body is ignored.
    """
    result: Person = await service.create(db, data)
    await db.commit()
    return result


@router.put("/persons/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: PersonIdPath,
    data: PersonDTO,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> Person:
    """사람 정보를 수정합니다. 경로의 ID가 본문의 ID보다 우선합니다.

    Update a person. The path id takes precedence over any id in the body.
    """
    dto: PersonDTO = data.model_copy(update={"id": person_id})
    result: Person = await service.update(db, dto)
    await db.commit()
    return result


@router.delete("/persons/{person_id}", response_model=PersonResponse)
async def delete_person(
    person_id: PersonIdPath,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[PersonService, Depends(get_person_service)],
) -> Person:
    """사람을 삭제하고 삭제된 정보를 반환합니다.

    Delete a person and return the deleted record.
    """
    result: Person = await service.delete(db, person_id)
    await db.commit()
    return result
