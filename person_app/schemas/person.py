"""사람(Person) 관련 Pydantic 요청/응답 스키마 정의.

Person Pydantic request/response schema definitions.
PersonDTO is the external input shape for create and update;
PersonResponse is returned from the API.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# persons.id 컬럼(INTEGER) 최대값 / Largest id the INTEGER primary key can hold
PERSON_ID_MAX: int = 2**31 - 1


class PersonDTO(BaseModel):
    """사람 생성/수정 요청 스키마.

    Person data-transfer object used as input for create and update.
    The id is ignored on create and identifies the target row on update.

    Attributes:
        id: 사람 ID (Person id, None for new persons)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: int | None = Field(None, ge=1, le=PERSON_ID_MAX)  # 수정 대상 ID / 생성 시 무시 (Target id, ignored on create)
    first_name: str = Field(..., min_length=1, max_length=100)  # 이름 (First name)
    last_name: str = Field(..., min_length=1, max_length=100)  # 성 (Last name)


class PersonResponse(BaseModel):
    """사람 응답 스키마.

    Person response schema returned from API.

    Attributes:
        id: 사람 ID (Person id)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        full_name: 전체 이름 (First and last name)
        created_at: 생성 일시 (Creation timestamp)
        modified_at: 수정 일시 (Last modification timestamp)
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    full_name: str
    created_at: datetime
    modified_at: datetime
