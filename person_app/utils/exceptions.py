"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
so services can raise domain errors that FastAPI renders directly.

Usage:
    from person_app.utils.exceptions import PersonNotFoundError
    raise PersonNotFoundError(person_id)
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 / 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class PersonNotFoundError(NotFoundError):
    """주어진 ID의 사람을 찾을 수 없을 때 발생.

    Raised by delete and update when no person exists for the given id.

    Attributes:
        person_id: 조회에 실패한 ID (The id that could not be resolved)
    """

    def __init__(self, person_id: int | None) -> None:
        self.person_id: int | None = person_id
        super().__init__(f"No person found with id: {person_id}")

