"""FastAPI 의존성 주입 모듈 / 서비스 제공자.

FastAPI dependency injection module.
Exposes the composed service singletons as dependencies so tests can
override them through ``app.dependency_overrides``.
"""

from person_app.services.person_service import PersonService, person_service


def get_person_service() -> PersonService:
    """사람 서비스 인스턴스를 반환합니다 (Return the person service)."""
    return person_service
