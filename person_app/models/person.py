"""사람(Person) SQLAlchemy ORM 모델 정의.

Person SQLAlchemy ORM model definition.

Tables:
    - persons: 등록된 사람 (Registered persons)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from person_app.database import Base


class Person(Base):
    """사람 모델 / 이름과 성을 가진 등록 엔티티.

    Person model / A registered person identified by an integer id.
    The id is assigned by the database on flush, never by the service layer.

    Attributes:
        id: 고유 식별자 (Autoincrement primary key)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        created_at: 생성 일시 UTC (Creation timestamp)
        modified_at: 수정 일시 UTC (Last modification timestamp)
        version: 낙관적 잠금 버전 (Optimistic lock version counter)
    """

    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # 성 / 목록/검색 정렬 기준 (Sort key for listing and search)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    # 낙관적 잠금 / 매퍼가 INSERT/UPDATE 시 자동 증가 (Incremented by the mapper)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __init__(
        self,
        first_name: str,
        last_name: str,
        id: int | None = None,
    ) -> None:
        super().__init__(first_name=first_name, last_name=last_name)
        if id is not None:
            self.id = id

    @property
    def full_name(self) -> str:
        """이름과 성을 공백으로 연결한 전체 이름 (First and last name joined by a space)."""
        return f"{self.first_name} {self.last_name}"

    def update(self, first_name: str, last_name: str) -> None:
        """이름과 성을 변경합니다 (Overwrite both name fields)."""
        self.first_name = first_name
        self.last_name = last_name

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"
