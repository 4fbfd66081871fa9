"""최애 그룹 SQLAlchemy ORM 모델 정의.

Oshi group SQLAlchemy ORM model definition.
A group is owned by one user and exclusively owns its member records.

Tables:
    - oshi_group: 사용자가 등록한 최애 그룹 (Idol groups registered by a user)
"""

from datetime import datetime
from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.timezone import now_utc


class OshiGroup(Base):
    """최애 그룹 모델 — 사용자별 아이돌 그룹.

    Oshi group model — an idol group tracked by one user.
    All member queries are scoped through the owning user_id of the group.

    Attributes:
        id: 자동 증가 식별자 (Auto-increment identifier)
        user_id: 소유 사용자 ID (Owning user id, issued by the auth server)
        group_name: 그룹 이름 (Group name)
        company: 소속 회사 (Agency / company, optional)
        description: 설명 (Free-text description, optional)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "oshi_group"

    # 그룹 식별자 — Generated identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 소유 사용자 — Owning user id (users live in the auth service)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    group_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

