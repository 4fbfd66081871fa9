"""최애 멤버 SQLAlchemy ORM 모델 정의.

Oshi member SQLAlchemy ORM model definition.
A member record belongs to exactly one OshiGroup and is removed with it.
updated_at doubles as the optimistic-lock stamp checked by
OshiMemberRepository.save().

Tables:
    - oshi_member: 그룹 소속 멤버 (Members of an oshi group)
"""

from datetime import date, datetime, timedelta
from typing import Any

from sqlalchemy import Date, DateTime, ForeignKey, Integer, SmallInteger, Text, event
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timezone import ensure_utc, now_utc


class OshiMember(Base):
    """최애 멤버 모델 — 그룹에 속한 아이돌 멤버.

    Oshi member model — one idol member of a group.
    Created through the business constructor; mutated only through update().
    The group is attached by the caller (group_id or oshi_group) before saving.

    Attributes:
        id: 자동 증가 식별자 (Auto-increment identifier, assigned on first save)
        group_id: 소속 그룹 FK (Owning group, CASCADE on delete)
        member_name: 멤버 이름 (Display name)
        gender: 성별 코드 (Small integer code defined by the caller)
        birth_day: 생년월일 (Birth date)
        created_at: 생성 일시 UTC (Set once at construction)
        updated_at: 수정 일시 UTC (Refreshed on update, optimistic-lock stamp)

    Relationships:
        oshi_group: 소속 그룹 (Owning group)
    """

    __tablename__ = "oshi_member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 소속 그룹 FK — CASCADE: 그룹 삭제 시 멤버도 삭제
    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("oshi_group.id", ondelete="CASCADE", name="fk_oshi_member_group"),
        nullable=False,
        index=True,
    )
    member_name: Mapped[str] = mapped_column(Text, nullable=False)
    gender: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    birth_day: Mapped[date] = mapped_column(Date, nullable=False)
    # 생성 일시 — INSERT 이후 변경 불가 (Immutable after insert)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    # 수정 일시 — 낙관적 잠금 토큰 (Optimistic-lock token)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # 소속 그룹 — 멤버 삭제는 그룹 레포지토리와 FK CASCADE가 담당
    # (Many-to-one only; member rows are removed by the group repository and the FK cascade)
    oshi_group = relationship("OshiGroup")

    # 마지막으로 DB에서 읽었거나 기록한 updated_at (Stamp last read from or written to the row)
    _loaded_updated_at = None

    def __init__(self, member_name: str, gender: int, birth_day: date) -> None:
        """비즈니스 생성자 — 세 필드를 설정하고 생성/수정 일시를 같은 값으로 기록합니다.

        Business constructor. Stamps created_at and updated_at with a single
        clock read so both are equal on a fresh record.
        """
        now: datetime = now_utc()
        self.member_name = member_name
        self.gender = gender
        self.birth_day = birth_day
        self.created_at = now
        self.updated_at = now

    def update(self, member_name: str, gender: int, birth_day: date) -> None:
        """이름/성별/생년월일을 덮어쓰고 수정 일시를 갱신합니다.

        Overwrite the business fields and refresh updated_at. The new stamp
        is always later than the previous one, even on a coarse or stepped clock.
        Persisting the change is the caller's job.
        """
        self.member_name = member_name
        self.gender = gender
        self.birth_day = birth_day

        # 만료된 속성은 여기서 로드하지 않음 (Expired attributes are not loaded here)
        previous: datetime | None = self.__dict__.get("updated_at") or self._loaded_updated_at
        now: datetime = now_utc()
        if previous is not None:
            now = max(now, ensure_utc(previous) + timedelta(microseconds=1))
        self.updated_at = now

    def __repr__(self) -> str:
        return f"<OshiMember id={self.id} group_id={self.group_id} member_name={self.member_name!r}>"


def _remember_stamp(target: OshiMember) -> None:
    stamp: datetime | None = target.__dict__.get("updated_at")
    if stamp is not None:
        target._loaded_updated_at = stamp


@event.listens_for(OshiMember, "load")
def _on_load(target: OshiMember, context: Any) -> None:
    _remember_stamp(target)


@event.listens_for(OshiMember, "refresh")
def _on_refresh(target: OshiMember, context: Any, attrs: Any) -> None:
    if attrs is None or "updated_at" in attrs:
        _remember_stamp(target)


@event.listens_for(OshiMember, "after_insert")
@event.listens_for(OshiMember, "after_update")
def _on_write(mapper: Any, connection: Any, target: OshiMember) -> None:
    _remember_stamp(target)
