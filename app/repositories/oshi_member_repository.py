"""최애 멤버 레포지토리 — 멤버 조회/저장/삭제 쿼리.

Oshi Member Repository — Lookup, save and delete queries for member records.
Members carry no user column; every query joins oshi_group and filters on
its user_id so a user never sees another user's members.

Saving an existing record performs an explicit optimistic-lock check in the
caller's transaction: read the stored updated_at (FOR UPDATE where the
backend supports it), compare it with the stamp the caller holds, then
write or raise OptimisticLockError.
"""

from datetime import datetime

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.oshi_group import OshiGroup
from app.models.oshi_member import OshiMember
from app.repositories.base import BaseRepository
from app.utils.exceptions import BadRequestError, OptimisticLockError
from app.utils.timezone import ensure_utc


def _owned_by(user_id: int) -> Select:
    """사용자 소유 그룹과 조인된 기본 쿼리 — Base query joined to the user's groups."""
    return (
        select(OshiMember)
        .join(OshiGroup, OshiMember.group_id == OshiGroup.id)
        .where(OshiGroup.user_id == user_id)
    )


def loaded_stamp(member: OshiMember) -> datetime | None:
    """레코드가 로드(또는 마지막 저장)될 때의 updated_at 값을 반환합니다.

    Return the updated_at value the record was loaded (or last flushed) with,
    ignoring any in-memory change made by OshiMember.update(). Kept by the
    model's load/refresh/flush events, so it survives expire_on_commit.
    """
    return member._loaded_updated_at


class OshiMemberRepository(BaseRepository[OshiMember]):
    """최애 멤버 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the oshi_member table.
    Lookups return None / empty lists for absent records; only writes raise.
    """

    def __init__(self) -> None:
        """OshiMemberRepository를 초기화합니다.

        Initialize the OshiMemberRepository with the OshiMember model.
        """
        super().__init__(OshiMember)

    async def find_by_group(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
    ) -> list[OshiMember]:
        """그룹에 속한 사용자의 멤버 목록을 조회합니다.

        Retrieve all members of a group owned by the user, ordered by id.
        A group owned by another user yields an empty list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            group_id: 그룹 ID (Group id)
            user_id: 소유 사용자 ID (Owning user id)

        Returns:
            list[OshiMember]: 멤버 목록, 없으면 빈 리스트 (Members, possibly empty)
        """
        query: Select = (
            _owned_by(user_id)
            .where(OshiMember.group_id == group_id)
            .order_by(OshiMember.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_name(
        self,
        db: AsyncSession,
        member_name: str,
        user_id: int,
    ) -> OshiMember | None:
        """이름이 정확히 일치하는 사용자의 멤버를 조회합니다.

        Retrieve at most one member with exactly this name for the user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_name: 멤버 이름 (Exact member name)
            user_id: 소유 사용자 ID (Owning user id)

        Returns:
            OshiMember | None: 조회된 멤버 또는 None (Found member or None)
        """
        query: Select = (
            _owned_by(user_id)
            .where(OshiMember.member_name == member_name)
            .order_by(OshiMember.id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    async def exists_by_name(
        self,
        db: AsyncSession,
        member_name: str,
        user_id: int,
    ) -> bool:
        """사용자에게 같은 이름의 멤버가 있는지 확인합니다.

        Check whether the user already has a member with this name.
        Used as the uniqueness pre-check before insert.
        """
        query: Select = (
            select(func.count())
            .select_from(OshiMember)
            .join(OshiGroup, OshiMember.group_id == OshiGroup.id)
            .where(OshiGroup.user_id == user_id, OshiMember.member_name == member_name)
        )
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0

    async def get_owned(
        self,
        db: AsyncSession,
        member_id: int,
        user_id: int,
    ) -> OshiMember | None:
        """사용자 소유 멤버를 ID로 조회합니다 — Fetch a member by id within the user's groups."""
        result = await db.execute(_owned_by(user_id).where(OshiMember.id == member_id))
        return result.scalar_one_or_none()

    async def save(
        self,
        db: AsyncSession,
        member: OshiMember,
        expected_updated_at: datetime | None = None,
    ) -> OshiMember:
        """멤버를 저장합니다 (신규는 INSERT, 기존은 버전 확인 후 UPDATE).

        Persist a new or modified member.

        New records are inserted and receive their id. For existing records
        the stored updated_at is read inside the current transaction and
        compared with the caller's stamp: expected_updated_at when given,
        otherwise the value the record was loaded with. A mismatch, or a row
        that no longer exists, rejects the write.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member: 저장할 멤버 (Member to persist)
            expected_updated_at: 호출자가 마지막으로 읽은 버전 스탬프
                                 (Stamp the caller last read, optional)

        Returns:
            OshiMember: 저장 후 갱신된 멤버 (Persisted member, refreshed)

        Raises:
            OptimisticLockError: 스탬프 불일치 또는 동시 삭제 (Stale stamp or concurrent delete)
            ConstraintViolationError: 필수 필드 누락, 존재하지 않는 그룹 (Missing field, unknown group)
            BadRequestError: 비교할 스탬프가 없음 (No stamp to compare against)
        """
        state = inspect(member)

        if state.transient or state.pending:
            db.add(member)
            await self._flush(db)
            await db.refresh(member)
            return member

        if state.detached:
            db.add(member)

        expected: datetime | None = (
            expected_updated_at if expected_updated_at is not None else loaded_stamp(member)
        )
        if expected is None:
            raise BadRequestError("Member has no known version stamp; reload it before saving")

        # 버전 읽기 — 아직 flush되지 않은 변경이 먼저 기록되지 않도록 autoflush 비활성화
        # Read the stored stamp before our own pending UPDATE is flushed
        with db.no_autoflush:
            result = await db.execute(
                select(OshiMember.updated_at)
                .where(OshiMember.id == state.identity[0])
                .with_for_update()
            )
        stored: datetime | None = result.scalar_one_or_none()

        if stored is None:
            raise OptimisticLockError("Record was deleted by another transaction")
        if ensure_utc(stored) != ensure_utc(expected):
            raise OptimisticLockError()

        await self._flush(db)
        await db.refresh(member)
        return member

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
        user_id: int,
    ) -> bool:
        """사용자 소유 멤버를 삭제합니다.

        Delete a member by id. The member must belong to one of the user's
        groups; anything else is reported as not removed.

        Returns:
            bool: 삭제 성공 여부 (Whether a record was removed)
        """
        member: OshiMember | None = await self.get_owned(db, record_id, user_id)
        if member is None:
            return False

        await db.delete(member)
        await self._flush(db)
        return True


# 싱글턴 인스턴스 — Singleton instance
oshi_member_repository: OshiMemberRepository = OshiMemberRepository()
