"""최애 그룹 레포지토리 — 그룹 CRUD 및 검색 쿼리.

Oshi Group Repository — CRUD and search queries for oshi groups.
Every query is scoped to the owning user. Deleting a group removes its
member rows explicitly in the same unit of work.
"""

from typing import Sequence

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.oshi_group import OshiGroup
from app.models.oshi_member import OshiMember
from app.repositories.base import BaseRepository


class OshiGroupRepository(BaseRepository[OshiGroup]):
    """최애 그룹 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the oshi_group table.
    """

    def __init__(self) -> None:
        super().__init__(OshiGroup)

    async def get_owned(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
    ) -> OshiGroup | None:
        """사용자 소유 그룹을 조회합니다 — Fetch a group owned by the user."""
        return await self.get_by_id(db, group_id, user_id)

    async def list_by_user(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> list[OshiGroup]:
        """사용자의 모든 그룹을 생성 순으로 조회합니다.

        Retrieve all groups of a user in creation order.
        """
        groups: Sequence[OshiGroup] = await self.get_all(db, user_id=user_id, order_by=OshiGroup.id)
        return list(groups)

    async def search_by_name(
        self,
        db: AsyncSession,
        user_id: int,
        group_name: str,
        fuzzy: bool,
    ) -> list[OshiGroup]:
        """그룹 이름으로 검색합니다 (완전 일치 또는 부분 일치).

        Search a user's groups by name.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유 사용자 ID (Owning user id)
            group_name: 검색어 (Search term)
            fuzzy: True면 대소문자 무시 부분 일치, False면 완전 일치
                   (True for case-insensitive substring match, False for exact match)

        Returns:
            list[OshiGroup]: 검색 결과 (Matching groups)
        """
        query: Select = select(OshiGroup).where(OshiGroup.user_id == user_id)
        if fuzzy:
            query = query.where(OshiGroup.group_name.icontains(group_name, autoescape=True))
        else:
            query = query.where(OshiGroup.group_name == group_name)
        result = await db.execute(query.order_by(OshiGroup.id))
        return list(result.scalars().all())

    async def search_by_company(
        self,
        db: AsyncSession,
        user_id: int,
        company: str,
    ) -> list[OshiGroup]:
        """소속 회사로 검색합니다 — Exact match on company."""
        groups: Sequence[OshiGroup] = await self.get_all(
            db, user_id=user_id, filters={"company": company}, order_by=OshiGroup.id
        )
        return list(groups)

    async def delete_with_members(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
    ) -> bool:
        """그룹과 소속 멤버를 함께 삭제합니다.

        Delete a group and all of its member records.
        Member rows are deleted first so the cascade does not depend on the
        backend honouring ON DELETE CASCADE.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            group_id: 그룹 ID (Group id)
            user_id: 소유 사용자 ID (Owning user id)

        Returns:
            bool: 삭제 성공 여부 (False when the group is missing or foreign-owned)
        """
        group: OshiGroup | None = await self.get_owned(db, group_id, user_id)
        if group is None:
            return False

        await db.execute(delete(OshiMember).where(OshiMember.group_id == group.id))
        await db.delete(group)
        await db.flush()
        return True


# 싱글턴 인스턴스 — Singleton instance
oshi_group_repository: OshiGroupRepository = OshiGroupRepository()
