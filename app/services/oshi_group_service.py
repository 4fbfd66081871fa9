"""최애 그룹 서비스 — 그룹 CRUD 및 검색 비즈니스 로직.

Oshi Group Service — Business logic for group CRUD and search.
All operations are scoped to the calling user.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.oshi_group import OshiGroup
from app.repositories.oshi_group_repository import oshi_group_repository
from app.schemas.oshi_group import OshiGroupCreate, OshiGroupResponse, OshiGroupUpdate
from app.utils.exceptions import BadRequestError, NotFoundError


class OshiGroupService:
    """최애 그룹 관련 비즈니스 로직을 처리하는 서비스.

    Service handling oshi group business logic.
    """

    def _to_response(self, group: OshiGroup) -> OshiGroupResponse:
        """그룹 모델을 응답 스키마로 변환합니다 — Convert a group to its response schema."""
        return OshiGroupResponse(
            id=group.id,
            user_id=group.user_id,
            group_name=group.group_name,
            company=group.company,
            description=group.description,
            created_at=group.created_at,
            updated_at=group.updated_at,
        )

    async def list_groups(
        self,
        db: AsyncSession,
        user_id: int,
        group_name: str | None = None,
        full: bool = False,
        fuzzy: bool = False,
        company: str | None = None,
    ) -> list[OshiGroupResponse]:
        """사용자의 그룹 목록을 조회하거나 검색합니다.

        List the user's groups, optionally searching by name or company.
        A name search needs exactly one of full / fuzzy.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유 사용자 ID (Owning user id)
            group_name: 그룹 이름 검색어 (Name search term, optional)
            full: 완전 일치 검색 (Exact match)
            fuzzy: 부분 일치 검색 (Case-insensitive substring match)
            company: 회사명 완전 일치 검색 (Exact company match, optional)

        Returns:
            list[OshiGroupResponse]: 그룹 목록 (List of groups)

        Raises:
            BadRequestError: full/fuzzy가 둘 다 참이거나 둘 다 거짓일 때
                             (Both or neither search mode selected)
        """
        if group_name is not None:
            if full == fuzzy:
                raise BadRequestError("Select exactly one of full or fuzzy search")
            groups = await oshi_group_repository.search_by_name(db, user_id, group_name, fuzzy=fuzzy)
        elif company is not None:
            groups = await oshi_group_repository.search_by_company(db, user_id, company)
        else:
            groups = await oshi_group_repository.list_by_user(db, user_id)
        return [self._to_response(g) for g in groups]

    async def get_group(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
    ) -> OshiGroupResponse:
        """그룹 상세를 조회합니다 — Retrieve one of the user's groups.

        Raises:
            NotFoundError: 그룹이 없거나 다른 사용자의 그룹일 때 (Missing or foreign-owned)
        """
        group: OshiGroup | None = await oshi_group_repository.get_owned(db, group_id, user_id)
        if group is None:
            raise NotFoundError("Oshi group not found")
        return self._to_response(group)

    async def create_group(
        self,
        db: AsyncSession,
        user_id: int,
        data: OshiGroupCreate,
    ) -> OshiGroupResponse:
        """새 그룹을 생성합니다 — Create a group owned by the user."""
        group: OshiGroup = await oshi_group_repository.create(
            db,
            {
                "user_id": user_id,
                "group_name": data.group_name,
                "company": data.company,
                "description": data.description,
            },
        )
        return self._to_response(group)

    async def update_group(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
        data: OshiGroupUpdate,
    ) -> OshiGroupResponse:
        """그룹 정보를 수정합니다.

        Update an existing group with the fields present in the request.

        Raises:
            NotFoundError: 그룹이 없거나 다른 사용자의 그룹일 때 (Missing or foreign-owned)
        """
        update_data: dict = data.model_dump(exclude_unset=True)
        group: OshiGroup | None = await oshi_group_repository.update(db, group_id, update_data, user_id)
        if group is None:
            raise NotFoundError("Oshi group not found")
        return self._to_response(group)

    async def delete_group(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
    ) -> None:
        """그룹과 소속 멤버를 삭제합니다.

        Delete a group; its member records are removed with it.

        Raises:
            NotFoundError: 그룹이 없거나 다른 사용자의 그룹일 때 (Missing or foreign-owned)
        """
        deleted: bool = await oshi_group_repository.delete_with_members(db, group_id, user_id)
        if not deleted:
            raise NotFoundError("Oshi group not found")


# 싱글턴 인스턴스 — Singleton instance
oshi_group_service: OshiGroupService = OshiGroupService()
