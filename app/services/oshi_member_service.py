"""최애 멤버 서비스 — 멤버 등록/수정/조회/삭제 비즈니스 로직.

Oshi Member Service — Business logic for member records.
Enforces group ownership and per-user name uniqueness, and forwards the
client's updated_at stamp to the repository's optimistic-lock check.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.oshi_group import OshiGroup
from app.models.oshi_member import OshiMember
from app.repositories.oshi_group_repository import oshi_group_repository
from app.repositories.oshi_member_repository import oshi_member_repository
from app.schemas.oshi_member import OshiMemberCreate, OshiMemberResponse, OshiMemberUpdate
from app.utils.exceptions import DuplicateError, NotFoundError


class OshiMemberService:
    """최애 멤버 관련 비즈니스 로직을 처리하는 서비스.

    Service handling oshi member business logic.
    """

    def _to_response(self, member: OshiMember) -> OshiMemberResponse:
        """멤버 모델을 응답 스키마로 변환합니다.

        Convert an OshiMember model instance to an OshiMemberResponse schema.
        """
        return OshiMemberResponse(
            id=member.id,
            group_id=member.group_id,
            member_name=member.member_name,
            gender=member.gender,
            birth_day=member.birth_day,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )

    async def list_by_group(
        self,
        db: AsyncSession,
        group_id: int,
        user_id: int,
    ) -> list[OshiMemberResponse]:
        """그룹의 멤버 목록을 조회합니다.

        List members of one of the user's groups.

        Raises:
            NotFoundError: 그룹이 없거나 다른 사용자의 그룹일 때 (Missing or foreign-owned group)
        """
        group: OshiGroup | None = await oshi_group_repository.get_owned(db, group_id, user_id)
        if group is None:
            raise NotFoundError("Oshi group not found")

        members: list[OshiMember] = await oshi_member_repository.find_by_group(db, group_id, user_id)
        return [self._to_response(m) for m in members]

    async def get_member(
        self,
        db: AsyncSession,
        member_id: int,
        user_id: int,
    ) -> OshiMemberResponse:
        """멤버 상세를 조회합니다 — Retrieve one of the user's members.

        Raises:
            NotFoundError: 멤버가 없을 때 (Member not found)
        """
        member: OshiMember | None = await oshi_member_repository.get_owned(db, member_id, user_id)
        if member is None:
            raise NotFoundError("Oshi member not found")
        return self._to_response(member)

    async def find_by_name(
        self,
        db: AsyncSession,
        member_name: str,
        user_id: int,
    ) -> OshiMemberResponse:
        """이름으로 멤버를 조회합니다 — Retrieve a member by exact name.

        Raises:
            NotFoundError: 멤버가 없을 때 (Member not found)
        """
        member: OshiMember | None = await oshi_member_repository.find_by_name(db, member_name, user_id)
        if member is None:
            raise NotFoundError("Oshi member not found")
        return self._to_response(member)

    async def exists_by_name(
        self,
        db: AsyncSession,
        member_name: str,
        user_id: int,
    ) -> bool:
        """같은 이름의 멤버 존재 여부 — Whether the user has a member with this name."""
        return await oshi_member_repository.exists_by_name(db, member_name, user_id)

    async def create_member(
        self,
        db: AsyncSession,
        user_id: int,
        data: OshiMemberCreate,
    ) -> OshiMemberResponse:
        """새 멤버를 등록합니다.

        Register a new member under one of the user's groups.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유 사용자 ID (Owning user id)
            data: 멤버 생성 데이터 (Member creation data)

        Returns:
            OshiMemberResponse: 생성된 멤버 응답 (Created member response)

        Raises:
            NotFoundError: 그룹이 없거나 다른 사용자의 그룹일 때 (Missing or foreign-owned group)
            DuplicateError: 같은 이름의 멤버가 이미 있을 때 (Member name already used)
        """
        group: OshiGroup | None = await oshi_group_repository.get_owned(db, data.group_id, user_id)
        if group is None:
            raise NotFoundError("Oshi group not found")

        # 사용자 내 멤버 이름 중복 확인 — Member name uniqueness per user
        if await oshi_member_repository.exists_by_name(db, data.member_name, user_id):
            raise DuplicateError("A member with this name already exists")

        member = OshiMember(data.member_name, data.gender, data.birth_day)
        member.group_id = group.id
        member = await oshi_member_repository.save(db, member)
        return self._to_response(member)

    async def update_member(
        self,
        db: AsyncSession,
        member_id: int,
        user_id: int,
        data: OshiMemberUpdate,
    ) -> OshiMemberResponse:
        """멤버 정보를 덮어씁니다.

        Overwrite a member's name, gender and birth date.
        When data.updated_at is present it must match the stored stamp.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 멤버 ID (Member id)
            user_id: 소유 사용자 ID (Owning user id)
            data: 수정 데이터 (Update data)

        Returns:
            OshiMemberResponse: 수정된 멤버 응답 (Updated member response)

        Raises:
            NotFoundError: 멤버가 없을 때 (Member not found)
            DuplicateError: 변경하려는 이름이 이미 있을 때 (New name already used)
            OptimisticLockError: 스탬프가 오래되었을 때 (Stale updated_at stamp)
        """
        member: OshiMember | None = await oshi_member_repository.get_owned(db, member_id, user_id)
        if member is None:
            raise NotFoundError("Oshi member not found")

        # 이름 변경 시 중복 확인 — Check name uniqueness if changing name
        if data.member_name != member.member_name:
            if await oshi_member_repository.exists_by_name(db, data.member_name, user_id):
                raise DuplicateError("A member with this name already exists")

        member.update(data.member_name, data.gender, data.birth_day)
        member = await oshi_member_repository.save(db, member, expected_updated_at=data.updated_at)
        return self._to_response(member)

    async def delete_member(
        self,
        db: AsyncSession,
        member_id: int,
        user_id: int,
    ) -> None:
        """멤버를 삭제합니다 — Delete one of the user's members.

        Raises:
            NotFoundError: 멤버가 없을 때 (Member not found)
        """
        deleted: bool = await oshi_member_repository.delete(db, member_id, user_id)
        if not deleted:
            raise NotFoundError("Oshi member not found")


# 싱글턴 인스턴스 — Singleton instance
oshi_member_service: OshiMemberService = OshiMemberService()
