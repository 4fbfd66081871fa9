"""최애 멤버 라우터 — 멤버 등록/수정/조회/삭제 엔드포인트.

Oshi Member Router — Endpoints for member records.
PUT expects the updated_at value from the last read; a stale value yields 409.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentUserId
from app.database import get_db
from app.schemas.oshi_member import (
    MemberExistsResponse,
    OshiMemberCreate,
    OshiMemberResponse,
    OshiMemberUpdate,
)
from app.services.oshi_member_service import oshi_member_service

router: APIRouter = APIRouter()


@router.post("", response_model=OshiMemberResponse, status_code=201)
async def create_member(
    data: OshiMemberCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiMemberResponse:
    """새 멤버를 등록합니다. 이름은 사용자 내에서 고유해야 합니다.

    Register a member under one of the user's groups. Names are unique per user.
    """
    result: OshiMemberResponse = await oshi_member_service.create_member(db, user_id, data)
    await db.commit()
    return result


@router.get("/by-name", response_model=OshiMemberResponse)
async def get_member_by_name(
    member_name: Annotated[str, Query(min_length=1)],
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiMemberResponse:
    """이름으로 멤버를 조회합니다 — Find a member by exact name."""
    return await oshi_member_service.find_by_name(db, member_name, user_id)


@router.get("/exists", response_model=MemberExistsResponse)
async def member_name_exists(
    member_name: Annotated[str, Query(min_length=1)],
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> MemberExistsResponse:
    """같은 이름의 멤버가 있는지 확인합니다 — Check whether a member name is taken."""
    exists: bool = await oshi_member_service.exists_by_name(db, member_name, user_id)
    return MemberExistsResponse(exists=exists)


@router.get("/{member_id}", response_model=OshiMemberResponse)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiMemberResponse:
    """멤버 상세를 조회합니다 — Retrieve a member."""
    return await oshi_member_service.get_member(db, member_id, user_id)


@router.put("/{member_id}", response_model=OshiMemberResponse)
async def update_member(
    member_id: int,
    data: OshiMemberUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiMemberResponse:
    """멤버 정보를 덮어씁니다 — Overwrite a member's name, gender and birth date."""
    result: OshiMemberResponse = await oshi_member_service.update_member(db, member_id, user_id, data)
    await db.commit()
    return result


@router.delete("/{member_id}", status_code=204)
async def delete_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> None:
    """멤버를 삭제합니다 — Delete a member."""
    await oshi_member_service.delete_member(db, member_id, user_id)
    await db.commit()
