"""최애 그룹 라우터 — 그룹 CRUD 및 소속 멤버 목록 엔드포인트.

Oshi Group Router — CRUD endpoints for groups plus the member listing
of a group. All endpoints are scoped to the user from the JWT.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentUserId
from app.database import get_db
from app.schemas.oshi_group import OshiGroupCreate, OshiGroupResponse, OshiGroupUpdate
from app.schemas.oshi_member import OshiMemberResponse
from app.services.oshi_group_service import oshi_group_service
from app.services.oshi_member_service import oshi_member_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[OshiGroupResponse])
async def list_groups(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
    group_name: Annotated[str | None, Query()] = None,
    full: bool = False,
    fuzzy: bool = False,
    company: Annotated[str | None, Query()] = None,
) -> list[OshiGroupResponse]:
    """그룹 목록을 조회합니다. group_name(full/fuzzy) 또는 company로 검색 가능.

    List the user's groups, optionally searching by name or company.
    """
    return await oshi_group_service.list_groups(
        db, user_id, group_name=group_name, full=full, fuzzy=fuzzy, company=company
    )


@router.post("", response_model=OshiGroupResponse, status_code=201)
async def create_group(
    data: OshiGroupCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiGroupResponse:
    """새 그룹을 생성합니다.

    Create a new group owned by the current user.
    """
    result: OshiGroupResponse = await oshi_group_service.create_group(db, user_id, data)
    await db.commit()
    return result


@router.get("/{group_id}", response_model=OshiGroupResponse)
async def get_group(
    group_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiGroupResponse:
    """그룹 상세를 조회합니다 — Retrieve a group."""
    return await oshi_group_service.get_group(db, group_id, user_id)


@router.put("/{group_id}", response_model=OshiGroupResponse)
async def update_group(
    group_id: int,
    data: OshiGroupUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> OshiGroupResponse:
    """그룹 정보를 수정합니다 — Update a group."""
    result: OshiGroupResponse = await oshi_group_service.update_group(db, group_id, user_id, data)
    await db.commit()
    return result


@router.delete("/{group_id}", status_code=204)
async def delete_group(
    group_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> None:
    """그룹을 삭제합니다. 소속 멤버도 함께 삭제됩니다.

    Delete a group together with its members.
    """
    await oshi_group_service.delete_group(db, group_id, user_id)
    await db.commit()


@router.get("/{group_id}/members", response_model=list[OshiMemberResponse])
async def list_group_members(
    group_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> list[OshiMemberResponse]:
    """그룹 소속 멤버 목록을 조회합니다 — List members of a group."""
    return await oshi_member_service.list_by_group(db, group_id, user_id)
