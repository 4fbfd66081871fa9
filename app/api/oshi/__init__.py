"""최애 활동 API 라우터 패키지 — 그룹/멤버 엔드포인트 통합.

Oshi API Router package — Aggregates the group and member endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - groups: 최애 그룹 관리 (Oshi group management, member listing per group)
    - members: 최애 멤버 관리 (Oshi member management)
"""

from fastapi import APIRouter

from app.api.oshi.groups import router as groups_router
from app.api.oshi.members import router as members_router

oshi_router: APIRouter = APIRouter()

oshi_router.include_router(groups_router, prefix="/oshi-groups", tags=["Oshi Groups"])
oshi_router.include_router(members_router, prefix="/oshi-members", tags=["Oshi Members"])
