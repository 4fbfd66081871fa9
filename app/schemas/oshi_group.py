"""최애 그룹 관련 Pydantic 요청/응답 스키마 정의.

Oshi group Pydantic request/response schema definitions.
"""

from datetime import datetime
from pydantic import BaseModel, Field, field_validator


class OshiGroupCreate(BaseModel):
    """최애 그룹 생성 요청 스키마.

    Oshi group creation request schema.
    The group is created under the authenticated user.

    Attributes:
        group_name: 그룹 이름 (Group name, required)
        company: 소속 회사 (Agency, optional)
        description: 설명 (Description, max 1000 chars, optional)
    """

    group_name: str = Field(min_length=1, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)


class OshiGroupUpdate(BaseModel):
    """최애 그룹 수정 요청 스키마 (부분 업데이트).

    Oshi group update request schema (partial update).
    """

    group_name: str | None = Field(default=None, min_length=1, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("group_name")
    @classmethod
    def group_name_not_null(cls, v: str | None) -> str:
        """그룹 이름은 생략만 가능, null 불가 — May be omitted but not set to null."""
        if v is None:
            raise ValueError("group_name cannot be null")
        return v


class OshiGroupResponse(BaseModel):
    """최애 그룹 응답 스키마.

    Oshi group response schema returned from API.
    """

    id: int  # 그룹 ID (Group id)
    user_id: int  # 소유 사용자 ID (Owning user id)
    group_name: str
    company: str | None
    description: str | None
    created_at: datetime
    updated_at: datetime
