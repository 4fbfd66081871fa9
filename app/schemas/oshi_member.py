"""최애 멤버 관련 Pydantic 요청/응답 스키마 정의.

Oshi member Pydantic request/response schema definitions.
gender is an opaque small-integer code; its meaning belongs to the client,
so only the SMALLINT range is enforced here.
"""

from datetime import date, datetime
from pydantic import BaseModel, Field

# SMALLINT 범위 — Range of the gender column
GENDER_MIN: int = -32768
GENDER_MAX: int = 32767


class OshiMemberCreate(BaseModel):
    """최애 멤버 생성 요청 스키마.

    Oshi member creation request schema.

    Attributes:
        group_id: 소속 그룹 ID (Owning group id, must belong to the caller)
        member_name: 멤버 이름 (Member name, unique per user)
        gender: 성별 코드 (Gender code)
        birth_day: 생년월일 (Birth date)
    """

    group_id: int
    member_name: str = Field(min_length=1)
    gender: int = Field(ge=GENDER_MIN, le=GENDER_MAX)
    birth_day: date


class OshiMemberUpdate(BaseModel):
    """최애 멤버 수정 요청 스키마 (전체 덮어쓰기).

    Oshi member update request schema. The three business fields are
    overwritten as a whole.

    Attributes:
        member_name: 멤버 이름 (Member name)
        gender: 성별 코드 (Gender code)
        birth_day: 생년월일 (Birth date)
        updated_at: 마지막으로 읽은 버전 스탬프, 불일치 시 409
                    (Stamp from the last read; a stale value yields 409)
    """

    member_name: str = Field(min_length=1)
    gender: int = Field(ge=GENDER_MIN, le=GENDER_MAX)
    birth_day: date
    updated_at: datetime | None = None


class OshiMemberResponse(BaseModel):
    """최애 멤버 응답 스키마.

    Oshi member response schema returned from API.
    updated_at is the optimistic-lock stamp to send back on update.
    """

    id: int
    group_id: int
    member_name: str
    gender: int
    birth_day: date
    created_at: datetime
    updated_at: datetime


class MemberExistsResponse(BaseModel):
    """멤버 이름 존재 여부 응답 — Member name existence check response."""

    exists: bool
