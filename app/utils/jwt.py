"""JWT 액세스 토큰 유틸리티 — 사용자 ID 클레임 처리.

Access-token helpers. Tokens are issued by the authentication server; this
service only needs the integer user id carried in "sub". issue_access_token
produces the same shape and exists for tooling and tests.

Payload:
    {"sub": "9", "exp": 1234567890, "type": "access"}
"""

from datetime import timedelta
from typing import Any

import jwt

from app.config import settings
from app.utils.timezone import now_utc

ACCESS_TOKEN_TYPE: str = "access"


def create_access_token(data: dict[str, Any]) -> str:
    """페이로드에 만료 시각과 토큰 유형을 붙여 서명합니다.

    Sign an access token; exp is now + JWT_ACCESS_TOKEN_EXPIRE_MINUTES.
    """
    claims: dict[str, Any] = {
        **data,
        "exp": now_utc() + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES),
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """서명과 만료를 검증한 페이로드 — Verified payload; raises jwt.InvalidTokenError."""
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


def user_id_from_token(token: str) -> int:
    """액세스 토큰에서 정수 사용자 ID를 꺼냅니다.

    Return the integer user id of a valid access token.

    Raises:
        jwt.InvalidTokenError: 서명/만료 오류, 액세스 토큰이 아니거나 sub가 정수가 아닐 때
            (Bad signature or expiry, wrong token type, or a non-integer subject)
    """
    payload: dict[str, Any] = decode_token(token)
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise jwt.InvalidTokenError("Not an access token")
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise jwt.InvalidTokenError("Subject is not a user id") from exc
