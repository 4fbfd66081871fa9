"""FastAPI 의존성 주입 모듈 — 인증.

FastAPI dependency injection module — Authentication.
Extracts the calling user's id from the JWT bearer token. Users are managed
by the authentication server, so no user lookup happens here; ownership is
enforced by the user_id filters of every repository query.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. user_id_from_token()이 서명, 만료, 유형을 검증하고 sub를 정수로 변환
       (user_id_from_token verifies the token and returns the integer sub)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import user_id_from_token

# HTTP Bearer 토큰 추출기 — Authorization 헤더에서 JWT 토큰 추출
# (Extracts JWT token from Authorization: Bearer <token> header)
security: HTTPBearer = HTTPBearer()


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> int:
    """JWT 토큰에서 현재 사용자 ID를 추출합니다.

    Decode JWT from the Authorization header and return the user id.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)

    Returns:
        int: 인증된 사용자 ID (Authenticated user id)

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
    """
    try:
        return user_id_from_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")


# 편의 타입 별칭 — Annotated alias for route signatures
CurrentUserId = Annotated[int, Depends(get_current_user_id)]
