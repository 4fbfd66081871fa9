"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services and repositories by
eliminating the need to specify status codes at each call site.

Usage:
    from app.utils.exceptions import NotFoundError, OptimisticLockError
    raise NotFoundError("Member not found")
    raise OptimisticLockError()
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised at the service layer when a requested group or member does not
    exist or belongs to another user. Repositories return None instead.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when a member name is already registered by the same user.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class OptimisticLockError(HTTPException):
    """409 Conflict 예외 — 낙관적 잠금 충돌 시 사용.

    409 Conflict exception for optimistic-lock failures.
    Raised when a write carries an updated_at stamp older than the stored one,
    or when the record disappeared since it was read. Never retried here;
    the caller decides whether to reload and retry.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Record was modified by another transaction") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ConstraintViolationError(HTTPException):
    """400 Bad Request 예외 — DB 제약 조건 위반 시 사용.

    400 Bad Request exception for integrity failures at write time
    (required column missing, foreign key to a group that does not exist).

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Database constraint violated") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. both or neither of the full/fuzzy search flags set).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
