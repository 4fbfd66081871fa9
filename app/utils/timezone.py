"""UTC 시간 유틸리티.

UTC time utilities shared by models and repositories.
All timestamps are stored in UTC; SQLite returns them without tzinfo,
so values read back are normalized before comparison.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """현재 시간을 UTC로 반환합니다.

    Return the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """datetime 객체가 UTC 시간대를 가지도록 보장합니다.

    Attach UTC to naive datetimes and convert aware ones to UTC.

    Args:
        dt: datetime 객체 또는 None (Datetime or None)

    Returns:
        datetime | None: UTC 시간대의 datetime 또는 None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        # 시간대가 없으면 UTC로 가정 — Naive values are stored UTC
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
