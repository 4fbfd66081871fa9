"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for schema creation and
relationship resolution.

Modules:
    oshi_group: 최애 그룹 (Oshi groups owned by a user)
    oshi_member: 최애 멤버 (Members belonging to a group)
"""

from app.models.oshi_group import OshiGroup
from app.models.oshi_member import OshiMember

__all__ = [
    "OshiGroup",
    "OshiMember",
]
