"""기본 레포지토리 — 사용자 소유 레코드용 공통 CRUD.

Base repository — Shared CRUD for records owned by a user.
Models with a user_id column are filtered by it whenever a user_id is
passed; models owned indirectly (OshiMember, through its group) override
the lookups they need.

Usage:
    class OshiGroupRepository(BaseRepository[OshiGroup]):
        def __init__(self) -> None:
            super().__init__(OshiGroup)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.exceptions import ConstraintViolationError

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리 — Generic CRUD over one model class."""

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def _scoped(self, user_id: int | None) -> Select:
        """소유자 필터가 적용된 SELECT — SELECT narrowed to one owner when possible."""
        query: Select = select(self.model)
        if user_id is not None and hasattr(self.model, "user_id"):
            query = query.where(self.model.user_id == user_id)
        return query

    async def _flush(self, db: AsyncSession) -> None:
        """flush 후 무결성 오류를 도메인 예외로 변환합니다.

        Flush pending writes. NOT NULL and foreign key failures surface as
        ConstraintViolationError; the caller rolls the session back.
        """
        try:
            await db.flush()
        except IntegrityError as exc:
            raise ConstraintViolationError(
                f"{self.model.__name__} violates a database constraint"
            ) from exc

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
        user_id: int | None = None,
    ) -> ModelType | None:
        """ID로 조회, 소유자가 다르면 None — By id; None when missing or foreign-owned."""
        result = await db.execute(self._scoped(user_id).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        user_id: int | None = None,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """소유자의 레코드 목록을 조회합니다.

        List an owner's records. filters holds exact-match column values;
        None values and unknown columns are ignored.
        """
        query: Select = self._scoped(user_id)
        for column_name, value in (filters or {}).items():
            if value is not None and hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)
        if order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(self, db: AsyncSession, obj_data: dict[str, Any]) -> ModelType:
        """레코드를 추가하고 ID가 채워진 상태로 반환합니다.

        Insert a record and return it with its generated id and defaults.

        Raises:
            ConstraintViolationError: 제약 조건 위반 (Constraint violated)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await self._flush(db)
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
        user_id: int | None = None,
    ) -> ModelType | None:
        """전달된 필드만 덮어씁니다 (None 포함).

        Overwrite only the given fields, None included, so callers pass
        model_dump(exclude_unset=True). Returns None when the record is not
        visible to user_id.
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id, user_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await self._flush(db)
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
        user_id: int | None = None,
    ) -> bool:
        """삭제 후 True, 보이지 않는 레코드면 False — True once removed."""
        db_obj: ModelType | None = await self.get_by_id(db, record_id, user_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await self._flush(db)
        return True
