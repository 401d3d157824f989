import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, TypeVar, Union

from sqlalchemy import delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel, select

from core.database.exceptions import StorageError


T = TypeVar("T", bound=SQLModel)

# BIGINT 기본키 범위
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1

logger = logging.getLogger(__name__)


class CRUDRepository(Generic[T], ABC):
    """
    id(int) 기본키를 가진 SQLModel 테이블에 대한 공통 CRUD 저장소.
    세션 팩토리는 생성 시점에 명시적으로 주입받습니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @staticmethod
    def is_valid_id(id: int) -> bool:
        """BIGINT 범위를 벗어난 id는 어떤 레코드도 가리킬 수 없음"""
        return MIN_ID <= id <= MAX_ID

    @abstractmethod
    def model_class(self) -> type[T]:
        """서브클래스에서 구체적인 모델 클래스를 반환해야 함"""
        pass

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """작업 하나에 대한 세션을 열고, DB 오류를 StorageError로 변환합니다."""
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"{self.model_class().__name__}.{operation} 실패: {e!r}")
            raise StorageError(operation) from e

    async def save(self, data: Union[T, Dict[str, Any]]) -> T:
        """
        데이터를 저장하거나 업데이트합니다. (부분 저장 지원)

        id가 없거나 존재하지 않는 레코드를 가리키면 새 레코드를 생성하고
        (id는 저장소가 발급), 존재하는 레코드를 가리키면 전달된 필드만 덮어씁니다.

        parameters:
            data: T | Dict[str, Any] - 저장할 모델 인스턴스 또는 데이터
        returns:
            T - 저장된 모델 인스턴스
        """
        if isinstance(data, SQLModel):
            data = data.model_dump()
        else:
            data = dict(data)
        record_id = data.pop("id", None)

        async with self._session("save") as session:
            if record_id is not None and self.is_valid_id(record_id):
                instance = await session.get(self.model_class(), record_id)
                if instance is not None:
                    # UPDATE - 기존 레코드 부분 업데이트
                    return await self._update_partial(session, instance, data)
            # INSERT - 새 레코드 생성
            return await self._create_new(session, data)

    async def save_bulk(self, data_list: List[Union[T, Dict[str, Any]]]) -> List[T]:
        """여러 엔티티를 한 번에 저장"""
        async with self._session("save_bulk") as session:
            # 딕셔너리를 모델 인스턴스로 변환
            instances = []
            for data in data_list:
                data_copy = data.model_dump() if isinstance(data, SQLModel) else dict(data)
                data_copy.pop("id", None)  # id가 있으면 제거 (자동 생성)
                instances.append(self.model_class()(**data_copy))

            session.add_all(instances)
            await session.commit()

            for instance in instances:
                await session.refresh(instance)

        return instances

    async def _create_new(self, session: AsyncSession, data: Dict[str, Any]) -> T:
        """새 레코드 생성"""
        instance = self.model_class()(**data)

        session.add(instance)
        await session.commit()
        await session.refresh(instance)
        return instance

    async def _update_partial(self, session: AsyncSession, instance: T, data: Dict[str, Any]) -> T:
        """기존 레코드 부분 업데이트"""
        # 빈 데이터가 아닌 경우에만 업데이트
        if data:
            for field, value in data.items():
                setattr(instance, field, value)
            await session.commit()
            await session.refresh(instance)
        return instance

    async def find_by_id(self, id: int) -> Optional[T]:
        """ID로 레코드 조회"""
        if not self.is_valid_id(id):
            return None
        async with self._session("find_by_id") as session:
            return await session.get(self.model_class(), id)

    async def find_all(self) -> List[T]:
        """모든 레코드 조회 (순서 보장 없음)"""
        async with self._session("find_all") as session:
            result = await session.execute(select(self.model_class()))
            return list(result.scalars().all())

    async def exists_by_id(self, id: int) -> bool:
        """ID에 해당하는 레코드 존재 여부"""
        if not self.is_valid_id(id):
            return False
        model = self.model_class()
        async with self._session("exists_by_id") as session:
            result = await session.execute(
                select(model.id).where(model.id == id).limit(1)
            )
            return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        """전체 레코드 수"""
        async with self._session("count") as session:
            result = await session.execute(
                select(func.count()).select_from(self.model_class())
            )
            return result.scalar_one()

    async def delete_by_id(self, id: int) -> None:
        """ID로 레코드 삭제 (없는 ID여도 오류 없음)"""
        if not self.is_valid_id(id):
            return
        model = self.model_class()
        async with self._session("delete_by_id") as session:
            await session.execute(delete(model).where(model.id == id))
            await session.commit()

    async def delete_all(self) -> None:
        """모든 레코드 삭제"""
        async with self._session("delete_all") as session:
            await session.execute(delete(self.model_class()))
            await session.commit()
