import logging
import os

from dotenv import load_dotenv
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

'''
비동기 데이터베이스를 설정합니다.
'''
# .env 파일 로드
load_dotenv()

logger = logging.getLogger(__name__)

# PostgreSQL 설정
PG_HOST = os.getenv("PG_HOST")
PG_PORT = os.getenv("PG_PORT", "5432")
PG_USER = os.getenv("PG_USER")
PG_PASSWORD = os.getenv("PG_PASSWORD")
PG_DATABASE = os.getenv("PG_DATABASE")

DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"  # SQL 쿼리 로그 출력 (개발용)
DB_CREATE_TABLES = os.getenv("DB_CREATE_TABLES", "true").lower() == "true"

SQLITE_DATABASE_URL = "sqlite+aiosqlite:///./ideas.db"


def resolve_database_url() -> str:
    """
    환경변수로부터 비동기 DB 연결 URL을 결정합니다.
    DATABASE_URL > PG_* > 로컬 SQLite 순서로 사용합니다.
    """
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    if not PG_HOST:
        return SQLITE_DATABASE_URL

    # 로컬 개발환경인지 확인 (localhost나 127.0.0.1이면 SSL 비활성화)
    if PG_HOST in ['localhost', '127.0.0.1']:
        return f"postgresql+asyncpg://{PG_USER}:{PG_PASSWORD}@{PG_HOST}:{PG_PORT}/{PG_DATABASE}"
    # RDS 등 프로덕션 환경에서는 SSL 사용
    return f"postgresql+asyncpg://{PG_USER}:{PG_PASSWORD}@{PG_HOST}:{PG_PORT}/{PG_DATABASE}?ssl=require"


def create_engine(database_url: str = None, echo: bool = DB_ECHO) -> AsyncEngine:
    """비동기 엔진 생성"""
    database_url = database_url or resolve_database_url()
    options = {
        "echo": echo,
        "pool_pre_ping": True,  # 연결 상태 체크
    }
    if not database_url.startswith("sqlite"):
        options["pool_recycle"] = 300  # 연결 재사용 시간 (5분)
    return create_async_engine(database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """비동기 세션 팩토리"""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """등록된 SQLModel 테이블 중 없는 테이블을 생성합니다."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("🗄️ 테이블 생성(또는 확인) 완료")


# 연결 테스트 함수
async def check_connection(session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """비동기 DB 연결 테스트"""
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
            dialect = session.bind.dialect.name
        logger.info(f"✅ 데이터베이스 연결 성공! ({dialect})")
        return True
    except Exception as e:
        logger.error(f"❌ 데이터베이스 연결 실패: {e!r}")
        return False
