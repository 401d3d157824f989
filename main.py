import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.config.database_config import (
    DB_CREATE_TABLES,
    check_connection,
    create_engine,
    create_session_factory,
    create_tables,
)
from core.database.exceptions import StorageError
from domain.idea.controller.idea_controller import create_idea_router
from domain.idea.repository.idea_repository import IdeaRepository
from domain.idea.service.idea_service import IdeaService
from response.code.status.error_status import ErrorStatus
from response.code.status.success_status import SuccessStatus
from response.api_response import ApiResponse

'''
서버 시작 명령어: uvicorn main:create_app --factory --reload
'''

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(session_factory=None) -> FastAPI:
    """
    애플리케이션을 생성하고 저장소 -> 서비스 -> 라우터 순서로 명시적으로 연결합니다.
    session_factory를 넘기지 않으면 환경변수 설정으로 엔진을 만듭니다.
    """
    engine = None
    if session_factory is None:
        engine = create_engine()
        session_factory = create_session_factory(engine)

    app = FastAPI(title="Ideas API", version="1.0.0")

    idea_repository = IdeaRepository(session_factory)
    idea_service = IdeaService(idea_repository)

    # 라우터 등록
    app.include_router(create_idea_router(idea_service))

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(f"저장소 오류 ({request.method} {request.url.path}): {exc}")
        return JSONResponse(
            status_code=ErrorStatus.STORAGE_ERROR.http_status,
            content=ApiResponse.on_failure(ErrorStatus.STORAGE_ERROR),
        )

    @app.on_event("startup")
    async def on_startup():
        logger.info("🚀 서버 시작 중...")

        if engine is not None and DB_CREATE_TABLES:
            await create_tables(engine)

        if await check_connection(session_factory):
            logger.info("✅ DB에 연결 완료")
        else:
            logger.error("❌ DB 연결 실패")

    @app.on_event("shutdown")
    async def on_shutdown():
        logger.info("🛑 서버 종료 중...")

        if engine is not None:
            await engine.dispose()
            logger.info("✅ DB 엔진 정리 완료")

    @app.get("/health")
    async def health_check():
        """Docker 헬스체크용 엔드포인트"""
        return ApiResponse.on_success(SuccessStatus._OK, {"status": "UP"})

    return app

