import logging
from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse

from core.database.repository.crud_repository import MAX_ID
from domain.idea.dto.idea_dto import IdeaRequest, IdeaResponse, IdeaUpdateRequest
from domain.idea.service.idea_service import IdeaService
from response.api_response import ApiResponse
from response.code.status.error_status import ErrorStatus
from response.code.status.success_status import SuccessStatus

logger = logging.getLogger(__name__)

# 저장소가 발급하는 id는 1 이상 BIGINT 범위
IdeaId = Annotated[int, Path(ge=1, le=MAX_ID)]


def _to_response(idea) -> dict:
    return IdeaResponse.model_validate(idea).model_dump()


def _idea_not_found() -> JSONResponse:
    return JSONResponse(
        status_code=ErrorStatus.IDEA_NOT_FOUND.http_status,
        content=ApiResponse.on_failure(ErrorStatus.IDEA_NOT_FOUND),
    )


def create_idea_router(idea_service: IdeaService) -> APIRouter:
    """
    아이디어 라우터를 생성합니다.
    parameters:
        idea_service: IdeaService - 라우터가 사용할 서비스 (명시적 주입)
    returns:
        APIRouter - /ideas 라우터
    """
    router = APIRouter(
        prefix="/ideas",
        tags=["ideas"]
    )

    # 아이디어 전체 조회
    @router.get("")
    async def get_ideas():
        ideas = await idea_service.get_ideas()
        return ApiResponse.on_success(SuccessStatus._OK, [_to_response(idea) for idea in ideas])

    # 아이디어 단건 조회
    @router.get("/{idea_id}")
    async def get_idea(idea_id: IdeaId):
        idea = await idea_service.get_idea(idea_id)
        if idea is None:
            return _idea_not_found()
        return ApiResponse.on_success(SuccessStatus._OK, _to_response(idea))

    # 아이디어 생성
    @router.post("")
    async def create_idea(request: IdeaRequest):
        idea = await idea_service.create_idea(request)
        return JSONResponse(
            status_code=SuccessStatus._IDEA_CREATED.http_status,
            content=ApiResponse.on_success(SuccessStatus._IDEA_CREATED, _to_response(idea)),
        )

    # 아이디어 부분 수정
    @router.patch("/{idea_id}")
    async def update_idea(idea_id: IdeaId, request: IdeaUpdateRequest):
        idea = await idea_service.update_idea(idea_id, request)
        if idea is None:
            return _idea_not_found()
        return ApiResponse.on_success(SuccessStatus._OK, _to_response(idea))

    # 아이디어 삭제 (없는 아이디어여도 성공)
    @router.delete("/{idea_id}")
    async def delete_idea(idea_id: IdeaId):
        await idea_service.delete_idea(idea_id)
        return ApiResponse.on_success(SuccessStatus._IDEA_DELETED)

    return router
