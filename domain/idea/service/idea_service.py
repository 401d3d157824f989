import logging
from typing import List, Optional

from domain.idea.dto.idea_dto import IdeaRequest, IdeaUpdateRequest
from domain.idea.model.idea import Idea
from domain.idea.repository.idea_repository import IdeaRepository

logger = logging.getLogger(__name__)


class IdeaService:
    def __init__(self, idea_repository: IdeaRepository):
        self.idea_repository = idea_repository

    async def get_ideas(self) -> List[Idea]:
        return await self.idea_repository.find_all()

    async def get_idea(self, idea_id: int) -> Optional[Idea]:
        return await self.idea_repository.find_by_id(idea_id)

    async def create_idea(self, request: IdeaRequest) -> Idea:
        idea = await self.idea_repository.save(request.model_dump())
        logger.info(f"💡 아이디어 생성 완료 - Idea ID: {idea.id}")
        return idea

    async def update_idea(self, idea_id: int, request: IdeaUpdateRequest) -> Optional[Idea]:
        """
        아이디어 부분 수정 : 요청에 포함된 필드만 반영
        존재하지 않는 아이디어면 None 반환
        """
        if not await self.idea_repository.exists_by_id(idea_id):
            logger.info(f"수정할 아이디어 없음 - Idea ID: {idea_id}")
            return None

        update_data = request.model_dump(exclude_unset=True, exclude_none=True)
        update_data["id"] = idea_id
        idea = await self.idea_repository.save(update_data)
        logger.info(f"✏️ 아이디어 수정 완료 - Idea ID: {idea_id}")
        return idea

    async def delete_idea(self, idea_id: int) -> None:
        await self.idea_repository.delete_by_id(idea_id)
        logger.info(f"🗑️ 아이디어 삭제 완료 - Idea ID: {idea_id}")
