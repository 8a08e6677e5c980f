"""
回复仓储实现
"""
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from faceform.infrastructure.database.repository.base import BaseRepository
from faceform.infrastructure.database.models.reply import Reply


class ReplyRepository(BaseRepository[Reply]):
    """回复仓储类"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Reply)

    async def get_by_form_id(self, form_id: int) -> List[Reply]:
        """查询表单下的全部回复（按回复先后）"""
        result = await self.session.execute(
            select(Reply).where(Reply.form_id == form_id).order_by(Reply.id)
        )
        return list(result.scalars().all())
