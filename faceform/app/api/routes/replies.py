"""
回复路由
"""
import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from faceform.app.api.dependencies import get_async_session, get_reply_generator
from faceform.app.api.schemas.common import SuccessResponse
from faceform.app.api.schemas.reply import (
    ReplyGenerateRequest,
    ReplyGenerateResponse,
    ReplySubmitRequest,
)
from faceform.infrastructure.database.repository.form_repository import FormRepository
from faceform.infrastructure.database.repository.reply_repository import ReplyRepository
from faceform.infrastructure.llm.reply_generator import QwenReplyGenerator

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/reply/generate", response_model=ReplyGenerateResponse)
async def generate_reply(
    data: ReplyGenerateRequest,
    generator: QwenReplyGenerator = Depends(get_reply_generator)
) -> ReplyGenerateResponse:
    """
    生成智能回复（管理员）

    Args:
        data: 表单内容
        generator: 回复生成器（依赖注入）

    Returns:
        回复草稿
    """
    try:
        reply = await generator.generate_reply(data.form_content)
        return ReplyGenerateResponse(reply=reply)
    except Exception as e:
        logger.error(f"生成智能回复失败: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/reply/submit", response_model=SuccessResponse)
async def submit_reply(
    data: ReplySubmitRequest,
    session: AsyncSession = Depends(get_async_session)
) -> SuccessResponse:
    """
    提交回复（管理员）

    插入回复与更新表单状态在同一事务内完成，任一步失败整体回滚

    Args:
        data: 回复数据
        session: 数据库会话（依赖注入）

    Returns:
        提交结果
    """
    try:
        reply_repo = ReplyRepository(session)
        form_repo = FormRepository(session)

        reply = await reply_repo.create(
            form_id=data.form_id,
            admin_id=data.admin_id,
            content=data.content
        )
        await form_repo.mark_replied(data.form_id)
        await session.commit()

        logger.info(f"回复提交成功: reply_id={reply.id}, form_id={data.form_id}, admin_id={data.admin_id}")
        return SuccessResponse()
    except Exception as e:
        await session.rollback()
        logger.error(f"提交回复失败: form_id={data.form_id}, error={e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
