"""
表单路由
"""
import logging
from fastapi import APIRouter, HTTPException, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from faceform.app.api.dependencies import get_async_session
from faceform.app.api.schemas.common import SuccessResponse
from faceform.app.api.schemas.form import (
    FormSubmitRequest,
    FormSubmitResponse,
    FormItem,
    AdminFormItem,
    FormListResponse,
    AdminFormListResponse,
)
from faceform.infrastructure.database.repository.form_repository import FormRepository

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/form/submit", response_model=FormSubmitResponse)
async def submit_form(
    data: FormSubmitRequest,
    request: Request,
    session: AsyncSession = Depends(get_async_session)
) -> FormSubmitResponse:
    """
    提交表单（普通用户）

    Args:
        data: 表单数据
        request: FastAPI 请求对象（用于补全IP和浏览器信息）
        session: 数据库会话（依赖注入）

    Returns:
        表单ID和编号
    """
    try:
        repo = FormRepository(session)
        form = await repo.create_form(
            user_id=data.user_id,
            title=data.title,
            content=data.content,
            category=data.category,
            ip_address=data.ip_address or (request.client.host if request.client else None),
            browser_info=data.browser_info or request.headers.get("user-agent"),
        )
        await session.commit()
        logger.info(f"表单提交成功: form_id={form.id}, form_no={form.form_no}, user_id={data.user_id}")
        return FormSubmitResponse(form_id=form.id, form_no=form.form_no)
    except Exception as e:
        await session.rollback()
        logger.error(f"提交表单失败: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/forms/user/{user_id}", response_model=FormListResponse)
async def list_user_forms(
    user_id: int,
    session: AsyncSession = Depends(get_async_session)
) -> FormListResponse:
    """
    获取用户表单列表（普通用户）

    Args:
        user_id: 用户ID
        session: 数据库会话（依赖注入）

    Returns:
        表单列表（附带最新回复）
    """
    try:
        repo = FormRepository(session)
        forms = await repo.list_by_user(user_id)
        return FormListResponse(data=[FormItem(**form) for form in forms])
    except Exception as e:
        logger.error(f"查询用户表单失败: user_id={user_id}, error={e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/forms/admin", response_model=AdminFormListResponse)
async def list_all_forms(
    session: AsyncSession = Depends(get_async_session)
) -> AdminFormListResponse:
    """
    获取所有表单（管理员）

    Args:
        session: 数据库会话（依赖注入）

    Returns:
        表单列表（附带最新回复和提交人人脸库ID）
    """
    try:
        repo = FormRepository(session)
        forms = await repo.list_all_with_user()
        return AdminFormListResponse(data=[AdminFormItem(**form) for form in forms])
    except Exception as e:
        logger.error(f"查询全部表单失败: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/form/{form_id}", response_model=SuccessResponse)
async def delete_form(
    form_id: int,
    session: AsyncSession = Depends(get_async_session)
) -> SuccessResponse:
    """
    删除表单（管理员）

    表单不存在时同样返回成功；关联回复不做处理

    Args:
        form_id: 表单ID
        session: 数据库会话（依赖注入）

    Returns:
        删除结果
    """
    try:
        repo = FormRepository(session)
        deleted = await repo.delete_by_id(form_id)
        await session.commit()
        logger.info(f"删除表单: form_id={form_id}, deleted={deleted}")
        return SuccessResponse()
    except Exception as e:
        await session.rollback()
        logger.error(f"删除表单失败: form_id={form_id}, error={e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
