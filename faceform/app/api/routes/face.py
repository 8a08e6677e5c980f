"""
人脸识别路由
"""
import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from faceform.app.api.dependencies import get_async_session, get_face_client
from faceform.app.api.schemas.face import (
    SessionCodeResponse,
    FaceVerifyRequest,
    FaceVerifyResponse,
)
from faceform.app.config import settings
from faceform.infrastructure.database.repository.user_repository import UserRepository
from faceform.infrastructure.external.baidu_face import BaiduFaceClient

logger = logging.getLogger(__name__)
router = APIRouter()

FACE_NOT_MATCHED_MESSAGE = "人脸不匹配或未注册"
USER_NOT_LINKED_MESSAGE = "用户未关联系统账号"


def resolve_user_group(user_type: str) -> str:
    """根据用户类型选择百度人脸库用户组"""
    if user_type == "admin":
        return settings.FACE_USER_GROUP_ADMIN
    return settings.FACE_USER_GROUP_USER


@router.get("/face/session-code", response_model=SessionCodeResponse)
async def get_session_code(
    face_client: BaiduFaceClient = Depends(get_face_client)
) -> SessionCodeResponse:
    """
    获取随机校验码（用于活体检测前置校验）

    Args:
        face_client: 人脸识别客户端（依赖注入）

    Returns:
        随机校验码响应
    """
    try:
        session_code = await face_client.issue_verification_code()
        return SessionCodeResponse(session_code=session_code)
    except Exception as e:
        logger.error(f"获取随机校验码失败: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/face/verify", response_model=FaceVerifyResponse, response_model_exclude_none=True)
async def verify_face(
    data: FaceVerifyRequest,
    face_client: BaiduFaceClient = Depends(get_face_client),
    session: AsyncSession = Depends(get_async_session)
) -> FaceVerifyResponse:
    """
    人脸识别验证（支持管理员/普通用户）

    人脸不匹配、用户未绑定属于业务失败，返回 200 + success=false

    Args:
        data: 验证请求数据
        face_client: 人脸识别客户端（依赖注入）
        session: 数据库会话（依赖注入）

    Returns:
        验证结果
    """
    try:
        user_group = resolve_user_group(data.user_type)
        result = await face_client.search_face(data.image_base64, user_group)
        if not result.matched:
            return FaceVerifyResponse(success=False, message=FACE_NOT_MATCHED_MESSAGE)

        repo = UserRepository(session)
        user = await repo.get_by_face_user_id(result.external_user_id)
        if user is None:
            logger.info(f"人脸已匹配但未关联系统账号: face_user_id={result.external_user_id}")
            return FaceVerifyResponse(success=False, message=USER_NOT_LINKED_MESSAGE)

        logger.info(f"人脸验证通过: user_id={user.id}, user_group={user.user_group}")
        return FaceVerifyResponse(success=True, user_id=user.id, user_group=user.user_group)
    except Exception as e:
        logger.error(f"人脸验证失败: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
