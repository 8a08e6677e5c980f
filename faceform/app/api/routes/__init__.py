"""
API路由模块
聚合所有子路由
"""
from fastapi import APIRouter

from faceform.app.api.routes.face import router as face_router
from faceform.app.api.routes.forms import router as forms_router
from faceform.app.api.routes.replies import router as replies_router

# 创建主路由
router = APIRouter()

# 注册子路由（统一添加 /api 前缀）
router.include_router(face_router, prefix="/api", tags=["人脸识别"])
router.include_router(forms_router, prefix="/api", tags=["表单"])
router.include_router(replies_router, prefix="/api", tags=["回复"])

__all__ = ["router"]
