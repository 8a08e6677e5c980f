"""
路由依赖注入

外部客户端在应用启动时创建并挂载到 app.state，路由通过 Depends 获取
"""
from fastapi import Request

from faceform.infrastructure.database.connection import get_async_session
from faceform.infrastructure.external.baidu_face import BaiduFaceClient
from faceform.infrastructure.llm.reply_generator import QwenReplyGenerator

__all__ = ["get_async_session", "get_face_client", "get_reply_generator"]


def get_face_client(request: Request) -> BaiduFaceClient:
    """获取百度人脸识别客户端"""
    return request.app.state.face_client


def get_reply_generator(request: Request) -> QwenReplyGenerator:
    """获取通义千问回复生成器"""
    return request.app.state.reply_generator
