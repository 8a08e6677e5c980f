"""
数据库模块
"""
from faceform.infrastructure.database.base import Base
from faceform.infrastructure.database.connection import (
    get_async_engine,
    get_session_factory,
    get_async_session,
)
from faceform.infrastructure.database import models  # 导入所有模型

__all__ = [
    "Base",
    "get_async_engine",
    "get_session_factory",
    "get_async_session",
]
