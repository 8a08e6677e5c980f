"""
数据库模型模块
"""
from faceform.infrastructure.database.models.user import User
from faceform.infrastructure.database.models.form import Form, FormStatus
from faceform.infrastructure.database.models.reply import Reply

__all__ = [
    "User",
    "Form",
    "FormStatus",
    "Reply",
]
