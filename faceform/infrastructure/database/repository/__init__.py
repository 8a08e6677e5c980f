"""
仓储模式实现
"""
from faceform.infrastructure.database.repository.base import BaseRepository
from faceform.infrastructure.database.repository.user_repository import UserRepository
from faceform.infrastructure.database.repository.form_repository import FormRepository, generate_form_no
from faceform.infrastructure.database.repository.reply_repository import ReplyRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "FormRepository",
    "ReplyRepository",
    "generate_form_no",
]
