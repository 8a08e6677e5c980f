"""
用户模型
"""
from sqlalchemy import Column, Integer, String

from faceform.infrastructure.database.base import Base


class User(Base):
    """用户模型（系统账号与百度人脸库用户的绑定关系）"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="用户ID")
    face_user_id = Column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
        comment="百度人脸库用户ID"
    )
    user_group = Column(String(64), nullable=False, comment="用户组（administrator/user）")

    def __repr__(self):
        return f"<User(id={self.id}, face_user_id={self.face_user_id}, user_group={self.user_group})>"
