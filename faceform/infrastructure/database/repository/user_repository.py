"""
用户仓储实现
"""
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from faceform.infrastructure.database.repository.base import BaseRepository
from faceform.infrastructure.database.models.user import User


class UserRepository(BaseRepository[User]):
    """用户仓储类"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, User)

    async def get_by_face_user_id(self, face_user_id: str) -> Optional[User]:
        """
        根据百度人脸库用户ID查询系统用户

        Args:
            face_user_id: 百度人脸库用户ID

        Returns:
            用户实例或None
        """
        result = await self.session.execute(
            select(User).where(User.face_user_id == face_user_id)
        )
        return result.scalar_one_or_none()

    async def upsert_binding(self, face_user_id: str, user_group: str) -> User:
        """
        绑定人脸库用户到系统账号（存在则更新用户组，不存在则创建）

        Args:
            face_user_id: 百度人脸库用户ID
            user_group: 用户组

        Returns:
            User: 创建或更新后的用户
        """
        existing = await self.get_by_face_user_id(face_user_id)
        if existing:
            existing.user_group = user_group
            await self.session.flush()
            return existing
        return await self.create(face_user_id=face_user_id, user_group=user_group)
