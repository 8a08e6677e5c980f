"""
基础仓储类
封装通用的数据库操作
"""
from typing import Generic, TypeVar, Type, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from faceform.infrastructure.database.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """基础仓储类"""

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        """
        初始化仓储

        Args:
            session: 数据库会话
            model: ORM 模型类
        """
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        根据 ID 查询

        Args:
            id: 记录ID

        Returns:
            模型实例或None
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs) -> ModelType:
        """
        创建记录（flush 获取自增ID，不提交事务）

        Args:
            **kwargs: 模型字段键值对

        Returns:
            创建的模型实例
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        return instance
