"""
表单仓储实现
"""
import random
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func, desc

from faceform.infrastructure.database.repository.base import BaseRepository
from faceform.infrastructure.database.models.form import Form, FormStatus
from faceform.infrastructure.database.models.reply import Reply
from faceform.infrastructure.database.models.user import User

# 表单列表返回的字段（与 forms 表列一致）
FORM_FIELDS = (
    "id",
    "form_no",
    "user_id",
    "title",
    "content",
    "category",
    "ip_address",
    "browser_info",
    "status",
    "create_time",
)


def generate_form_no(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """
    生成表单编号：FORM-YYYYMMDD-NNN（日期按 UTC）

    NNN 为 000-999 随机数，不做碰撞检查（form_no 列唯一约束兜底）

    Args:
        now: 当前时间（默认取 UTC 时间）
        rng: 随机数生成器（默认使用 random 模块）

    Returns:
        str: 表单编号
    """
    now = now or datetime.now(timezone.utc)
    suffix = (rng or random).randint(0, 999)
    return f"FORM-{now.strftime('%Y%m%d')}-{suffix:03d}"


def _latest_reply_subquery():
    """每个表单最新一条回复的ID（多次回复时以最后一次为准）"""
    return (
        select(Reply.form_id, func.max(Reply.id).label("reply_id"))
        .group_by(Reply.form_id)
        .subquery()
    )


def _form_to_dict(form: Form) -> Dict[str, Any]:
    return {field: getattr(form, field) for field in FORM_FIELDS}


class FormRepository(BaseRepository[Form]):
    """表单仓储类"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Form)

    async def create_form(
        self,
        user_id: int,
        title: str,
        content: str,
        category: Optional[str] = None,
        ip_address: Optional[str] = None,
        browser_info: Optional[str] = None,
        form_no: Optional[str] = None,
    ) -> Form:
        """
        创建表单（不提交事务）

        Args:
            user_id: 提交用户ID
            title: 标题
            content: 内容
            category: 分类
            ip_address: 提交IP
            browser_info: 浏览器信息
            form_no: 表单编号，不传则自动生成

        Returns:
            创建的表单实例
        """
        return await self.create(
            form_no=form_no or generate_form_no(),
            user_id=user_id,
            title=title,
            content=content,
            category=category,
            ip_address=ip_address,
            browser_info=browser_info,
            status=FormStatus.OPEN.value,
        )

    async def list_by_user(self, user_id: int) -> List[Dict[str, Any]]:
        """
        查询用户的表单列表（附带最新回复），按创建时间倒序

        Args:
            user_id: 用户ID

        Returns:
            表单字典列表，额外包含 reply_content、reply_time
        """
        latest = _latest_reply_subquery()
        result = await self.session.execute(
            select(
                Form,
                Reply.content.label("reply_content"),
                Reply.create_time.label("reply_time"),
            )
            .outerjoin(latest, latest.c.form_id == Form.id)
            .outerjoin(Reply, Reply.id == latest.c.reply_id)
            .where(Form.user_id == user_id)
            .order_by(desc(Form.create_time), desc(Form.id))
        )
        return [
            {
                **_form_to_dict(row.Form),
                "reply_content": row.reply_content,
                "reply_time": row.reply_time,
            }
            for row in result.all()
        ]

    async def list_all_with_user(self) -> List[Dict[str, Any]]:
        """
        查询全部表单（附带最新回复和提交人人脸库ID），按创建时间倒序

        Returns:
            表单字典列表，额外包含 reply_content、reply_time、face_user_id
        """
        latest = _latest_reply_subquery()
        result = await self.session.execute(
            select(
                Form,
                Reply.content.label("reply_content"),
                Reply.create_time.label("reply_time"),
                User.face_user_id.label("face_user_id"),
            )
            .outerjoin(latest, latest.c.form_id == Form.id)
            .outerjoin(Reply, Reply.id == latest.c.reply_id)
            .outerjoin(User, User.id == Form.user_id)
            .order_by(desc(Form.create_time), desc(Form.id))
        )
        return [
            {
                **_form_to_dict(row.Form),
                "reply_content": row.reply_content,
                "reply_time": row.reply_time,
                "face_user_id": row.face_user_id,
            }
            for row in result.all()
        ]

    async def mark_replied(self, form_id: int) -> int:
        """
        将表单状态更新为已回复（不提交事务）

        Args:
            form_id: 表单ID

        Returns:
            受影响行数
        """
        result = await self.session.execute(
            update(Form)
            .where(Form.id == form_id)
            .values(status=FormStatus.REPLIED.value)
        )
        return result.rowcount

    async def delete_by_id(self, form_id: int) -> int:
        """
        删除表单（不处理关联回复，不提交事务）

        Args:
            form_id: 表单ID

        Returns:
            受影响行数
        """
        result = await self.session.execute(
            delete(Form).where(Form.id == form_id)
        )
        return result.rowcount
