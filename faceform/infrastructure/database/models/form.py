"""
表单模型
"""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func as sql_func

from faceform.infrastructure.database.base import Base


class FormStatus(str, enum.Enum):
    """表单状态枚举"""
    OPEN = "open"  # 待回复
    REPLIED = "replied"  # 已回复


class Form(Base):
    """表单模型"""

    __tablename__ = "forms"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="表单ID")
    form_no = Column(String(32), nullable=False, unique=True, comment="表单编号（FORM-YYYYMMDD-NNN）")
    user_id = Column(Integer, nullable=False, index=True, comment="提交用户ID")
    title = Column(String(255), nullable=False, comment="标题")
    content = Column(Text, nullable=False, comment="内容")
    category = Column(String(64), nullable=True, comment="分类")
    ip_address = Column(String(64), nullable=True, comment="提交IP")
    browser_info = Column(String(512), nullable=True, comment="浏览器信息")
    status = Column(
        String(16),
        nullable=False,
        default=FormStatus.OPEN.value,
        server_default=FormStatus.OPEN.value,
        comment="表单状态（open/replied）"
    )
    create_time = Column(
        DateTime,
        nullable=False,
        server_default=sql_func.now(),
        index=True,
        comment="创建时间"
    )

    def __repr__(self):
        return f"<Form(id={self.id}, form_no={self.form_no}, status={self.status})>"
