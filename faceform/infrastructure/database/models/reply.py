"""
回复模型
"""
from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func as sql_func

from faceform.infrastructure.database.base import Base


class Reply(Base):
    """管理员回复模型"""

    __tablename__ = "replies"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="回复ID")
    # 不建外键，删除表单时不级联处理回复
    form_id = Column(Integer, nullable=False, index=True, comment="表单ID")
    admin_id = Column(Integer, nullable=False, comment="回复管理员ID")
    content = Column(Text, nullable=False, comment="回复内容")
    create_time = Column(
        DateTime,
        nullable=False,
        server_default=sql_func.now(),
        comment="回复时间"
    )

    def __repr__(self):
        return f"<Reply(id={self.id}, form_id={self.form_id}, admin_id={self.admin_id})>"
