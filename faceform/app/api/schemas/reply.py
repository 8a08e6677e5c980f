"""
回复相关Schema
"""
from pydantic import Field

from faceform.app.api.schemas.common import ApiModel


class ReplyGenerateRequest(ApiModel):
    """生成智能回复请求"""
    form_content: str = Field(alias="formContent", min_length=1, description="表单内容")


class ReplyGenerateResponse(ApiModel):
    """生成智能回复响应"""
    success: bool = Field(True, description="是否成功")
    reply: str = Field(description="回复草稿")


class ReplySubmitRequest(ApiModel):
    """提交回复请求"""
    form_id: int = Field(alias="formId", description="表单ID")
    admin_id: int = Field(alias="adminId", description="管理员用户ID")
    content: str = Field(min_length=1, description="回复内容")
