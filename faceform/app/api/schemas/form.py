"""
表单相关Schema
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field

from faceform.app.api.schemas.common import ApiModel


class FormSubmitRequest(ApiModel):
    """提交表单请求"""
    title: str = Field(min_length=1, max_length=255, description="标题")
    content: str = Field(min_length=1, description="内容")
    category: Optional[str] = Field(None, max_length=64, description="分类")
    user_id: int = Field(alias="userId", description="提交用户ID")
    ip_address: Optional[str] = Field(None, alias="ipAddress", max_length=64, description="提交IP（不传则取客户端地址）")
    browser_info: Optional[str] = Field(None, alias="browserInfo", max_length=512, description="浏览器信息（不传则取User-Agent）")


class FormSubmitResponse(ApiModel):
    """提交表单响应"""
    success: bool = Field(True, description="是否成功")
    form_id: int = Field(alias="formId", description="表单ID")
    form_no: str = Field(alias="formNo", description="表单编号")


class FormItem(BaseModel):
    """表单列表项（字段与数据库列一致，附带最新回复）"""
    id: int
    form_no: str
    user_id: int
    title: str
    content: str
    category: Optional[str] = None
    ip_address: Optional[str] = None
    browser_info: Optional[str] = None
    status: str
    create_time: Optional[datetime] = None
    reply_content: Optional[str] = None
    reply_time: Optional[datetime] = None


class AdminFormItem(FormItem):
    """管理员表单列表项（附带提交人人脸库ID）"""
    face_user_id: Optional[str] = None


class FormListResponse(ApiModel):
    """用户表单列表响应"""
    success: bool = Field(True, description="是否成功")
    data: List[FormItem] = Field(default_factory=list, description="表单列表")


class AdminFormListResponse(ApiModel):
    """管理员表单列表响应"""
    success: bool = Field(True, description="是否成功")
    data: List[AdminFormItem] = Field(default_factory=list, description="表单列表")
