"""
人脸识别相关Schema
"""
from typing import Optional
from pydantic import Field

from faceform.app.api.schemas.common import ApiModel


class SessionCodeResponse(ApiModel):
    """随机校验码响应"""
    success: bool = Field(True, description="是否成功")
    session_code: str = Field(alias="sessionCode", description="随机校验码")


class FaceVerifyRequest(ApiModel):
    """人脸验证请求"""
    image_base64: str = Field(alias="imageBase64", min_length=1, description="人脸图片Base64编码（不含前缀）")
    user_type: str = Field("user", alias="userType", description="用户类型（admin/user）")


class FaceVerifyResponse(ApiModel):
    """人脸验证响应"""
    success: bool = Field(description="是否验证通过")
    user_id: Optional[int] = Field(None, alias="userId", description="系统用户ID")
    user_group: Optional[str] = Field(None, alias="userGroup", description="用户组")
    message: Optional[str] = Field(None, description="验证失败原因")
