"""
通用Schema
"""
from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """接口模型基类（JSON 字段使用驼峰命名，同时允许按字段名构造）"""
    model_config = ConfigDict(populate_by_name=True)


class SuccessResponse(ApiModel):
    """仅包含 success 的响应"""
    success: bool = Field(True, description="是否成功")
