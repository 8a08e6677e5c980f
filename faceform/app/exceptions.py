"""
业务异常定义

外部接口错误统一向上抛出，由路由层转换为 HTTP 500 + 原始错误信息
"""


class FaceFormError(Exception):
    """服务异常基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamAuthError(FaceFormError):
    """获取第三方接口 AccessToken 失败"""


class UpstreamAPIError(FaceFormError):
    """第三方接口返回非零错误码或请求失败"""


class ReplyGenerationError(FaceFormError):
    """智能回复生成失败"""
