"""
第三方接口客户端
"""
from faceform.infrastructure.external.token_cache import FaceTokenCache, TOKEN_REFRESH_MARGIN
from faceform.infrastructure.external.baidu_face import BaiduFaceClient, FaceSearchResult

__all__ = [
    "FaceTokenCache",
    "TOKEN_REFRESH_MARGIN",
    "BaiduFaceClient",
    "FaceSearchResult",
]
