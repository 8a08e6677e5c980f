"""
百度人脸识别客户端
用于调用随机校验码接口和人脸搜索V3接口
"""
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any

import httpx

from faceform.app.exceptions import UpstreamAPIError
from faceform.infrastructure.external.token_cache import FaceTokenCache

logger = logging.getLogger(__name__)

# 质量控制：普通
QUALITY_CONTROL = "NORMAL"
# 活体控制：低
LIVENESS_CONTROL = "LOW"
# AccessToken 无效或过期的错误码
TOKEN_INVALID_ERROR_CODES = (110, 111)


@dataclass
class FaceSearchResult:
    """人脸搜索结果"""
    matched: bool
    # 得分最高的候选人（未达阈值时也返回，调用方需检查 matched）
    external_user_id: Optional[str] = None
    score: Optional[float] = None


class BaiduFaceClient:
    """百度人脸识别客户端"""

    def __init__(
        self,
        token_cache: FaceTokenCache,
        http_client: httpx.AsyncClient,
        session_code_url: str,
        search_url: str,
        match_threshold: float = 80.0,
    ):
        """
        初始化人脸识别客户端

        Args:
            token_cache: AccessToken 缓存
            http_client: 共享的 httpx 异步客户端
            session_code_url: 随机校验码接口地址
            search_url: 人脸搜索V3接口地址
            match_threshold: 相似度阈值（得分大于等于阈值视为匹配）
        """
        self.token_cache = token_cache
        self._http_client = http_client
        self.session_code_url = session_code_url
        self.search_url = search_url
        self.match_threshold = match_threshold

    async def _post(self, url: str, payload: Dict[str, Any], error_prefix: str) -> Dict[str, Any]:
        access_token = await self.token_cache.get_token()
        try:
            response = await self._http_client.post(
                url,
                params={"access_token": access_token},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[百度人脸] 请求失败: url={url}, error={e}")
            raise UpstreamAPIError(f"{error_prefix}：{e}") from e

        if not isinstance(data, dict) or data.get("error_code") != 0:
            error_msg = data.get("error_msg") if isinstance(data, dict) else data
            logger.warning(
                f"[百度人脸] 接口返回错误: url={url}, "
                f"error_code={data.get('error_code') if isinstance(data, dict) else None}, error_msg={error_msg}"
            )
            if isinstance(data, dict) and data.get("error_code") in TOKEN_INVALID_ERROR_CODES:
                # 下次请求重新获取 Token
                self.token_cache.invalidate()
            raise UpstreamAPIError(f"{error_prefix}：{error_msg}")
        return data

    async def issue_verification_code(self) -> str:
        """
        获取随机校验码（活体检测前置校验）

        Returns:
            str: 随机校验码

        Raises:
            UpstreamAPIError: 接口返回非零错误码
        """
        data = await self._post(self.session_code_url, {}, "随机校验码获取失败")
        result = data.get("result")
        session_code = result.get("session_code") if isinstance(result, dict) else None
        if not session_code:
            raise UpstreamAPIError("随机校验码获取失败：返回缺少 session_code")
        return session_code

    async def search_face(self, image_base64: str, group_id: str) -> FaceSearchResult:
        """
        人脸搜索验证

        Args:
            image_base64: 人脸图片Base64编码（不含前缀）
            group_id: 用户组（administrator/user）

        Returns:
            FaceSearchResult: 搜索结果

        Raises:
            UpstreamAPIError: 接口返回非零错误码
        """
        data = await self._post(
            self.search_url,
            {
                "image": image_base64,
                "image_type": "BASE64",
                "group_id_list": group_id,
                "quality_control": QUALITY_CONTROL,
                "liveness_control": LIVENESS_CONTROL,
            },
            "人脸验证失败",
        )

        user_list = (data.get("result") or {}).get("user_list") or []
        if not user_list:
            logger.info(f"[百度人脸] 未搜索到候选人: group_id={group_id}")
            return FaceSearchResult(matched=False)

        top = user_list[0]
        score = float(top.get("score", 0))
        matched = score >= self.match_threshold
        logger.info(
            f"[百度人脸] 搜索完成: group_id={group_id}, user_id={top.get('user_id')}, "
            f"score={score}, matched={matched}"
        )
        return FaceSearchResult(matched=matched, external_user_id=top.get("user_id"), score=score)
