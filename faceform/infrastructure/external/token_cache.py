"""
百度 AIP AccessToken 缓存

AccessToken 有效期约30天，提前5分钟视为过期并重新获取。
进程内仅创建一个实例，由人脸客户端持有。
"""
import asyncio
import logging
import time
from typing import Callable, Optional

import httpx

from faceform.app.exceptions import UpstreamAuthError

logger = logging.getLogger(__name__)

# 提前刷新余量（秒）
TOKEN_REFRESH_MARGIN = 300


class FaceTokenCache:
    """AccessToken 缓存（过期或不存在时刷新，刷新过程单飞）"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        client_id: Optional[str],
        client_secret: Optional[str],
        token_url: str,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        初始化 Token 缓存

        Args:
            http_client: 共享的 httpx 异步客户端
            client_id: 百度应用 API Key
            client_secret: 百度应用 Secret Key
            token_url: OAuth Token 接口地址
            clock: 单调时钟（秒），便于测试注入
        """
        self._http_client = http_client
        self._client_id = client_id
        self._client_secret = client_secret
        self._token_url = token_url
        self._clock = clock
        self._token: Optional[str] = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    @property
    def expires_at(self) -> float:
        return self._expires_at

    def _is_valid(self) -> bool:
        return bool(self._token) and self._clock() < self._expires_at

    async def get_token(self) -> str:
        """
        获取有效的 AccessToken

        Returns:
            str: AccessToken

        Raises:
            UpstreamAuthError: Token 接口调用失败或返回格式异常
        """
        if self._is_valid():
            return self._token

        async with self._lock:
            # 等锁期间可能已被其他请求刷新
            if self._is_valid():
                return self._token
            await self._refresh()
            return self._token

    def invalidate(self) -> None:
        """丢弃缓存的 Token，下次调用时重新获取"""
        self._token = None
        self._expires_at = 0.0

    async def _refresh(self) -> None:
        if not self._client_id or not self._client_secret:
            raise UpstreamAuthError("人脸识别 AccessToken 获取失败：请配置 FACE_API_KEY 和 FACE_SECRET_KEY")

        now = self._clock()
        try:
            response = await self._http_client.get(
                self._token_url,
                params={
                    "grant_type": "client_credentials",
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                },
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[AccessToken] 请求失败: {e}")
            raise UpstreamAuthError(f"人脸识别 AccessToken 获取失败：{e}") from e

        if not isinstance(data, dict):
            raise UpstreamAuthError(f"人脸识别 AccessToken 获取失败：返回格式异常 {data!r}")

        access_token = data.get("access_token")
        expires_in = data.get("expires_in")
        if not access_token or not isinstance(expires_in, (int, float)):
            detail = data.get("error_description") or data.get("error") or data
            logger.error(f"[AccessToken] 返回异常: {detail}")
            raise UpstreamAuthError(f"人脸识别 AccessToken 获取失败：{detail}")

        if expires_in <= TOKEN_REFRESH_MARGIN:
            logger.error(f"[AccessToken] 有效期过短: expires_in={expires_in}")
            raise UpstreamAuthError(f"人脸识别 AccessToken 获取失败：有效期过短 expires_in={expires_in}")

        self._token = access_token
        self._expires_at = now + (expires_in - TOKEN_REFRESH_MARGIN)
        logger.info(f"[AccessToken] 刷新成功，有效期 {expires_in}s（提前 {TOKEN_REFRESH_MARGIN}s 刷新）")
