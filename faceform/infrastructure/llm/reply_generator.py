"""
通义千问智能回复客户端
调用阿里云 DashScope 应用接口，为用户表单生成回复草稿
"""
import json
import logging
import random
from typing import Optional

import httpx

from faceform.app.exceptions import ReplyGenerationError
from faceform.infrastructure.llm.prompts import build_reply_messages

logger = logging.getLogger(__name__)

# 随机种子上限（每次调用使用不同种子，输出不固定）
SEED_UPPER_BOUND = 10000


class QwenReplyGenerator:
    """通义千问回复生成器"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str],
        app_id: Optional[str],
        base_url: str,
        model: str = "qwen-plus",
        temperature: float = 0.7,
        max_tokens: int = 500,
        rng: Optional[random.Random] = None,
    ):
        """
        初始化回复生成器

        Args:
            http_client: 共享的 httpx 异步客户端
            api_key: DashScope API Key
            app_id: DashScope 应用ID
            base_url: 文本生成接口地址
            model: 模型名称
            temperature: 温度参数
            max_tokens: 最大生成长度
            rng: 随机种子生成器
        """
        self._http_client = http_client
        self.api_key = api_key
        self.app_id = app_id
        self.base_url = base_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._rng = rng or random.Random()

    def _build_payload(self, form_content: str) -> dict:
        return {
            "model": self.model,
            "input": {"messages": build_reply_messages(form_content)},
            "parameters": {
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
                "seed": self._rng.randrange(SEED_UPPER_BOUND),
            },
        }

    async def generate_reply(self, form_content: str) -> str:
        """
        生成智能回复

        Args:
            form_content: 用户提交的表单内容

        Returns:
            str: 回复文本

        Raises:
            ReplyGenerationError: 未配置凭证、请求失败或返回缺少 output.text
        """
        logger.info(
            f"[通义千问] API_KEY配置: {'已设置' if self.api_key else '未设置'}, "
            f"APP_ID配置: {'已设置' if self.app_id else '未设置'}"
        )
        try:
            if not self.api_key or not self.app_id:
                raise ReplyGenerationError("请配置阿里云通义千问的API_KEY和APP_ID")

            response = await self._http_client.post(
                self.base_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                    "X-DashScope-Application": self.app_id,
                },
                json=self._build_payload(form_content),
            )
            data = response.json()

            output = data.get("output") if isinstance(data, dict) else None
            text = output.get("text") if isinstance(output, dict) else None
            if not text:
                raise ReplyGenerationError(f"API返回异常: {json.dumps(data, ensure_ascii=False)}")

            logger.info(f"[通义千问] 回复生成成功: length={len(text)}")
            return text
        except (ReplyGenerationError, httpx.HTTPError, ValueError) as e:
            logger.error(f"[通义千问] 调用失败: {e}")
            raise ReplyGenerationError(f"智能回复生成失败：{e}") from e
