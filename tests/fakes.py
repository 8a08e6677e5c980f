"""
测试用的第三方接口模拟与时钟
"""
import json
from typing import Callable, Dict, Any, List

import httpx

TOKEN_URL = "https://aip.test/oauth/2.0/token"
SESSION_CODE_URL = "https://aip.test/rest/2.0/face/v1/faceliveness/sessioncode"
SEARCH_URL = "https://aip.test/rest/2.0/face/v3/search"
QWEN_URL = "https://dashscope.test/api/v1/services/aigc/text-generation/generation"


class FakeClock:
    """可手动推进的单调时钟"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """
    模拟百度人脸和通义千问接口

    按 URL 路由返回预设响应，并记录所有请求
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.token_payload: Dict[str, Any] = {"access_token": "token-1", "expires_in": 2592000}
        self.session_code_payload: Dict[str, Any] = {
            "error_code": 0,
            "error_msg": "SUCCESS",
            "result": {"session_code": "8293", "session_id": "S1"},
        }
        self.search_payload: Dict[str, Any] = {
            "error_code": 0,
            "error_msg": "SUCCESS",
            "result": {"user_list": []},
        }
        self.qwen_payload: Dict[str, Any] = {"output": {"text": "感谢您的提交，我们已收到您的表单。"}}

    def requests_to(self, url: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url).split("?")[0] == url]

    def set_candidates(self, *candidates: Dict[str, Any]) -> None:
        """设置人脸搜索返回的候选人列表"""
        self.search_payload = {
            "error_code": 0,
            "error_msg": "SUCCESS",
            "result": {"user_list": list(candidates)},
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url).split("?")[0]
        routes: Dict[str, Callable[[], Dict[str, Any]]] = {
            TOKEN_URL: lambda: self.token_payload,
            SESSION_CODE_URL: lambda: self.session_code_payload,
            SEARCH_URL: lambda: self.search_payload,
            QWEN_URL: lambda: self.qwen_payload,
        }
        if url not in routes:
            return httpx.Response(404, json={"error": "not found"})
        return httpx.Response(200, content=json.dumps(routes[url]()).encode("utf-8"))
