"""
百度人脸识别客户端测试

Pytest 命令示例：
================

# 运行整个测试文件
pytest tests/infrastructure/test_baidu_face.py -v
"""
import json

import pytest

from faceform.app.exceptions import UpstreamAPIError
from tests.fakes import SESSION_CODE_URL, SEARCH_URL, TOKEN_URL


class TestIssueVerificationCode:
    """随机校验码测试类"""

    @pytest.mark.asyncio
    async def test_returns_session_code(self, face_client, fake_upstream):
        code = await face_client.issue_verification_code()

        assert code == "8293"
        request = fake_upstream.requests_to(SESSION_CODE_URL)[0]
        assert request.method == "POST"
        assert request.url.params["access_token"] == "token-1"

    @pytest.mark.asyncio
    async def test_error_code_raises(self, face_client, fake_upstream):
        """
        测试用例：接口返回非零错误码

        验证：
        - 抛出 UpstreamAPIError，消息带前缀
        """
        fake_upstream.session_code_payload = {"error_code": 110, "error_msg": "Access token invalid"}

        with pytest.raises(UpstreamAPIError) as exc_info:
            await face_client.issue_verification_code()

        assert exc_info.value.message == "随机校验码获取失败：Access token invalid"


    @pytest.mark.asyncio
    async def test_missing_session_code_raises(self, face_client, fake_upstream):
        fake_upstream.session_code_payload = {"error_code": 0, "error_msg": "SUCCESS", "result": {}}

        with pytest.raises(UpstreamAPIError) as exc_info:
            await face_client.issue_verification_code()

        assert str(exc_info.value) == "随机校验码获取失败：返回缺少 session_code"

    @pytest.mark.asyncio
    async def test_invalid_token_error_refreshes_next_call(self, face_client, fake_upstream):
        """
        测试用例：接口返回 Token 无效（110）

        验证：
        - 本次调用抛出 UpstreamAPIError
        - 下一次调用重新获取 Token
        """
        fake_upstream.session_code_payload = {"error_code": 110, "error_msg": "Access token invalid or no longer valid"}
        with pytest.raises(UpstreamAPIError):
            await face_client.issue_verification_code()

        fake_upstream.token_payload = {"access_token": "token-2", "expires_in": 2592000}
        fake_upstream.session_code_payload = {
            "error_code": 0,
            "error_msg": "SUCCESS",
            "result": {"session_code": "1024"},
        }
        code = await face_client.issue_verification_code()

        assert code == "1024"
        assert len(fake_upstream.requests_to(TOKEN_URL)) == 2
        assert fake_upstream.requests_to(SESSION_CODE_URL)[-1].url.params["access_token"] == "token-2"

    @pytest.mark.asyncio
    async def test_other_error_keeps_token(self, face_client, fake_upstream):
        fake_upstream.session_code_payload = {"error_code": 222202, "error_msg": "pic not has face"}
        with pytest.raises(UpstreamAPIError):
            await face_client.issue_verification_code()
        with pytest.raises(UpstreamAPIError):
            await face_client.issue_verification_code()

        assert len(fake_upstream.requests_to(TOKEN_URL)) == 1

class TestSearchFace:
    """人脸搜索测试类"""

    @pytest.mark.asyncio
    async def test_request_payload(self, face_client, fake_upstream):
        """
        测试用例：搜索请求参数

        验证：
        - 图片类型、用户组、质量控制、活体控制
        - Token 通过查询参数传递
        """
        await face_client.search_face("aGVsbG8=", "administrator")

        request = fake_upstream.requests_to(SEARCH_URL)[0]
        payload = json.loads(request.content)
        assert payload == {
            "image": "aGVsbG8=",
            "image_type": "BASE64",
            "group_id_list": "administrator",
            "quality_control": "NORMAL",
            "liveness_control": "LOW",
        }
        assert request.url.params["access_token"] == "token-1"

    @pytest.mark.asyncio
    async def test_empty_user_list_not_matched(self, face_client, fake_upstream):
        result = await face_client.search_face("aGVsbG8=", "user")

        assert result.matched is False
        assert result.external_user_id is None

    @pytest.mark.asyncio
    async def test_score_below_threshold(self, face_client, fake_upstream):
        """
        测试用例：得分低于阈值

        验证：
        - matched 为 False，但仍返回得分最高的候选人
        """
        fake_upstream.set_candidates({"user_id": "face_zhangsan", "score": 79.9})

        result = await face_client.search_face("aGVsbG8=", "user")

        assert result.matched is False
        assert result.external_user_id == "face_zhangsan"
        assert result.score == 79.9

    @pytest.mark.asyncio
    async def test_score_equal_threshold_matches(self, face_client, fake_upstream):
        fake_upstream.set_candidates({"user_id": "face_zhangsan", "score": 80.0})

        result = await face_client.search_face("aGVsbG8=", "user")

        assert result.matched is True
        assert result.external_user_id == "face_zhangsan"

    @pytest.mark.asyncio
    async def test_uses_first_candidate(self, face_client, fake_upstream):
        fake_upstream.set_candidates(
            {"user_id": "face_a", "score": 92.5},
            {"user_id": "face_b", "score": 85.0},
        )

        result = await face_client.search_face("aGVsbG8=", "user")

        assert result.external_user_id == "face_a"
        assert result.score == 92.5

    @pytest.mark.asyncio
    async def test_error_code_raises(self, face_client, fake_upstream):
        fake_upstream.search_payload = {"error_code": 222202, "error_msg": "pic not has face"}

        with pytest.raises(UpstreamAPIError) as exc_info:
            await face_client.search_face("aGVsbG8=", "user")

        assert str(exc_info.value) == "人脸验证失败：pic not has face"

    @pytest.mark.asyncio
    async def test_token_shared_between_calls(self, face_client, fake_upstream):
        await face_client.issue_verification_code()
        await face_client.search_face("aGVsbG8=", "user")

        assert len(fake_upstream.requests_to(TOKEN_URL)) == 1
