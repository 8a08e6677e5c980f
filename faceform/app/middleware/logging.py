"""
日志中间件
"""
import logging
import time
import json
from typing import Any
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# 请求体中需要截断的大字段（如人脸图片Base64）
TRUNCATED_FIELDS = ("imageBase64",)
TRUNCATE_LENGTH = 64


def _mask_body(body: Any) -> Any:
    """截断请求体中的大字段，避免日志过大"""
    if not isinstance(body, dict):
        return body
    masked = dict(body)
    for field in TRUNCATED_FIELDS:
        value = masked.get(field)
        if isinstance(value, str) and len(value) > TRUNCATE_LENGTH:
            masked[field] = f"{value[:TRUNCATE_LENGTH]}...(共{len(value)}字符)"
    return masked


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next):
        """
        记录请求日志

        Args:
            request: FastAPI 请求对象
            call_next: 下一个中间件或路由处理函数

        Returns:
            响应对象
        """
        start_time = time.time()
        client_host = request.client.host if request.client else 'unknown'

        logger.info(f"[HTTP请求开始] {request.method} {request.url.path} - 客户端: {client_host}")

        if request.method in ("POST", "PUT", "PATCH") and logger.isEnabledFor(logging.DEBUG):
            # Starlette 会缓存已读取的请求体，后续路由仍可读取
            body = await request.body()
            if body:
                try:
                    body_json = json.loads(body.decode('utf-8'))
                    logger.debug(f"[HTTP请求体] {request.method} {request.url.path} - body={_mask_body(body_json)}")
                except (json.JSONDecodeError, UnicodeDecodeError):
                    body_preview = body[:200].decode('utf-8', errors='ignore')
                    logger.debug(f"[HTTP请求体] {request.method} {request.url.path} - body_preview={body_preview}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"[HTTP请求异常] {request.method} {request.url.path} - "
                f"异常: {str(e)} - 处理时间: {process_time:.3f}s",
                exc_info=True
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"[HTTP请求完成] {request.method} {request.url.path} - "
            f"状态码: {response.status_code} - 处理时间: {process_time:.3f}s"
        )
        return response
