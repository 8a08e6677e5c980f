"""
异常处理中间件

所有错误响应统一为 {"success": false, "message": ...}
"""
import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


async def exception_handler(request: Request, exc: Exception):
    """
    全局异常处理器

    Args:
        request: FastAPI 请求对象
        exc: 异常对象

    Returns:
        JSON 响应
    """
    logger.error(f"未处理的异常: {request.method} {request.url.path} - {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": str(exc)
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    请求验证异常处理器

    Args:
        request: FastAPI 请求对象
        exc: 验证异常对象

    Returns:
        JSON 响应
    """
    logger.warning(f"请求验证失败: {request.method} {request.url.path} - {exc.errors()}")

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "请求验证失败",
            "detail": jsonable_encoder(exc.errors())
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    HTTP 异常处理器

    Args:
        request: FastAPI 请求对象
        exc: HTTP 异常对象

    Returns:
        JSON 响应
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "message": exc.detail
        }
    )
