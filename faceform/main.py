"""
FastAPI应用入口

运行方式：
    方式1：直接运行
        python -m faceform.main

    方式2：使用 uvicorn 命令
        uvicorn faceform.main:app --host 0.0.0.0 --port 3000

    方式3：安装后使用命令行入口
        faceform-server
"""
import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from faceform import __version__
from faceform.app.api.routes import router
from faceform.app.config import settings
from faceform.app.middleware.logging import LoggingMiddleware
from faceform.app.middleware.exception_handler import (
    exception_handler,
    validation_exception_handler,
    http_exception_handler
)
from faceform.infrastructure.database.connection import check_db_connection, dispose_engine
from faceform.infrastructure.external.baidu_face import BaiduFaceClient
from faceform.infrastructure.external.token_cache import FaceTokenCache
from faceform.infrastructure.llm.reply_generator import QwenReplyGenerator

# 配置日志系统
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    应用生命周期管理

    启动时创建共享 HTTP 客户端、Token 缓存和外部服务客户端，挂载到 app.state

    Args:
        app: FastAPI 应用实例
    """
    logger.info("正在启动应用...")

    http_client = httpx.AsyncClient(timeout=settings.UPSTREAM_TIMEOUT)
    try:
        token_cache = FaceTokenCache(
            http_client=http_client,
            client_id=settings.FACE_API_KEY,
            client_secret=settings.FACE_SECRET_KEY,
            token_url=settings.FACE_TOKEN_URL,
        )
        app.state.http_client = http_client
        app.state.face_client = BaiduFaceClient(
            token_cache=token_cache,
            http_client=http_client,
            session_code_url=settings.FACE_SESSIONCODE_URL,
            search_url=settings.FACE_SEARCH_V3_URL,
            match_threshold=settings.FACE_MATCH_THRESHOLD,
        )
        app.state.reply_generator = QwenReplyGenerator(
            http_client=http_client,
            api_key=settings.QWEN_API_KEY,
            app_id=settings.QWEN_APP_ID,
            base_url=settings.QWEN_BASE_URL,
            model=settings.QWEN_MODEL,
            temperature=settings.QWEN_TEMPERATURE,
            max_tokens=settings.QWEN_MAX_TOKENS,
        )

        # 连接失败只记录日志，不阻止启动
        await check_db_connection()

        logger.info(f"后端服务启动成功，端口：{settings.APP_PORT}")
        logger.info(f"API文档地址：http://localhost:{settings.APP_PORT}/docs")

        yield
    finally:
        logger.info("正在关闭应用...")
        await http_client.aclose()
        await dispose_engine()
        logger.info("应用已关闭")


# 创建 FastAPI 应用
app = FastAPI(
    title="人脸验证表单服务",
    description="人脸识别登录、表单提交与智能回复",
    version=__version__,
    lifespan=lifespan
)

# 配置 CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 添加日志中间件
app.add_middleware(LoggingMiddleware)

# 注册异常处理器
app.add_exception_handler(Exception, exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

# 注册路由
app.include_router(router)


@app.get("/health")
async def health():
    """健康检查"""
    return {"status": "ok", "version": __version__}


def run_server() -> None:
    """
    通过 uvicorn 启动服务，端口与主机从 .env 读取
    """
    uvicorn.run(
        "faceform.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    run_server()
