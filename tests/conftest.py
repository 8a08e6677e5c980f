"""
测试配置和共享 Fixtures

数据库使用内存 SQLite（sqlite+aiosqlite），第三方接口使用 httpx.MockTransport 模拟
"""
import random

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from faceform.app.api.dependencies import get_async_session, get_face_client, get_reply_generator
from faceform.infrastructure.database.base import Base
from faceform.infrastructure.database.models import User
from faceform.infrastructure.external.baidu_face import BaiduFaceClient
from faceform.infrastructure.external.token_cache import FaceTokenCache
from faceform.infrastructure.llm.reply_generator import QwenReplyGenerator
from faceform.main import app
from tests.fakes import FakeUpstream, FakeClock, TOKEN_URL, SESSION_CODE_URL, SEARCH_URL, QWEN_URL

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def upstream_client(fake_upstream):
    """使用 MockTransport 的 httpx 异步客户端"""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_upstream.handler)) as client:
        yield client


@pytest.fixture
def face_client(upstream_client) -> BaiduFaceClient:
    token_cache = FaceTokenCache(
        http_client=upstream_client,
        client_id="ak",
        client_secret="sk",
        token_url=TOKEN_URL,
        clock=FakeClock(),
    )
    return BaiduFaceClient(
        token_cache=token_cache,
        http_client=upstream_client,
        session_code_url=SESSION_CODE_URL,
        search_url=SEARCH_URL,
    )


@pytest.fixture
def reply_generator(upstream_client) -> QwenReplyGenerator:
    return QwenReplyGenerator(
        http_client=upstream_client,
        api_key="sk-qwen",
        app_id="app-001",
        base_url=QWEN_URL,
        rng=random.Random(7),
    )


@pytest_asyncio.fixture
async def test_db_engine():
    """
    创建测试数据库引擎（内存 SQLite，所有会话共享同一连接）
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db_session(test_session_factory):
    """创建测试数据库会话"""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_users(test_session_factory):
    """
    预置系统用户（普通用户 id=1，管理员 id=2）

    使用独立会话提交后关闭，避免与接口测试中的会话共享未提交事务
    """
    async with test_session_factory() as session:
        user = User(face_user_id="face_zhangsan", user_group="user")
        admin = User(face_user_id="face_admin", user_group="administrator")
        session.add_all([user, admin])
        await session.commit()
        return {"user": user, "admin": admin}


@pytest_asyncio.fixture
async def api_client(test_session_factory, face_client, reply_generator):
    """
    接口测试客户端

    通过 dependency_overrides 注入测试数据库会话和模拟的第三方客户端；
    ASGITransport 不触发 lifespan，不会连接真实数据库
    """
    async def override_session():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_face_client] = lambda: face_client
    app.dependency_overrides[get_reply_generator] = lambda: reply_generator

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
