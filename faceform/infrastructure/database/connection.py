"""
数据库连接和会话管理
"""
import time
import logging
from typing import AsyncGenerator, Optional
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from faceform.app.config import settings
from faceform.infrastructure.database.base import Base

logger = logging.getLogger(__name__)
# SQL日志记录器
sql_logger = logging.getLogger("faceform.infrastructure.database.sql")

# 全局变量
_async_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def setup_db_logging(engine: AsyncEngine) -> None:
    """
    设置数据库SQL日志监听器

    记录SQL执行耗时，超过阈值时按慢查询告警

    Args:
        engine: SQLAlchemy 异步引擎实例
    """
    if not settings.DB_SQL_LOG_ENABLED:
        return

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def receive_before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        # 使用栈结构支持嵌套查询
        conn.info.setdefault('query_start_time', []).append(time.time())

    @event.listens_for(engine.sync_engine, "after_cursor_execute")
    def receive_after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        if not conn.info.get('query_start_time'):
            return
        duration_ms = (time.time() - conn.info['query_start_time'].pop(-1)) * 1000
        sql = statement.strip()
        if duration_ms > settings.DB_SQL_LOG_SLOW_QUERY_THRESHOLD * 1000:
            sql_logger.warning(f"慢查询: {duration_ms:.2f}ms - {sql}")
        else:
            sql_logger.debug(f"SQL执行完成: {duration_ms:.2f}ms - {sql}")


def get_async_engine() -> AsyncEngine:
    """
    获取异步数据库引擎（单例模式）

    Returns:
        AsyncEngine: SQLAlchemy 异步引擎
    """
    global _async_engine
    if _async_engine is None:
        db_uri = settings.ASYNC_DB_URI
        engine_kwargs = {"echo": settings.DEBUG}
        # SQLite 使用自带连接池，不支持 pool_size/max_overflow
        if not db_uri.startswith("sqlite"):
            engine_kwargs.update(
                pool_pre_ping=True,  # 连接前检查连接是否有效
                pool_size=settings.DB_POOL_SIZE,  # 连接池大小（并发连接上限）
                max_overflow=settings.DB_MAX_OVERFLOW,
            )
        _async_engine = create_async_engine(db_uri, **engine_kwargs)
        setup_db_logging(_async_engine)
    return _async_engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    获取异步会话工厂（单例模式）

    Returns:
        async_sessionmaker: 异步会话工厂
    """
    global _session_factory
    if _session_factory is None:
        engine = get_async_engine()
        _session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    获取异步数据库会话（依赖注入）

    Yields:
        AsyncSession: 异步数据库会话
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        yield session


async def check_db_connection() -> bool:
    """
    测试数据库连接

    Returns:
        bool: 连接是否成功
    """
    try:
        async with get_async_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("数据库连接成功")
        return True
    except Exception as e:
        logger.error(f"数据库连接失败：{e}")
        return False


async def init_db() -> None:
    """
    初始化数据库（创建表）
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    关闭数据库引擎，释放连接池
    """
    global _async_engine, _session_factory
    if _async_engine is not None:
        await _async_engine.dispose()
    _async_engine = None
    _session_factory = None
