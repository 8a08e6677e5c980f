#!/usr/bin/env python
"""
数据库初始化脚本

功能：
- 验证数据库连接
- 按模型创建 users / forms / replies 表（已存在的表不受影响）

生产环境建议使用 alembic 迁移：
    alembic upgrade head

使用方式：
    python scripts/init_db.py
"""
import asyncio
import sys
import os

# 添加项目根目录到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from faceform.infrastructure.database.connection import check_db_connection, dispose_engine, init_db


async def run() -> int:
    try:
        if not await check_db_connection():
            print("✗ 数据库连接失败，请检查 .env 中的 DB_* 配置")
            return 1
        await init_db()
        print("✓ 数据表创建完成")
        return 0
    finally:
        await dispose_engine()


def main():
    """主函数"""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
