#!/usr/bin/env python
"""
人脸用户绑定脚本

功能：
- 将百度人脸库中的 user_id 绑定到系统用户（users 表）
- face_user_id 已存在则更新用户组，不存在则创建

使用方式：
    python scripts/bind_face_user.py --face-user-id zhangsan --group user
    python scripts/bind_face_user.py --face-user-id admin01 --group administrator
"""
import argparse
import asyncio
import sys
import os

# 添加项目根目录到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from faceform.app.config import settings
from faceform.infrastructure.database.connection import get_session_factory, dispose_engine
from faceform.infrastructure.database.repository.user_repository import UserRepository


async def bind(face_user_id: str, user_group: str) -> int:
    session_factory = get_session_factory()
    try:
        async with session_factory() as session:
            try:
                user = await UserRepository(session).upsert_binding(face_user_id, user_group)
                await session.commit()
            except Exception as e:
                await session.rollback()
                print(f"✗ 绑定失败: {e}")
                return 1
        print(f"✓ 绑定成功: id={user.id}, face_user_id={user.face_user_id}, user_group={user.user_group}")
        return 0
    finally:
        await dispose_engine()


def main():
    """主函数"""
    parser = argparse.ArgumentParser(description="人脸用户绑定脚本")
    parser.add_argument("--face-user-id", required=True, help="百度人脸库用户ID")
    parser.add_argument(
        "--group",
        default=settings.FACE_USER_GROUP_USER,
        help=f"用户组（默认 {settings.FACE_USER_GROUP_USER}，管理员为 {settings.FACE_USER_GROUP_ADMIN}）"
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(bind(args.face_user_id, args.group)))


if __name__ == "__main__":
    main()
