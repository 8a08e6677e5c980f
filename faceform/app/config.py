"""
应用配置管理
使用 Pydantic Settings 管理配置
"""
from pathlib import Path
from typing import Optional, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


def find_project_root() -> Path:
    """
    查找项目根目录（包含 .env 文件的目录）

    Returns:
        Path: 项目根目录路径
    """
    current = Path(__file__).resolve()
    # 当前文件位于 faceform/app/config.py，项目根目录应该是 current.parent.parent.parent
    project_root = current.parent.parent.parent

    env_file = project_root / ".env"
    if env_file.exists():
        return project_root

    # 如果项目根目录没有 .env，向上查找
    for parent in current.parents:
        env_file = parent / ".env"
        if env_file.exists():
            return parent

    return project_root


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=str(find_project_root() / ".env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # 数据库配置（必须从 .env 读取，无默认值）
    DB_DRIVER: str = "postgresql+psycopg"
    DB_HOST: Optional[str] = None
    DB_PORT: Optional[int] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_NAME: Optional[str] = None
    DATABASE_URL: Optional[str] = None  # 完整连接URL，设置后优先于 DB_* 分项
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_SQL_LOG_ENABLED: bool = False
    DB_SQL_LOG_SLOW_QUERY_THRESHOLD: float = 1.0  # 慢查询阈值（秒）

    @property
    def ASYNC_DB_URI(self) -> str:
        """异步数据库连接 URI"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not all([self.DB_HOST, self.DB_PORT, self.DB_USER, self.DB_PASSWORD, self.DB_NAME]):
            raise ValueError("数据库配置不完整，请设置 DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME")
        # 用户名和密码中的特殊字符（@ : /）由 URL.create 转义
        return URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

    # 百度人脸识别配置
    FACE_API_KEY: Optional[str] = None
    FACE_SECRET_KEY: Optional[str] = None
    FACE_TOKEN_URL: str = "https://aip.baidubce.com/oauth/2.0/token"
    FACE_SESSIONCODE_URL: str = "https://aip.baidubce.com/rest/2.0/face/v1/faceliveness/sessioncode"
    FACE_SEARCH_V3_URL: str = "https://aip.baidubce.com/rest/2.0/face/v3/search"
    FACE_USER_GROUP_ADMIN: str = "administrator"
    FACE_USER_GROUP_USER: str = "user"
    FACE_MATCH_THRESHOLD: float = Field(
        default=80.0,
        description="人脸相似度阈值（百度推荐80分），得分大于等于阈值视为匹配"
    )

    # 阿里云通义千问配置
    QWEN_API_KEY: Optional[str] = None
    QWEN_APP_ID: Optional[str] = None
    QWEN_BASE_URL: str = "https://dashscope.aliyuncs.com/api/v1/services/aigc/text-generation/generation"
    QWEN_MODEL: str = "qwen-plus"
    QWEN_TEMPERATURE: float = 0.7
    QWEN_MAX_TOKENS: int = 500

    # 外部接口超时（秒）
    UPSTREAM_TIMEOUT: float = 30.0

    # 应用配置
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000

    @field_validator('DB_PORT', mode='before')
    @classmethod
    def _validate_db_port(cls, v: Union[int, str, None]) -> Optional[int]:
        """验证 DB_PORT，空值视为未配置"""
        if v is None or (isinstance(v, str) and v.strip() == ''):
            return None
        return int(v)

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def _validate_log_level(cls, v: Union[str, None]) -> str:
        """验证 LOG_LEVEL，空值时使用默认值"""
        if v is None or (isinstance(v, str) and v.strip() == ''):
            return "INFO"
        return v.strip().upper()


# 创建全局配置实例
settings = Settings()
