"""
SQLAlchemy Base 定义
"""
from sqlalchemy.orm import declarative_base

Base = declarative_base()
