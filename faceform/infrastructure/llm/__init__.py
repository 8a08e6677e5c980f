"""
大模型客户端
"""
from faceform.infrastructure.llm.reply_generator import QwenReplyGenerator

__all__ = ["QwenReplyGenerator"]
