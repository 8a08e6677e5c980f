"""
基础设施层（数据库、外部服务、大模型）
"""
