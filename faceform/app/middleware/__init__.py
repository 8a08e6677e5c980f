"""
HTTP 中间件
"""
