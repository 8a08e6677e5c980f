"""
应用层（配置、路由、中间件）
"""
