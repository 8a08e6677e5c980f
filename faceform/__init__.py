"""
faceform - 人脸验证表单服务
"""
__version__ = "1.0.0"
