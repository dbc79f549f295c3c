"""
focusboard Server - FastAPI 后端
"""
