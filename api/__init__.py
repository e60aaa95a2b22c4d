"""HTTP 路由層"""
