"""
Middleware modules for the Size Chart Service
"""
