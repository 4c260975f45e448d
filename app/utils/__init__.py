"""
Shared helpers for the Size Chart Service
"""
