"""
Database module initialization
"""

from .mongodb import db, connect_to_mongo, close_mongo_connection, ensure_indexes, get_collection

__all__ = [
    "db",
    "connect_to_mongo",
    "close_mongo_connection",
    "ensure_indexes",
    "get_collection",
]
