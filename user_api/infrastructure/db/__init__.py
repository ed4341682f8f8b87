from .locks import AsyncReadWriteLock
from .memory_user_repository import InMemoryUserRepository
from .mongo_connection import get_database, get_user_collection, close_database
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "AsyncReadWriteLock",
    "InMemoryUserRepository",
    "get_database",
    "get_user_collection",
    "close_database",
    "MongoUserRepository",
]
