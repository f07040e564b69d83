from src.models.base import Base, BaseModel, TimeStamp
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "TimeStamp",
    "User",
]
