from app.models.user import User
from app.models.exercise import Exercise

__all__ = ["User", "Exercise"]
