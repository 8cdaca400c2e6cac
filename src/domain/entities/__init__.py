"""
Adaboards Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import BoardRole, TaskStatus

# Export all entities
from .user import User
from .board import Board
from .membership import Membership
from .task import Task

__all__ = [
    # Enums
    "BoardRole",
    "TaskStatus",
    # Entities
    "User",
    "Board",
    "Membership",
    "Task",
]
