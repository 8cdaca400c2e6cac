"""
Board Use Cases

Create, read, rename and delete boards.
"""

from .create_board_use_case import CreateBoardUseCase
from .delete_board_use_case import DeleteBoardUseCase
from .dtos import BoardResponse, CreateBoardCommand, UpdateBoardCommand
from .get_board_use_case import GetBoardUseCase
from .list_boards_use_case import ListBoardsUseCase
from .update_board_use_case import UpdateBoardUseCase

__all__ = [
    # Use Cases
    "ListBoardsUseCase",
    "GetBoardUseCase",
    "CreateBoardUseCase",
    "UpdateBoardUseCase",
    "DeleteBoardUseCase",
    # DTOs
    "BoardResponse",
    "CreateBoardCommand",
    "UpdateBoardCommand",
]
