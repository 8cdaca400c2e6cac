from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.search = AsyncMock(return_value=[])

    uow.boards = MagicMock()
    uow.boards.get_by_id = AsyncMock(return_value=None)
    uow.boards.lock = AsyncMock()
    uow.boards.list_for_user = AsyncMock(return_value=[])
    uow.boards.create = AsyncMock(side_effect=lambda board: board)
    uow.boards.update = AsyncMock(side_effect=lambda board: board)
    uow.boards.delete = AsyncMock()

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_board = AsyncMock(return_value=None)
    uow.memberships.list_by_board_with_users = AsyncMock(return_value=[])
    uow.memberships.count_by_role = AsyncMock(return_value=1)
    uow.memberships.create = AsyncMock(side_effect=lambda membership: membership)
    uow.memberships.update = AsyncMock(side_effect=lambda membership: membership)
    uow.memberships.delete = AsyncMock()

    uow.tasks = MagicMock()
    uow.tasks.get_in_board = AsyncMock(return_value=None)
    uow.tasks.get_detail = AsyncMock(return_value=None)
    uow.tasks.list_by_board = AsyncMock(return_value=[])
    uow.tasks.create = AsyncMock(side_effect=lambda task: task)
    uow.tasks.update = AsyncMock(side_effect=lambda task: task)
    uow.tasks.delete = AsyncMock()

    return uow
