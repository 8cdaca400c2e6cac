"""
Login Use Case

Handles user authentication.
"""

import bcrypt

from src.app.errors import INVALID_CREDENTIALS
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import LoginCommand, UserInfo


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Unknown email and wrong password give the same error
    - A dummy hash check runs for unknown emails so response time does not
      reveal whether an account exists
    """

    def __init__(self, uow: UnitOfWork, bcrypt_rounds: int = 12):
        self.uow = uow
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, command: LoginCommand) -> Result[UserInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(self.bcrypt_rounds))
                return Return.err(INVALID_CREDENTIALS)

            password_valid = bcrypt.checkpw(
                command.password.encode("utf-8"), user.password_hash.encode("utf-8")
            )
            if not password_valid:
                return Return.err(INVALID_CREDENTIALS)

            return Return.ok(UserInfo.from_entity(user))
