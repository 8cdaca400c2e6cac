import bcrypt

from src.app.errors import EMAIL_ALREADY_EXISTS
from src.app.repositories.user_repository import UserAlreadyExists
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Result, Return

from .dtos import RegisterCommand, UserInfo


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[UserInfo] (public profile)

    Business Logic:
    1. Check if email already exists
    2. Hash password with bcrypt
    3. Create User
    4. Commit transaction

    Token issuance is left to the caller (credential service).
    """

    def __init__(self, uow: UnitOfWork, bcrypt_rounds: int = 12):
        self.uow = uow
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, command: RegisterCommand) -> Result[UserInfo]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated email, name, password

        Returns:
            Result[UserInfo] with the new user's public profile
            or Error(EMAIL_ALREADY_EXISTS) if email exists, including a
            registration that won the race after the lookup
        """
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(EMAIL_ALREADY_EXISTS)

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(self.bcrypt_rounds)
            )

            user = User(
                email=command.email,
                name=command.name,
                password_hash=password_hash.decode("utf-8"),
            )
            try:
                user = await self.uow.users.create(user)
            except UserAlreadyExists:
                return Return.err(EMAIL_ALREADY_EXISTS)

            await self.uow.commit()

            return Return.ok(UserInfo.from_entity(user))
