"""
Authentication Use Cases

Registration and login.
"""

from .dtos import LoginCommand, RegisterCommand, UserInfo
from .login_use_case import LoginUseCase
from .register_use_case import RegisterUseCase

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    # DTOs
    "RegisterCommand",
    "LoginCommand",
    "UserInfo",
]
