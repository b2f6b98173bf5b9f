"""Authentication use cases."""

from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutResponse, LogoutUseCase

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutResponse",
    "LogoutUseCase",
]
