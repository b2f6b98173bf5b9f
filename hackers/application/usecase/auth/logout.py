"""Logout use case."""

from pydantic import BaseModel

from hackers.application.usecase.base import BaseUseCase
from hackers.domain.service import AuthenticationService


class LogoutResponse(BaseModel):
    """Logout response."""

    was_authenticated: bool


class LogoutUseCase(BaseUseCase):
    """Use case for ending the Hacker News session."""

    def __init__(self, authentication_service: AuthenticationService) -> None:
        self.authentication_service = authentication_service

    async def execute(self, request: None = None) -> LogoutResponse:
        was_authenticated = await self.authentication_service.is_authenticated()
        await self.authentication_service.logout()
        return LogoutResponse(was_authenticated=was_authenticated)
