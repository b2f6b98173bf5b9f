"""Login use case."""

import logfire
from pydantic import BaseModel

from hackers.application.navigation import NavigationStore
from hackers.application.usecase.base import BaseUseCase
from hackers.domain.service import AuthenticationService


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    username: str


class LoginUseCase(BaseUseCase):
    """Use case for logging in to Hacker News."""

    def __init__(
        self,
        authentication_service: AuthenticationService,
        navigation_store: NavigationStore,
    ) -> None:
        """Initialize login use case.

        Args:
            authentication_service: Session management
            navigation_store: Login prompt to dismiss on success
        """
        self.authentication_service = authentication_service
        self.navigation_store = navigation_store

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the login fails
        """
        with logfire.span("login", username=request.username):
            user = await self.authentication_service.login(
                request.username, request.password
            )
            self.navigation_store.dismiss_login()
            return LoginResponse(username=user.username)
