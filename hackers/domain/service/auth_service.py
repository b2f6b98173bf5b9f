"""Authentication service interface."""

from hackers.domain.model import User


class AuthenticationService:
    """Session management against Hacker News.

    Implemented by the Hacker News adapter. The voting coordinator only
    needs ``logout``; the login use cases need the rest.
    """

    async def login(self, username: str, password: str) -> User:
        """Log in and keep the session cookie.

        Args:
            username: Hacker News account name
            password: Account password

        Returns:
            The logged-in user

        Raises:
            AuthenticationError: If the credentials are rejected or the
                server cannot be reached
        """
        raise NotImplementedError

    async def logout(self) -> None:
        """Drop session cookies and the stored username."""
        raise NotImplementedError

    async def is_authenticated(self) -> bool:
        """Whether a session cookie and username are present."""
        raise NotImplementedError

    async def current_user(self) -> User | None:
        """The logged-in user, if any."""
        raise NotImplementedError
