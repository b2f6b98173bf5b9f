"""User entity."""

from hackers.domain.model.common import DomainModel


class User(DomainModel):
    """The logged-in Hacker News account."""

    username: str
    karma: int = 0
