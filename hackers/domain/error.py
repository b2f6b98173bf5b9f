"""Domain layer errors."""

from hackers.domain.value import AuthenticationFailure, VoteFailureReason


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentHiddenError(DomainError):
    """Raised when toggling a comment that is hidden by a collapsed ancestor."""

    def __init__(self, comment_id: int):
        self.comment_id = comment_id
        super().__init__(
            f"Comment {comment_id} is hidden by a collapsed ancestor and cannot be toggled"
        )


class VoteError(DomainError):
    """Raised when a vote submission is rejected.

    The reason decides how the voting coordinator reacts: an
    unauthenticated failure ends the session, everything else is only
    reported.
    """

    def __init__(self, reason: VoteFailureReason, message: str | None = None):
        self.reason = reason
        super().__init__(message or f"Vote failed: {reason.value}")

    @property
    def is_unauthenticated(self) -> bool:
        return self.reason == VoteFailureReason.UNAUTHENTICATED


class AuthenticationError(DomainError):
    """Raised when logging in to Hacker News fails."""

    def __init__(self, kind: AuthenticationFailure, message: str | None = None):
        self.kind = kind
        super().__init__(message or f"Authentication failed: {kind.value}")
