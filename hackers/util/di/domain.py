"""Domain layer DI providers."""

from dishka import Scope, provide

from hackers.domain.service import (
    AuthenticationService,
    Navigator,
    VoteSubmitter,
    VotingCoordinator,
)
from hackers.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The voting coordinator is REQUEST-scoped: one per open screen, so
    in-flight votes and errors don't leak between screens. Comment trees
    are built by the load comments use case, not provided.
    """

    scope = Scope.REQUEST

    @provide
    def get_voting_coordinator(
        self,
        vote_submitter: VoteSubmitter,
        authentication_service: AuthenticationService,
        navigator: Navigator,
    ) -> VotingCoordinator:
        """Provide voting coordinator."""
        return VotingCoordinator(
            vote_submitter=vote_submitter,
            authentication_service=authentication_service,
            navigator=navigator,
        )
