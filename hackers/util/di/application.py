"""Application layer DI providers."""

from dishka import Scope, provide

from hackers.application.navigation import NavigationStore
from hackers.application.usecase.auth import LoginUseCase, LogoutUseCase
from hackers.application.usecase.comment import (
    LoadCommentsUseCase,
    ToggleCommentUseCase,
)
from hackers.application.usecase.vote import UpvoteUseCase
from hackers.domain.repository import PostRepository
from hackers.domain.service import AuthenticationService, Navigator, VotingCoordinator
from hackers.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Navigation state lives as long as the app
    @provide(scope=Scope.APP)
    def get_navigation_store(self) -> NavigationStore:
        """Provide navigation store."""
        return NavigationStore()

    @provide(scope=Scope.APP)
    def get_navigator(self, navigation_store: NavigationStore) -> Navigator:
        """Provide the navigation store as the core's navigator."""
        return navigation_store

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_load_comments_use_case(
        self,
        post_repository: PostRepository,
        voting_coordinator: VotingCoordinator,
    ) -> LoadCommentsUseCase:
        """Provide load comments use case."""
        return LoadCommentsUseCase(
            post_repository=post_repository,
            voting_coordinator=voting_coordinator,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_use_case(self) -> ToggleCommentUseCase:
        """Provide toggle comment use case."""
        return ToggleCommentUseCase()

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_upvote_use_case(self) -> UpvoteUseCase:
        """Provide upvote use case."""
        return UpvoteUseCase()

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        authentication_service: AuthenticationService,
        navigation_store: NavigationStore,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            authentication_service=authentication_service,
            navigation_store=navigation_store,
        )

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(
        self, authentication_service: AuthenticationService
    ) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(authentication_service=authentication_service)
