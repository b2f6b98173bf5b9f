"""Navigation requests raised by the core."""

import logfire

from hackers.domain.service import Navigator


class NavigationStore(Navigator):
    """Navigation state observed by the presentation layer.

    The core only ever asks for the login screen; the store records the
    request until the login flow dismisses it.
    """

    def __init__(self) -> None:
        self.showing_login = False
        self.login_requests = 0

    def show_login(self) -> None:
        self.showing_login = True
        self.login_requests += 1
        logfire.info("Login requested", requests=self.login_requests)

    def dismiss_login(self) -> None:
        self.showing_login = False
