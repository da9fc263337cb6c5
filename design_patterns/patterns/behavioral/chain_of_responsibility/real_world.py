"""Chain of Responsibility - real-world example: login middleware.

A login request passes through throttling, credential and role checks. Any
middleware can stop the request; the last one to pass it lets the server
authorize the user.
"""

import time
from typing import Callable, Dict, Optional

from design_patterns.domain.core.exceptions import ResourceLimitExceededError


class Middleware:
    """Base middleware; passes the request on to the next link, if any."""

    def __init__(self):
        self._next: Optional["Middleware"] = None

    def link_with(self, next_middleware: "Middleware") -> "Middleware":
        self._next = next_middleware
        return next_middleware

    def check(self, email: str, password: str) -> bool:
        if self._next is None:
            return True
        return self._next.check(email, password)


class UserExistsMiddleware(Middleware):
    def __init__(self, server: "Server"):
        super().__init__()
        self.server = server

    def check(self, email: str, password: str) -> bool:
        if not self.server.has_email(email):
            print("UserExistsMiddleware: This email is not registered!")
            return False

        if not self.server.is_valid_password(email, password):
            print("UserExistsMiddleware: Wrong password!")
            return False

        return super().check(email, password)


class RoleCheckMiddleware(Middleware):
    def check(self, email: str, password: str) -> bool:
        if email == "admin@example.com":
            print("RoleCheckMiddleware: Hello, admin!")
            return True

        print("RoleCheckMiddleware: Hello, user!")
        return super().check(email, password)


class ThrottlingMiddleware(Middleware):
    """
    Limits the number of requests per minute.

    Exceeding the limit aborts the login attempt with
    ResourceLimitExceededError.
    """

    def __init__(self, request_per_minute: int, clock: Callable[[], float] = time.time):
        super().__init__()
        self.request_per_minute = request_per_minute
        self.request = 0
        self._clock = clock
        self.current_time = clock()

    def check(self, email: str, password: str) -> bool:
        now = self._clock()
        if now > self.current_time + 60:
            self.request = 0
            self.current_time = now

        self.request += 1

        if self.request > self.request_per_minute:
            print("ThrottlingMiddleware: Request limit exceeded!")
            raise ResourceLimitExceededError("login request", self.request, self.request_per_minute)

        return super().check(email, password)


class Server:
    def __init__(self):
        self.users: Dict[str, str] = {}
        self.middleware: Optional[Middleware] = None

    def set_middleware(self, middleware: Middleware) -> None:
        self.middleware = middleware

    def log_in(self, email: str, password: str) -> bool:
        if self.middleware.check(email, password):
            print("Server: Authorization has been successful!")
            # Do something useful for authorized users.
            return True
        return False

    def register(self, email: str, password: str) -> None:
        self.users[email] = password

    def has_email(self, email: str) -> bool:
        return email in self.users

    def is_valid_password(self, email: str, password: str) -> bool:
        return self.users.get(email) == password


def build_server(clock: Callable[[], float] = time.time) -> Server:
    server = Server()
    server.register("admin@example.com", "admin_pass")
    server.register("user@example.com", "user_pass")

    middleware = ThrottlingMiddleware(2, clock)
    middleware.link_with(UserExistsMiddleware(server)).link_with(RoleCheckMiddleware())

    server.set_middleware(middleware)
    return server


def main(input_func: Callable[..., str] = input) -> None:
    server = build_server()

    success = False
    while not success:
        print("\nEnter your email:")
        email = input_func().strip()
        print("Enter your password:")
        password = input_func().strip()
        success = server.log_in(email, password)


if __name__ == "__main__":
    main()
