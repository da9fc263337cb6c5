"""Tests for the Chain of Responsibility examples."""

import pytest

from design_patterns.domain.core.exceptions import ResourceLimitExceededError
from design_patterns.patterns.behavioral.chain_of_responsibility import conceptual, real_world


class TestHandlerChain:
    """Test the animal handler chain."""

    def test_request_reaches_matching_handler(self):
        """Test each food is eaten by its handler."""
        monkey = conceptual.MonkeyHandler()
        monkey.set_next(conceptual.SquirrelHandler()).set_next(conceptual.DogHandler())

        assert monkey.handle("MeatBall") == "Dog: I'll eat the MeatBall."
        assert monkey.handle("Banana") == "Monkey: I'll eat the Banana."
        assert monkey.handle("Cup of coffee") is None

    def test_main_output(self, capsys):
        """Test the full chain and the subchain."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Chain: Monkey > Squirrel > Dog\n\n"
            "Client: Who wants a Nut?\n"
            "  Squirrel: I'll eat the Nut.\n"
            "Client: Who wants a Banana?\n"
            "  Monkey: I'll eat the Banana.\n"
            "Client: Who wants a Cup of coffee?\n"
            "  Cup of coffee was left untouched.\n"
            "\n"
            "Subchain: Squirrel > Dog\n\n"
            "Client: Who wants a Nut?\n"
            "  Squirrel: I'll eat the Nut.\n"
            "Client: Who wants a Banana?\n"
            "  Banana was left untouched.\n"
            "Client: Who wants a Cup of coffee?\n"
            "  Cup of coffee was left untouched.\n"
        )


class TestLoginMiddleware:
    """Test the login middleware chain."""

    def test_admin_login(self, capsys):
        """Test the admin is greeted and authorized."""
        server = real_world.build_server(clock=lambda: 0.0)

        assert server.log_in("admin@example.com", "admin_pass") is True
        assert capsys.readouterr().out == (
            "RoleCheckMiddleware: Hello, admin!\n"
            "Server: Authorization has been successful!\n"
        )

    def test_unknown_email(self, capsys):
        """Test the chain stops at the user check."""
        server = real_world.build_server(clock=lambda: 0.0)

        assert server.log_in("nobody@example.com", "x") is False
        assert capsys.readouterr().out == "UserExistsMiddleware: This email is not registered!\n"

    def test_wrong_password(self, capsys):
        """Test a registered email with a wrong password."""
        server = real_world.build_server(clock=lambda: 0.0)

        assert server.log_in("user@example.com", "nope") is False
        assert capsys.readouterr().out == "UserExistsMiddleware: Wrong password!\n"

    def test_throttling_limit(self, capsys):
        """Test the third request within a minute is rejected."""
        server = real_world.build_server(clock=lambda: 0.0)
        server.log_in("nobody@example.com", "x")
        server.log_in("nobody@example.com", "x")

        with pytest.raises(ResourceLimitExceededError) as exc_info:
            server.log_in("user@example.com", "user_pass")

        assert exc_info.value.current == 3
        assert exc_info.value.maximum == 2
        assert capsys.readouterr().out.endswith("ThrottlingMiddleware: Request limit exceeded!\n")

    def test_throttling_window_resets(self, capsys):
        """Test the counter resets after a minute."""
        now = [0.0]
        server = real_world.build_server(clock=lambda: now[0])
        server.log_in("nobody@example.com", "x")
        server.log_in("nobody@example.com", "x")

        now[0] = 61.0

        assert server.log_in("user@example.com", "user_pass") is True

    def test_main_retries_until_success(self, capsys, scripted_input):
        """Test the prompt loop stops after a successful login."""
        real_world.main(input_func=scripted_input([
            "user@example.com", "wrong",
            " user@example.com ", "user_pass",
        ]))

        out = capsys.readouterr().out
        assert out.count("Enter your email:") == 2
        assert "UserExistsMiddleware: Wrong password!" in out
        assert out.endswith(
            "RoleCheckMiddleware: Hello, user!\n"
            "Server: Authorization has been successful!\n"
        )
