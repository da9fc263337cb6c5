"""Tests for the Factory Method examples."""

from design_patterns.patterns.creational.factory_method import conceptual, real_world


class TestFactoryMethodConceptual:
    """Test creators and their products."""

    def test_creator_uses_subclass_product(self):
        """Test some_operation works with whatever the factory method returns."""
        assert conceptual.ConcreteCreator2().some_operation() == (
            "Creator: The same creator's code has just worked with {Result of the ConcreteProduct2}"
        )

    def test_main_output(self, capsys):
        """Test the narration for both creators."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "App: Launched with the ConcreteCreator1.\n"
            "Client: I'm not aware of the creator's class, but it still works.\n"
            "Creator: The same creator's code has just worked with {Result of the ConcreteProduct1}\n"
            "\n\n"
            "App: Launched with the ConcreteCreator2.\n"
            "Client: I'm not aware of the creator's class, but it still works.\n"
            "Creator: The same creator's code has just worked with {Result of the ConcreteProduct2}\n"
        )


class TestSocialNetworkPosters:
    """Test posters create the right connectors."""

    def test_facebook_poster_creates_facebook_connector(self):
        """Test the factory method result."""
        connector = real_world.FacebookPoster("john", "secret").get_social_network()

        assert isinstance(connector, real_world.FacebookConnector)
        assert connector.login == "john"

    def test_post_logs_in_posts_and_logs_out(self, capsys):
        """Test the posting workflow order."""
        real_world.LinkedInPoster("john@example.com", "secret").post("Hi")

        assert capsys.readouterr().out == (
            "Send HTTP API request to log in user john@example.com with password secret\n"
            "Send HTTP API requests to create a post in LinkedIn timeline.\n"
            "Send HTTP API request to log out user john@example.com\n"
        )

    def test_main_output(self, capsys):
        """Test both creators post twice."""
        real_world.main()

        out = capsys.readouterr().out
        assert out.startswith("Testing ConcreteCreator1:\n")
        assert out.count("create a post in Facebook timeline") == 2
        assert out.count("create a post in LinkedIn timeline") == 2
        assert "log in user john_smith with password ******" in out
