"""Tests for the Template Method examples."""

import pytest

from design_patterns.domain.core.exceptions import UnknownChoiceError
from design_patterns.patterns.behavioral.template_method import conceptual, real_world


class TestTemplateMethodConceptual:
    """Test the algorithm skeleton with hooks."""

    def test_main_output(self, capsys):
        """Test both subclasses run the same skeleton."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Same client code can work with different subclasses:\n"
            "AbstractClass says: I am doing the bulk of the work\n"
            "ConcreteClass1 says: Implemented Operation1\n"
            "AbstractClass says: But I let subclasses override some operations\n"
            "ConcreteClass1 says: Implemented Operation2\n"
            "AbstractClass says: But I am doing the bulk of the work anyway\n"
            "\n"
            "Same client code can work with different subclasses:\n"
            "AbstractClass says: I am doing the bulk of the work\n"
            "ConcreteClass2 says: Implemented Operation1\n"
            "AbstractClass says: But I let subclasses override some operations\n"
            "ConcreteClass2 says: Overridden Hook1\n"
            "ConcreteClass2 says: Implemented Operation2\n"
            "AbstractClass says: But I am doing the bulk of the work anyway\n"
        )


class TestSocialNetworks:
    """Test posting through the template method."""

    def test_twitter_post(self, capsys):
        """Test the steps run in order and the password is masked."""
        network = real_world.Twitter("bob", "pw", latency=0)

        assert network.post("Hi") is True
        assert capsys.readouterr().out == (
            "\nChecking user's credentials...\n"
            "Name: bob\n"
            "Password: **\n"
            ".....\n\n"
            "Twitter: 'bob' has logged in successfully.\n"
            "Twitter: 'bob' has posted 'Hi'.\n"
            "Twitter: 'bob' has been logged out.\n"
        )

    def test_choose_network(self):
        """Test menu choices."""
        assert isinstance(real_world.choose_network("1", "a", "b", 0), real_world.Facebook)
        assert isinstance(real_world.choose_network(" 2 ", "a", "b", 0), real_world.Twitter)
        with pytest.raises(UnknownChoiceError):
            real_world.choose_network("3", "a", "b", 0)

    def test_main_posts_to_facebook(self, capsys, scripted_input):
        """Test the interactive flow."""
        real_world.main(input_func=scripted_input(["alice", "secret", "Hello", "1"]), latency=0)

        out = capsys.readouterr().out
        assert out.startswith(
            "Username: \nPassword: \nMessage: \n\n"
            "Choose the social network to post the message:\n"
            "1 - Facebook\n"
            "2 - Twitter\n"
        )
        assert "Password: ******\n" in out
        assert out.endswith(
            "Facebook: 'alice' has logged in successfully.\n"
            "Facebook: 'alice' has posted 'Hello'.\n"
            "Facebook: 'alice' has been logged out.\n"
        )

    def test_main_rejects_unknown_choice(self, capsys, scripted_input):
        """Test an invalid menu choice."""
        with pytest.raises(UnknownChoiceError):
            real_world.main(input_func=scripted_input(["alice", "secret", "Hello", "9"]), latency=0)
