"""Factory Method - real-world example: social network posters.

The poster base class holds the posting workflow. Each subclass decides which
network connector the workflow talks to.
"""

from abc import ABC, abstractmethod


class SocialNetworkConnector(ABC):
    @abstractmethod
    def log_in(self) -> None:
        pass

    @abstractmethod
    def log_out(self) -> None:
        pass

    @abstractmethod
    def create_post(self, content: str) -> None:
        pass


class FacebookConnector(SocialNetworkConnector):
    def __init__(self, login: str, password: str):
        self.login = login
        self.password = password

    def log_in(self) -> None:
        print(f"Send HTTP API request to log in user {self.login} with password {self.password}")

    def log_out(self) -> None:
        print(f"Send HTTP API request to log out user {self.login}")

    def create_post(self, content: str) -> None:
        print("Send HTTP API requests to create a post in Facebook timeline.")


class LinkedInConnector(SocialNetworkConnector):
    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def log_in(self) -> None:
        print(f"Send HTTP API request to log in user {self.email} with password {self.password}")

    def log_out(self) -> None:
        print(f"Send HTTP API request to log out user {self.email}")

    def create_post(self, content: str) -> None:
        print("Send HTTP API requests to create a post in LinkedIn timeline.")


class SocialNetworkPoster(ABC):
    """Creator: posts content through whatever connector the subclass makes."""

    @abstractmethod
    def get_social_network(self) -> SocialNetworkConnector:
        pass

    def post(self, content: str) -> None:
        network = self.get_social_network()
        network.log_in()
        network.create_post(content)
        network.log_out()


class FacebookPoster(SocialNetworkPoster):
    def __init__(self, login: str, password: str):
        self.login = login
        self.password = password

    def get_social_network(self) -> SocialNetworkConnector:
        return FacebookConnector(self.login, self.password)


class LinkedInPoster(SocialNetworkPoster):
    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def get_social_network(self) -> SocialNetworkConnector:
        return LinkedInConnector(self.email, self.password)


def client_code(creator: SocialNetworkPoster) -> None:
    creator.post("Hello world!")
    creator.post("I had a large hamburger this morning!")


def main() -> None:
    print("Testing ConcreteCreator1:")
    client_code(FacebookPoster("john_smith", "******"))
    print("\n")

    print("Testing ConcreteCreator2:")
    client_code(LinkedInPoster("john_smith@example.com", "******"))


if __name__ == "__main__":
    main()
