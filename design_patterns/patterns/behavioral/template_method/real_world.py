"""Template Method - real-world example: posting to a social network.

``SocialNetwork.post`` is the template method: log in, send the message,
log out. Each network implements the individual steps. The user picks the
network interactively.
"""

import time
from abc import ABC, abstractmethod
from typing import Callable

from design_patterns.domain.core.exceptions import UnknownChoiceError


def simulate_network_latency(latency: float = 1.0) -> None:
    """Print five dots, waiting ``latency`` seconds before each."""
    for _ in range(5):
        print(".", end="", flush=True)
        if latency > 0:
            time.sleep(latency)


class SocialNetwork(ABC):
    def __init__(self, username: str, password: str, latency: float = 1.0):
        self.username = username
        self.password = password
        self.latency = latency

    def post(self, message: str) -> bool:
        """Publish a message; returns whether it was posted."""
        if self.log_in(self.username, self.password):
            result = self.send_data(message)
            self.log_out()
            return result
        return False

    @abstractmethod
    def log_in(self, username: str, password: str) -> bool:
        pass

    @abstractmethod
    def send_data(self, message: str) -> bool:
        pass

    @abstractmethod
    def log_out(self) -> None:
        pass

    def _check_credentials(self) -> None:
        print("\nChecking user's credentials...")
        print(f"Name: {self.username}")
        print(f"Password: {'*' * len(self.password)}")
        simulate_network_latency(self.latency)


class Facebook(SocialNetwork):
    def log_in(self, username: str, password: str) -> bool:
        self._check_credentials()
        print(f"\n\nFacebook: '{self.username}' has logged in successfully.")
        return True

    def send_data(self, message: str) -> bool:
        print(f"Facebook: '{self.username}' has posted '{message}'.")
        return True

    def log_out(self) -> None:
        print(f"Facebook: '{self.username}' has been logged out.")


class Twitter(SocialNetwork):
    def log_in(self, username: str, password: str) -> bool:
        self._check_credentials()
        print(f"\n\nTwitter: '{self.username}' has logged in successfully.")
        return True

    def send_data(self, message: str) -> bool:
        print(f"Twitter: '{self.username}' has posted '{message}'.")
        return True

    def log_out(self) -> None:
        print(f"Twitter: '{self.username}' has been logged out.")


NETWORKS = {"1": Facebook, "2": Twitter}


def choose_network(choice: str, username: str, password: str, latency: float = 1.0) -> SocialNetwork:
    """
    Create the network for a menu choice.

    Raises:
        UnknownChoiceError: If the choice is not on the menu
    """
    network_class = NETWORKS.get(choice.strip())
    if network_class is None:
        raise UnknownChoiceError(choice)
    return network_class(username, password, latency)


def main(input_func: Callable[..., str] = input, latency: float = 1.0) -> None:
    print("Username: ")
    username = input_func()
    print("Password: ")
    password = input_func()
    print("Message: ")
    message = input_func()

    print("\nChoose the social network to post the message:\n"
          "1 - Facebook\n"
          "2 - Twitter")
    choice = input_func()

    network = choose_network(choice, username, password, latency)
    network.post(message)


if __name__ == "__main__":
    main()
