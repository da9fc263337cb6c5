"""Proxy - conceptual example.

A proxy stands in for another object and controls access to it, doing
something before or after the request reaches the original object.
"""

from abc import ABC, abstractmethod


class Subject(ABC):
    """Operations shared by the real subject and the proxy."""

    @abstractmethod
    def request(self) -> None:
        pass


class RealSubject(Subject):
    """Holds the core business logic."""

    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    """
    Same interface as RealSubject. Checks access before forwarding a request
    and logs it afterwards.
    """

    def __init__(self, real_subject: RealSubject):
        self._real_subject = real_subject

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return True

    def log_access(self) -> None:
        print("Proxy: Logging the time of request.", end="")


def client_code(subject: Subject) -> None:
    subject.request()


def main() -> None:
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client_code(real_subject)

    print()

    print("Client: Executing the same client code with a proxy:")
    client_code(Proxy(real_subject))
    print()


if __name__ == "__main__":
    main()
