"""
Conceptual Singleton - The minimal guarded singleton.

Clients never construct ``Singleton`` directly; they ask for it through
``get_instance()`` and always receive the same object.
"""

from singletons.base_singleton import GuardedSingleton


class Singleton(GuardedSingleton):
    """A singleton with nothing but its business logic."""

    def some_business_logic(self) -> str:
        return f"{self.__class__.__name__} handled a request"


def client_code() -> bool:
    """Fetch the instance twice and report whether both are the same object."""
    s1 = Singleton.get_instance()
    s2 = Singleton.get_instance()
    if s1 is s2:
        print("Singleton works, both variables contain the same instance.")
        return True
    print("Singleton failed, variables contain different instances.")
    return False


def main() -> bool:
    return client_code()
