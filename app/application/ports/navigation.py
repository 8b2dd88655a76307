from abc import ABC, abstractmethod


class NavigationPort(ABC):
    @abstractmethod
    def go_to(self, route: str) -> None:
        raise NotImplementedError
