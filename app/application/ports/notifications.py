from abc import ABC, abstractmethod


class NotificationPort(ABC):
    @abstractmethod
    def notify_success(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def notify_error(self, message: str) -> None:
        raise NotImplementedError
