from dataclasses import dataclass
from enum import Enum


class NotificationLevel(Enum):
    SUCCESS = 'success'
    ERROR = 'error'
    INFO = 'info'


@dataclass
class Notification:
    message: str
    level: NotificationLevel
    status: int | None = None

    @property
    def ok(self) -> bool:
        return self.level != NotificationLevel.ERROR

    @classmethod
    def success(cls, message: str) -> 'Notification':
        return cls(message, NotificationLevel.SUCCESS)

    @classmethod
    def info(cls, message: str) -> 'Notification':
        return cls(message, NotificationLevel.INFO)

    @classmethod
    def error(cls, message: str, status: int | None = None) -> 'Notification':
        return cls(message, NotificationLevel.ERROR, status)
