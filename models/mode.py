from enum import Enum


class DirectoryMode(Enum):
    BASIC = 'basic'
    SCOPED = 'scoped'

    @property
    def searches_email(self) -> bool:
        return self == DirectoryMode.SCOPED
