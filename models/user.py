from dataclasses import dataclass

ROLE_ADMIN = 'ROLE_ADMIN'


@dataclass
class CurrentUser:
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
