from datetime import date
from typing import Any, Protocol, TypeVar

import dacite

from repositories.errors import MalformedResponseError

T = TypeVar('T')


class TokenProvider(Protocol):
    def get_token(self) -> str: ...


class StaticTokenProvider:
    def __init__(self, token: str) -> None:
        self.token = token

    def get_token(self) -> str:
        return self.token


def to_camel_case(name: str) -> str:
    head, *tail = name.split('_')
    return head + ''.join(part.capitalize() for part in tail)


def _level_counts(data: dict[Any, int]) -> dict[int, int]:
    # JSON object keys are always strings
    return {int(key): value for key, value in data.items()}


DACITE_CONFIG = dacite.Config(
    convert_key=to_camel_case,
    type_hooks={
        date: date.fromisoformat,
        float: float,
        dict[int, int]: _level_counts,
    },
)


def from_json(data_class: type[T], data: Any) -> T:  # noqa: ANN401
    try:
        return dacite.from_dict(data_class=data_class, data=data, config=DACITE_CONFIG)
    except (dacite.DaciteError, TypeError, ValueError) as err:
        raise MalformedResponseError(f'Unexpected {data_class.__name__} payload: {err}') from err
