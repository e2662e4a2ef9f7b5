from dataclasses import dataclass
from typing import IO


@dataclass
class ProfilePicture:
    filename: str
    stream: IO[bytes]
    content_type: str
