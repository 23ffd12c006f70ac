"""Flash messages rendered at the top of a page."""

from dataclasses import dataclass, field
from enum import Enum


class FlashLevel(str, Enum):
    ERROR = "error"


@dataclass
class FlashMessage:
    level: FlashLevel
    text: str


@dataclass
class Flash:
    """Collects messages for the page being rendered."""

    messages: list[FlashMessage] = field(default_factory=list)

    def error(self, text: str) -> None:
        self.messages.append(FlashMessage(FlashLevel.ERROR, text))

    def __bool__(self) -> bool:
        return bool(self.messages)
