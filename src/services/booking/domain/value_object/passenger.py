import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Passenger:
    """搭乗者（代表者の氏名・メールアドレス）"""

    name: str
    email: str

    EMAIL_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^@\s]+@[^@\s]+$")

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Passenger name cannot be empty")
        if not self.EMAIL_PATTERN.match(self.email):
            raise ValueError(f"Invalid email address: {self.email}")
