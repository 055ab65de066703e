from dataclasses import dataclass
from enum import Enum


class FieldKey(str, Enum):
    # Declaration order is form order (first field gets focus after a reset)
    FULL_NAME = "fullName"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirmPassword"


class MessageType(str, Enum):
    ERROR = "error"
    SUCCESS = "success"
    NONE = "none"


class StrengthTier(str, Enum):
    UNSET = "unset"  # empty password; no numeric score applies
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"


@dataclass
class FieldState:
    isValid: bool = False
    touched: bool = False


@dataclass(frozen=True)
class ValidationResult:
    isValid: bool
    message: str = ""
    messageType: MessageType = MessageType.NONE

    def to_dict(self) -> dict:
        return {
            "isValid": self.isValid,
            "message": self.message,
            "messageType": self.messageType.value,
        }


@dataclass(frozen=True)
class StrengthScore:
    score: int
    tier: StrengthTier

    def to_dict(self) -> dict:
        return {"score": self.score, "tier": self.tier.value}
