from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class UserSignUp:
    """Sign-up form input"""

    email: str = ""
    password: str = ""
    confirm_password: str = ""

    def to_payload(self) -> dict:
        return {
            "email": self.email,
            "password": self.password,
            "confirmPassword": self.confirm_password,
        }


@dataclass
class User:
    """Registered user"""

    user_id: str
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class SignUpResult:
    """Outcome of a sign-up attempt"""

    success: bool
    user_id: Optional[str] = None
    message: Optional[str] = None
