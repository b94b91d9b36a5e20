import logging
import uuid
from typing import Optional

from config import env
from domain.entities import SignUpResult, User, UserSignUp
from domain.repositories import DuplicateUserError, UserRepository
from domain.services.password_hasher import Argon2idPasswordHasher

logger = logging.getLogger(__name__)


class SignUpError(Exception):
    """Base class for sign-up failures that map to a client error"""

    status_code = 400
    message = "An error occurred during sign-up."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class PasswordMismatchError(SignUpError):
    message = "Passwords do not match."


class InvalidEmailError(SignUpError):
    message = "Invalid email address."


class WeakPasswordError(SignUpError):
    message = "Password is too short."


class EmailAlreadyRegisteredError(SignUpError):
    status_code = 409
    message = "Email is already registered."


class SignUpUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        min_password_length: Optional[int] = None,
        password_hasher: Optional[Argon2idPasswordHasher] = None,
    ):
        self.user_repository = user_repository
        if min_password_length is None:
            min_password_length = env.get_min_password_length()
        self.min_password_length = min_password_length
        self.password_hasher = password_hasher or Argon2idPasswordHasher()

    def execute(self, form: UserSignUp) -> SignUpResult:
        """
        Register a new user from an already format-checked sign-up form

        Raises:
            SignUpError: when the form is rejected
        """
        email = form.email.strip().lower()

        if form.password != form.confirm_password:
            raise PasswordMismatchError()
        if len(form.password) < self.min_password_length:
            raise WeakPasswordError(f"Password must be at least {self.min_password_length} characters.")
        if self.user_repository.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError()

        user = User(user_id=uuid.uuid4().hex, email=email, password_hash=self.password_hasher.hash(form.password))
        try:
            self.user_repository.add(user)
        except DuplicateUserError as e:
            raise EmailAlreadyRegisteredError() from e

        logger.info(f"Registered user {user.user_id}")
        return SignUpResult(success=True, user_id=user.user_id)
