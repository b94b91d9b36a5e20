"""
Sign-up form client

Holds the state of the three-field sign-up form and submits it as JSON to
the sign-up endpoint, turning every outcome into a single display message.

Usage:
    with SignUpForm("http://localhost:8000") as form:
        form.handle_change("email", "user@example.com")
        form.handle_change("password", "s3cret-pass")
        form.handle_change("confirmPassword", "s3cret-pass")
        print(form.submit())
"""
import logging
from typing import Optional

import httpx

from domain.entities import UserSignUp

logger = logging.getLogger(__name__)

SIGNUP_PATH = "/api/signup"

FIELD_NAMES = {
    "email": "email",
    "password": "password",
    "confirmPassword": "confirm_password",
}


class SignUpForm:
    """Client-side sign-up form state and submission"""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self.form_data = UserSignUp()
        self.loading = False
        self.response_message: Optional[str] = None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def handle_change(self, name: str, value: str) -> None:
        """Update one input by its form name (email, password, confirmPassword)"""
        setattr(self.form_data, FIELD_NAMES[name], value)

    @property
    def submit_disabled(self) -> bool:
        return self.loading

    @property
    def submit_label(self) -> str:
        return "Signing Up..." if self.loading else "Sign Up"

    def submit(self) -> str:
        """
        Submit the form and return the message to display

        The submit control stays disabled only while the request is
        outstanding.
        """
        self.loading = True
        self.response_message = None

        try:
            if self.form_data.password != self.form_data.confirm_password:
                self.response_message = "Passwords do not match."
                return self.response_message

            res = self._client.post(SIGNUP_PATH, json=self.form_data.to_payload())
            result = res.json()
            if result is None:
                raise ValueError("response body is null")
            if not isinstance(result, dict):
                result = {}

            if result.get("success"):
                self.response_message = f"Sign-up successful! User ID: {result.get('userId')}"
            else:
                self.response_message = result.get("message") or "An error occurred during sign-up."
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Sign-up request failed: {e}")
            self.response_message = f"An error occurred: {e}"
        finally:
            self.loading = False

        return self.response_message

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
