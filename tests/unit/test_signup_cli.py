"""Unit tests for the sign-up command line script."""

from unittest.mock import patch

import httpx

from presentation.client import SignUpForm
from scripts import signup


def make_form(response):
    client = httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(lambda request: response))
    return SignUpForm(client=client)


class TestSignUpCli:
    def test_parse_args_defaults(self):
        args = signup.parse_args(["--email", "user@example.com"])

        assert args.email == "user@example.com"
        assert args.base_url == "http://localhost:8000"

    def test_success_exit_code(self, capsys):
        form = make_form(httpx.Response(201, json={"success": True, "userId": "abc"}))

        with patch("scripts.signup.getpass.getpass", side_effect=["password123", "password123"]):
            exit_code = signup.main(["--email", "user@example.com"], form=form)

        assert exit_code == 0
        assert "Sign-up successful! User ID: abc" in capsys.readouterr().out

    def test_failure_exit_code(self, capsys):
        form = make_form(httpx.Response(409, json={"success": False, "message": "Email is already registered."}))

        with patch("scripts.signup.getpass.getpass", side_effect=["password123", "password123"]):
            exit_code = signup.main(["--email", "user@example.com"], form=form)

        assert exit_code == 1
        assert "Email is already registered." in capsys.readouterr().out
