"""Unit tests for the sign-up form client."""

import json

import httpx
import pytest

from presentation.client import SignUpForm


def make_form(handler):
    client = httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(handler))
    return SignUpForm(client=client)


def fill(form, email="user@example.com", password="password123", confirm="password123"):
    form.handle_change("email", email)
    form.handle_change("password", password)
    form.handle_change("confirmPassword", confirm)


class TestSignUpForm:
    def test_initial_state(self):
        form = make_form(lambda request: httpx.Response(200, json={}))

        assert form.form_data.email == ""
        assert form.form_data.password == ""
        assert form.form_data.confirm_password == ""
        assert form.loading is False
        assert form.submit_disabled is False
        assert form.submit_label == "Sign Up"
        assert form.response_message is None

    def test_handle_change_unknown_field(self):
        form = make_form(lambda request: httpx.Response(200, json={}))

        with pytest.raises(KeyError):
            form.handle_change("username", "x")

    def test_submit_posts_form_once(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={"success": True, "userId": "abc"})

        form = make_form(handler)
        fill(form)
        form.submit()

        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert requests[0].url.path == "/api/signup"
        assert requests[0].headers["content-type"] == "application/json"
        assert json.loads(requests[0].content) == {
            "email": "user@example.com",
            "password": "password123",
            "confirmPassword": "password123",
        }

    def test_success_message(self):
        form = make_form(lambda request: httpx.Response(201, json={"success": True, "userId": "abc"}))
        fill(form)

        assert form.submit() == "Sign-up successful! User ID: abc"
        assert form.response_message == "Sign-up successful! User ID: abc"

    def test_failure_message_from_body(self):
        form = make_form(lambda request: httpx.Response(400, json={"success": False, "message": "x"}))
        fill(form)

        assert form.submit() == "x"

    def test_failure_without_message(self):
        form = make_form(lambda request: httpx.Response(500, json={"success": False}))
        fill(form)

        assert form.submit() == "An error occurred during sign-up."

    def test_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        form = make_form(handler)
        fill(form)
        message = form.submit()

        assert message.startswith("An error occurred: ")
        assert "connection refused" in message
        assert form.loading is False

    def test_non_json_body(self):
        form = make_form(lambda request: httpx.Response(502, text="Bad Gateway"))
        fill(form)

        assert form.submit().startswith("An error occurred: ")

    def test_null_body(self):
        form = make_form(lambda request: httpx.Response(500, content=b"null"))
        fill(form)

        assert form.submit().startswith("An error occurred: ")
        assert form.loading is False

    @pytest.mark.parametrize("body", [b"[]", b'"x"', b"42"])
    def test_non_object_body(self, body):
        form = make_form(lambda request: httpx.Response(500, content=body))
        fill(form)

        assert form.submit() == "An error occurred during sign-up."
        assert form.loading is False

    def test_password_mismatch_skips_request(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={"success": True, "userId": "abc"})

        form = make_form(handler)
        fill(form, confirm="different")

        assert form.submit() == "Passwords do not match."
        assert requests == []
        assert form.loading is False

    def test_submit_disabled_only_while_request_outstanding(self):
        observed = {}
        holder = {}

        def handler(request):
            observed["loading"] = holder["form"].loading
            observed["disabled"] = holder["form"].submit_disabled
            observed["label"] = holder["form"].submit_label
            observed["message"] = holder["form"].response_message
            return httpx.Response(201, json={"success": True, "userId": "abc"})

        form = make_form(handler)
        holder["form"] = form
        form.response_message = "previous message"
        fill(form)
        form.submit()

        assert observed == {"loading": True, "disabled": True, "label": "Signing Up...", "message": None}
        assert form.loading is False
        assert form.submit_label == "Sign Up"

    def test_re_enabled_after_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out")

        form = make_form(handler)
        fill(form)
        form.submit()

        assert form.submit_disabled is False

    def test_context_manager_closes_client(self):
        client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))

        with SignUpForm(client=client):
            pass

        assert client.is_closed
