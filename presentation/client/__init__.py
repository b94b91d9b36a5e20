from .signup_form import SignUpForm

__all__ = ["SignUpForm"]
