#!/usr/bin/env python
"""
Sign up a user against a running API from the command line.

Usage:
  python scripts/signup.py --email user@example.com
  python scripts/signup.py --base-url http://localhost:8000 --email user@example.com

The password is prompted for twice (password and confirmation).
"""
from __future__ import annotations

import argparse
import getpass
import logging
import sys
from pathlib import Path
from typing import List, Optional

project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from presentation.client import SignUpForm  # noqa: E402

logger = logging.getLogger("signup")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a user account through the sign-up endpoint")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL (default: http://localhost:8000)")
    parser.add_argument("--email", required=True, help="Email address to register")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, form: Optional[SignUpForm] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(message)s")

    form = form or SignUpForm(base_url=args.base_url)
    with form:
        form.handle_change("email", args.email)
        form.handle_change("password", getpass.getpass("Password: "))
        form.handle_change("confirmPassword", getpass.getpass("Confirm Password: "))
        message = form.submit()

    print(message)
    return 0 if message.startswith("Sign-up successful!") else 1


if __name__ == "__main__":
    sys.exit(main())
