#!/usr/bin/env python3
"""
Produce a password hash for the API's Basic authentication account.

The printed value (PBKDF2-HMAC-SHA256, format "salthex$hashhex") goes into
the BASIC_AUTH_PASSWORD_HASH environment variable; the account name goes
into BASIC_AUTH_USERNAME.

Usage:
    python create_password_hash.py --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from sons_magicos_api.app.core.security import hash_password


def main() -> None:
    ap = argparse.ArgumentParser(description="Hash a password for BASIC_AUTH_PASSWORD_HASH.")
    ap.add_argument("--password", help="Password to hash. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    password = args.password or getpass.getpass("Enter password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)
    print(hash_password(password))


if __name__ == "__main__":
    main()
