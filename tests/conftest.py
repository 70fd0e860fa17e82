"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real Oracle instance
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ORACLE_CONNECT_STRING", "localhost:1/NOPE")
os.environ.setdefault("AUTH_USER", "admin")
os.environ.setdefault("AUTH_PASS", "secreto")
os.environ.setdefault("RELAY_TOKEN", "tok-test")
