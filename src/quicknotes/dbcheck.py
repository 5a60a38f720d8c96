"""Smoke-test a MongoDB connection string.

Reads MONGODB_URI from the environment (or a .env file), connects, and lists
the available databases. Exits non-zero with troubleshooting hints on failure.
Not used by the API server.
"""

import re
import sys

from pydantic_settings import BaseSettings
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from quicknotes.logging import setup_logging

CREDENTIALS_RE = re.compile(r"//.*:.*@")
SERVER_SELECTION_TIMEOUT_MS = 10_000

HINTS = [
    "Is your password correct in .env file?",
    "Have you added your IP to Network Access?",
    "Is the cluster name correct? (note-app-cluster)",
]


class DbCheckConfig(BaseSettings):
    """Database check settings loaded from environment variables."""

    mongodb_uri: str | None = None

    model_config = {
        "env_file": [".env"],
        "extra": "ignore",
    }


def mask_credentials(uri: str) -> str:
    """Hide the user:password part of a connection string."""
    return CREDENTIALS_RE.sub("//USERNAME:PASSWORD@", uri)


def list_databases(uri: str) -> list[str]:
    """Ping the server behind uri and return its database names."""
    client: MongoClient[dict[str, object]] = MongoClient(uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)
    try:
        client.admin.command("ping")
        return client.list_database_names()
    finally:
        client.close()


def main() -> int:
    setup_logging(debug=False)
    config = DbCheckConfig()

    print("Testing MongoDB connection...")
    try:
        if not config.mongodb_uri:
            raise ValueError("MONGODB_URI is not set")
        print(f"Connection string: {mask_credentials(config.mongodb_uri)}")
        names = list_databases(config.mongodb_uri)
    except (ValueError, PyMongoError) as e:
        print(f"✗ Connection failed: {e}")
        print("\nCheck these:")
        for number, hint in enumerate(HINTS, start=1):
            print(f"{number}. {hint}")
        return 1

    print("✓ Connected to MongoDB successfully!")
    print(f"Available databases: {names}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
