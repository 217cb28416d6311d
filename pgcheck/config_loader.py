import json
import logging
import os
from typing import Sequence, Tuple

from dotenv import load_dotenv, find_dotenv

from pgcheck.checker import ConnectionTarget

load_dotenv(find_dotenv(usecwd=True))

logger = logging.getLogger(__name__)

DATABASES = ("orders_db", "payments_db", "inventory_db")
USERS = ("orders_user", "payments_user", "inventory_user")
PASSWORDS = ("orders_pass", "payments_pass", "inventory_pass")

DEFAULT_HOST = "localhost"
DEFAULT_PORT = "5432"

CONFIG_ENV = "PGCHECK_CONFIG"


def build_targets(databases: Sequence[str], users: Sequence[str], passwords: Sequence[str],
                  host: str = DEFAULT_HOST, port: str = DEFAULT_PORT) -> Tuple[ConnectionTarget, ...]:
    """Pairs the three lists by index into connection targets."""
    if not (len(databases) == len(users) == len(passwords)):
        raise ValueError(
            f"databases, users and passwords must have equal length "
            f"(got {len(databases)}, {len(users)}, {len(passwords)})"
        )
    return tuple(
        ConnectionTarget(host=host, port=str(port), database=db, username=user, password=pwd)
        for db, user, pwd in zip(databases, users, passwords)
    )


def _read_config_file(path):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at {path}")
    with open(path, 'r') as f:
        return json.load(f)


def load_targets() -> Tuple[ConnectionTarget, ...]:
    """
    Resolves the targets to check.

    Order of precedence (highest first):
    - POSTGRES_HOST / POSTGRES_PORT environment variables (host and port only)
    - JSON file named by PGCHECK_CONFIG
    - built-in defaults
    """
    config = {}
    path = os.getenv(CONFIG_ENV)
    if path:
        config = _read_config_file(path)
        logger.info(f"Loaded connection targets from {path}")

    host = os.getenv("POSTGRES_HOST", config.get("host", DEFAULT_HOST))
    port = os.getenv("POSTGRES_PORT", config.get("port", DEFAULT_PORT))

    if "targets" in config:
        entries = config["targets"]
        databases = [e["database"] for e in entries]
        users = [e["user"] for e in entries]
        passwords = [e["password"] for e in entries]
    else:
        databases, users, passwords = DATABASES, USERS, PASSWORDS

    logger.debug(f"Checking {len(databases)} database(s) on {host}:{port}")
    return build_targets(databases, users, passwords, host=host, port=port)
