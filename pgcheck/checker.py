"""
Connectivity Checker
--------------------
Opens one connection per target, reports the outcome on the console and
releases the connection straight away. Targets are checked one at a time,
in the order given, and a failing target never stops the pass.
"""

import enum
import logging
import sys
from contextlib import closing
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pgcheck.db.postgres import DriverError

logger = logging.getLogger(__name__)

URL_TEMPLATE = "postgresql://{host}:{port}/{database}"
NULL_OR_CLOSED = "Connection is null or closed"


@dataclass(frozen=True)
class ConnectionTarget:
    host: str
    port: str
    database: str
    username: str
    password: str

    @property
    def url(self) -> str:
        return URL_TEMPLATE.format(host=self.host, port=self.port, database=self.database)


class CheckStatus(enum.Enum):
    SUCCESS = "success"
    NULL_OR_CLOSED = "null_or_closed"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    target: ConnectionTarget
    status: CheckStatus
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is CheckStatus.SUCCESS

    def render(self) -> str:
        if self.ok:
            return "✓ SUCCESS"
        return f"✗ FAILED - {self.message}"


def check_one(target: ConnectionTarget, connector, stream=None) -> CheckResult:
    """
    Checks a single target.

    Writes "Testing connection to <db>... " and then, on the same line,
    the outcome. Only DriverError is caught; anything else propagates.

    Args:
        target: where to connect and with which credentials.
        connector: object with connect(url, username, password) returning
            a handle that has is_open() and close().
        stream: text stream for the console lines (defaults to stdout).
    """
    out = stream if stream is not None else sys.stdout
    out.write(f"Testing connection to {target.database}... ")

    try:
        handle = connector.connect(target.url, target.username, target.password)
    except DriverError as e:
        result = CheckResult(target, CheckStatus.ERROR, str(e))
    else:
        if handle is not None and handle.is_open():
            result = CheckResult(target, CheckStatus.SUCCESS)
            try:
                with closing(handle):
                    out.write(result.render() + "\n")
            except DriverError as e:
                # outcome already reported; a failed release does not change it
                logger.info(f"{target.database}: close failed: {e}")
            else:
                logger.debug(f"{target.database}: connection closed")
            return result
        result = CheckResult(target, CheckStatus.NULL_OR_CLOSED, NULL_OR_CLOSED)

    out.write(result.render() + "\n")
    return result


def check_all(targets: Sequence[ConnectionTarget], connector, stream=None) -> List[CheckResult]:
    """Runs check_one over every target in order and returns the results."""
    return [check_one(target, connector, stream=stream) for target in targets]
