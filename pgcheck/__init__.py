"""
pgcheck
-------
One-pass connectivity check against a fixed set of PostgreSQL databases.
"""

from pgcheck.checker import CheckResult, CheckStatus, ConnectionTarget, check_all, check_one

__all__ = ["CheckResult", "CheckStatus", "ConnectionTarget", "check_all", "check_one"]
