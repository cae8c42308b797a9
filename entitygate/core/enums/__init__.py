"""Core enums package.

Usage:
    from entitygate.core.enums import ErrorCode, Environment
"""

from entitygate.core.enums.environment import Environment
from entitygate.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
