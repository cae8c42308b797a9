"""Authorization guards.

Usage:
    from entitygate.application.guards import OwnershipGuard, PublicGuard
"""

from entitygate.application.guards.ownership_guard import (
    OwnershipGuard,
    PublicGuard,
    check_ownership,
)

__all__ = ["OwnershipGuard", "PublicGuard", "check_ownership"]
