"""Domain protocols (ports).

Usage:
    from entitygate.domain.protocols import EntityReader, OwnershipProvider, ReadGuard
"""

from entitygate.domain.protocols.entity_protocols import (
    Entity,
    EntityCreator,
    EntityDeleter,
    EntityReader,
    EntityStore,
    EntityWriter,
    read_required,
    write_required,
)
from entitygate.domain.protocols.guard_protocols import (
    CreateGuard,
    DeleteGuard,
    EntityGuard,
    ReadGuard,
    WriteGuard,
)
from entitygate.domain.protocols.logger_protocol import LoggerProtocol
from entitygate.domain.protocols.ownership_protocol import OwnershipProvider

__all__ = [
    "Entity",
    "EntityReader",
    "EntityWriter",
    "EntityCreator",
    "EntityDeleter",
    "EntityStore",
    "read_required",
    "write_required",
    "OwnershipProvider",
    "ReadGuard",
    "WriteGuard",
    "CreateGuard",
    "DeleteGuard",
    "EntityGuard",
    "LoggerProtocol",
]
