"""
Role-based authorization for tenant resources.

The permission matrix is data, consulted by a single `authorize` function, so the
policy can be audited and tested without touching persistence.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping

from scheduling_api.core.errors import AuthorizationError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    STAFF = "staff"


class ClientAction(str, Enum):
    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_READERS = frozenset({Role.OWNER.value, Role.ADMIN.value, Role.STAFF.value})
_WRITERS = frozenset({Role.OWNER.value, Role.ADMIN.value})

CLIENT_POLICY: Mapping[ClientAction, FrozenSet[str]] = MappingProxyType(
    {
        ClientAction.LIST: _READERS,
        ClientAction.READ: _READERS,
        ClientAction.CREATE: _WRITERS,
        ClientAction.UPDATE: _WRITERS,
        ClientAction.DELETE: frozenset({Role.OWNER.value}),
    }
)

_DENIAL_REASONS: Mapping[ClientAction, str] = MappingProxyType(
    {
        ClientAction.LIST: "Unauthorized: unknown role cannot view clients",
        ClientAction.READ: "Unauthorized: unknown role cannot view clients",
        ClientAction.CREATE: "Unauthorized: only owners or admins can create clients",
        ClientAction.UPDATE: "Unauthorized: only owners or admins can update clients",
        ClientAction.DELETE: "Unauthorized: only the owner can delete clients",
    }
)


# PUBLIC_INTERFACE
def is_allowed(role: str, action: ClientAction) -> bool:
    """Return True when `role` may perform `action` on clients."""
    return role in CLIENT_POLICY[action]


# PUBLIC_INTERFACE
def authorize(role: str, action: ClientAction) -> None:
    """
    Ensure `role` may perform `action`.

    Raises:
        AuthorizationError: with a human-readable reason when the role is not allowed.
    """
    if is_allowed(role, action):
        return
    logger.warning("Role %r denied '%s' on clients", role, action.value)
    raise AuthorizationError(
        _DENIAL_REASONS[action],
        details={"action": action.value, "role": role},
    )
