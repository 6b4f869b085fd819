# ticketlog/auth/policy.py
"""Role and ownership rules.

Route gates go through `require`; instance checks run after the row is loaded.
"""
from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, HTTPException

from ticketlog.auth.identity import Identity, get_identity
from ticketlog.auth.roles import PRIVILEGED_ROLES, Role


def is_authenticated(identity: Identity | None) -> bool:
    return identity is not None


def is_admin(identity: Identity | None) -> bool:
    return identity is not None and identity.role is Role.OWNER


def is_owner_or_operator(identity: Identity | None) -> bool:
    return identity is not None and identity.role in PRIVILEGED_ROLES


def is_self(identity: Identity | None, claimed_owner: str | None) -> bool:
    """Exact self match, no privileged override."""
    return identity is not None and identity.username == claimed_owner


def can_access(identity: Identity | None, owner: str | None) -> bool:
    return is_self(identity, owner) or is_owner_or_operator(identity)


@dataclass(frozen=True)
class Gate:
    predicate: Callable[[Identity | None], bool]
    status_code: int
    message: str


AUTHENTICATED = Gate(is_authenticated, 401, "Unauthorized: Please log in")
ADMIN = Gate(is_admin, 403, "Forbidden: Owner access required")
OWNER_OR_OPERATOR = Gate(is_owner_or_operator, 403, "Forbidden: Owner or Operator access required")


def check_gates(identity: Identity | None, *gates: Gate) -> Identity:
    for gate in gates:
        if not gate.predicate(identity):
            raise HTTPException(status_code=gate.status_code, detail=gate.message)
    return identity


def require(*gates: Gate):
    """Dependency factory: run ``gates`` in order against the caller's identity."""

    def _check(identity: Identity | None = Depends(get_identity)) -> Identity:
        return check_gates(identity, *gates)

    return _check


current_identity = require(AUTHENTICATED)
admin_identity = require(AUTHENTICATED, ADMIN)
privileged_identity = require(AUTHENTICATED, OWNER_OR_OPERATOR)


def ensure_can_access(identity: Identity | None, owner: str | None, action: str) -> None:
    if not can_access(identity, owner):
        raise HTTPException(
            status_code=403,
            detail=f"Forbidden: You do not have permission to {action}.",
        )


def ensure_self(identity: Identity | None, claimed_owner: str | None, message: str) -> None:
    if not is_self(identity, claimed_owner):
        raise HTTPException(status_code=403, detail=message)
