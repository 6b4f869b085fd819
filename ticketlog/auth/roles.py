# ticketlog/auth/roles.py
import enum


class Role(str, enum.Enum):
    OWNER = "Owner"
    OPERATOR = "Operator"
    TEKNISI = "Teknisi"


PRIVILEGED_ROLES = frozenset({Role.OWNER, Role.OPERATOR})


def landing_page(role: Role) -> str:
    """Page the browser is sent to after login."""
    if role in PRIVILEGED_ROLES:
        return "/dashboard.html"
    return "/activity.html"
