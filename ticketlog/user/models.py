# ticketlog/user/models.py
from sqlalchemy import Column, DateTime, Enum, Integer, String
from ticketlog.auth.roles import Role
from ticketlog.core.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    full_name = Column(String(255), nullable=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    phone = Column(String(50), nullable=True)
    role = Column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            length=20,
            validate_strings=True,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        default=Role.TEKNISI,
        nullable=False,
    )
    photo = Column(String(512), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
