"""SQLAlchemy models for user accounts."""
from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Integer,
    String,
    Text,
    func,
)

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    username = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(BigInteger, unique=True, nullable=True)
    password = Column(Text, nullable=False)
    avatar = Column(String(255), nullable=True)
    uuid = Column(String(36), unique=True, nullable=False)
    status = Column(Integer, default=1, server_default="1", nullable=False)
    is_admin = Column(Integer, default=0, server_default="0", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
