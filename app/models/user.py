import uuid
from enum import Enum

from sqlalchemy import Column, String, Boolean, DateTime, Enum as SqlEnum, Uuid, func
from sqlalchemy.orm import relationship

from ..database.index import Base


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(150), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    onboarding = Column(Boolean, nullable=False, default=False)
    role = Column(SqlEnum(Role, values_callable=lambda roles: [r.value for r in roles]),
                  nullable=False, default=Role.USER)
    budgets = relationship("Budget", back_populates="user", cascade="all, delete-orphan")
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
