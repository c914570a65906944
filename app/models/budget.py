import uuid
from datetime import date
from enum import Enum
from typing import Optional

from sqlalchemy import Column, String, Float, Date, DateTime, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship

from ..database.index import Base
from .user import User


class BudgetStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


def status_for(start_date: date, end_date: date, today: Optional[date] = None) -> BudgetStatus:
    today = today or date.today()
    if today < start_date:
        return BudgetStatus.PENDING
    if today > end_date:
        return BudgetStatus.COMPLETED
    return BudgetStatus.ACTIVE


class Budget(Base):
    __tablename__ = "budgets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(150), nullable=False)
    description = Column(String(500), nullable=True)
    category = Column(String(100), nullable=False, index=True)
    initial_amount = Column(Float, nullable=False)
    spent_amount = Column(Float, nullable=False, default=0.0)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    user = relationship(User, back_populates="budgets")
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # derived from the dates on every read so it never goes stale
    @property
    def status(self) -> BudgetStatus:
        return status_for(self.start_date, self.end_date)

    def __repr__(self):
        return f"<Budget(id={self.id}, name='{self.name}', category='{self.category}', initial_amount={self.initial_amount}, spent_amount={self.spent_amount})>"
