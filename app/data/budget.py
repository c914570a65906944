from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from app.models.budget import BudgetStatus


class BudgetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150, examples=["Groceries October"])
    description: Optional[str] = Field(None, max_length=500)
    category: str = Field(..., min_length=1, max_length=100, examples=["Food"])
    initial_amount: float = Field(..., gt=0, examples=[1000])
    spent_amount: float = Field(0.0, ge=0, examples=[200])
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BudgetUpdate(BaseModel):
    # date ordering is checked against the stored budget by the service
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    initial_amount: Optional[float] = Field(None, gt=0)
    spent_amount: Optional[float] = Field(None, ge=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class BudgetFilter(BaseModel):
    category: Optional[str] = None
    month: Optional[int] = Field(None, ge=0, le=11)  # 0 = January
    status: Optional[BudgetStatus] = None


class BudgetOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    category: str
    initial_amount: float
    spent_amount: float
    start_date: date
    end_date: date
    status: BudgetStatus
    user_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BudgetBalanceOut(BaseModel):
    initial_amount: float
    spent_amount: float
    percentage_spent_amount: float
    remaining_amount: float
    percentage_remaining_amount: float


class MessageOut(BaseModel):
    message: str
