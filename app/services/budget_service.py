from datetime import date
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, extract, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.budget import BudgetCreate, BudgetUpdate, BudgetFilter, BudgetBalanceOut
from app.models.budget import Budget, BudgetStatus
from app.util.errors import BadRequestError, InternalServerError, NotFoundError

logger = logging.getLogger(__name__)


def compute_balance(initial_amount: float, spent_amount: float) -> BudgetBalanceOut:
    """
    Spent/remaining split of a budget. An overspent budget has a negative
    remaining amount and a percentage spent above 100.
    """
    percentage_spent = round(spent_amount / initial_amount * 100, 2) if initial_amount else 0.0
    return BudgetBalanceOut(
        initial_amount=initial_amount,
        spent_amount=spent_amount,
        percentage_spent_amount=percentage_spent,
        remaining_amount=initial_amount - spent_amount,
        percentage_remaining_amount=round(100 - percentage_spent, 2),
    )


class BudgetService():
    def __init__(self, db_session: Session):
        if not db_session:
            raise ValueError("Database session is not initialized.")
        self.db = db_session

    def create(self, user_id: UUID, budget_create: BudgetCreate) -> Budget:
        budget = Budget(user_id=user_id, **budget_create.model_dump())
        self.db.add(budget)
        self._commit("The budget could not be created")
        self.db.refresh(budget)
        logger.info("Created budget %s for user %s", budget.id, user_id)
        return budget

    def find_all(self, user_id: UUID, filters: Optional[BudgetFilter] = None) -> list[Budget]:
        filters = filters or BudgetFilter()
        query = self.db.query(Budget).filter(Budget.user_id == user_id)
        if filters.category:
            query = query.filter(func.lower(Budget.category) == filters.category.lower())
        if filters.month is not None:
            query = query.filter(extract("month", Budget.start_date) == filters.month + 1)
        if filters.status is not None:
            query = query.filter(self._status_clause(filters.status))
        return query.order_by(Budget.start_date.desc(), Budget.created_at.desc()).all()

    def find_one(self, budget_id: UUID, user_id: UUID, not_found_message: Optional[str] = None) -> Budget:
        budget = (
            self.db.query(Budget)
            .filter(Budget.id == budget_id, Budget.user_id == user_id)
            .first()
        )
        if budget is None:
            raise NotFoundError(not_found_message or f"Budget with id {budget_id} not found")
        return budget

    def update(self, budget_id: UUID, user_id: UUID, budget_update: BudgetUpdate) -> Budget:
        budget = self.find_one(budget_id, user_id)
        changes = budget_update.model_dump(exclude_unset=True)

        start_date = changes.get("start_date") or budget.start_date
        end_date = changes.get("end_date") or budget.end_date
        if end_date < start_date:
            raise BadRequestError("end_date must not be before start_date")

        for field, value in changes.items():
            if value is None and field != "description":
                continue
            setattr(budget, field, value)
        self._commit("The budget could not be updated")
        self.db.refresh(budget)
        logger.info("Updated budget %s (%s)", budget.id, ", ".join(changes) or "no changes")
        return budget

    def remove(self, budget_id: UUID, user_id: UUID) -> dict:
        budget = self.find_one(budget_id, user_id)
        self.db.delete(budget)
        self._commit("The budget could not be deleted")
        logger.info("Deleted budget %s", budget_id)
        return {"message": "Budget deleted successfully"}

    def get_balance(self, budget_id: UUID, user_id: UUID) -> BudgetBalanceOut:
        budget = self.find_one(budget_id, user_id, "Budget to calculate the balance not found")
        return compute_balance(budget.initial_amount, budget.spent_amount)

    def _commit(self, failure_message: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(failure_message)
            raise InternalServerError(failure_message)

    @staticmethod
    def _status_clause(status: BudgetStatus, today: Optional[date] = None):
        today = today or date.today()
        if status == BudgetStatus.PENDING:
            return Budget.start_date > today
        if status == BudgetStatus.COMPLETED:
            return Budget.end_date < today
        return and_(Budget.start_date <= today, Budget.end_date >= today)
