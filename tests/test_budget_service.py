from datetime import date, timedelta
import uuid

import pytest

from app.data.budget import BudgetCreate, BudgetFilter, BudgetUpdate
from app.models.budget import BudgetStatus, status_for
from app.models.user import User
from app.services.budget_service import BudgetService, compute_balance
from app.util.errors import BadRequestError, NotFoundError


@pytest.fixture
def owner(db_session):
    user = User(name="Jane Smith", email="janesmith@example.com", hashed_password="x")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def service(db_session):
    return BudgetService(db_session=db_session)


def make_budget(service, owner, **overrides):
    data = {
        "name": "Rent",
        "category": "Housing",
        "initial_amount": 1200,
        "start_date": date(2026, 5, 1),
        "end_date": date(2026, 5, 31),
    }
    data.update(overrides)
    return service.create(owner.id, BudgetCreate(**data))


def test_compute_balance():
    balance = compute_balance(1000, 250)

    assert balance.remaining_amount == 750
    assert balance.percentage_spent_amount == 25.0
    assert balance.percentage_remaining_amount == 75.0


def test_compute_balance_overspent():
    balance = compute_balance(200, 300)

    assert balance.remaining_amount == -100
    assert balance.percentage_spent_amount == 150.0
    assert balance.percentage_remaining_amount == -50.0


def test_compute_balance_rounds_percentages():
    balance = compute_balance(3, 1)

    assert balance.percentage_spent_amount == 33.33
    assert balance.percentage_remaining_amount == 66.67


def test_compute_balance_zero_initial_amount():
    balance = compute_balance(0, 0)

    assert balance.percentage_spent_amount == 0
    assert balance.percentage_remaining_amount == 100


def test_status_for():
    start, end = date(2026, 5, 1), date(2026, 5, 31)

    assert status_for(start, end, today=date(2026, 4, 30)) == BudgetStatus.PENDING
    assert status_for(start, end, today=start) == BudgetStatus.ACTIVE
    assert status_for(start, end, today=end) == BudgetStatus.ACTIVE
    assert status_for(start, end, today=date(2026, 6, 1)) == BudgetStatus.COMPLETED


def test_create_sets_owner_and_defaults(service, owner):
    budget = make_budget(service, owner)

    assert budget.user_id == owner.id
    assert budget.spent_amount == 0
    assert budget.description is None


def test_find_all_orders_newest_first(service, owner):
    older = make_budget(service, owner, start_date=date(2026, 1, 1), end_date=date(2026, 1, 31))
    newer = make_budget(service, owner, start_date=date(2026, 2, 1), end_date=date(2026, 2, 28))

    assert service.find_all(owner.id) == [newer, older]


def test_find_all_combines_filters(service, owner):
    target = make_budget(service, owner, category="Food", start_date=date(2026, 2, 3), end_date=date(2026, 2, 20))
    make_budget(service, owner, category="Food", start_date=date(2026, 3, 3), end_date=date(2026, 3, 20))
    make_budget(service, owner, category="Travel", start_date=date(2026, 2, 3), end_date=date(2026, 2, 20))

    assert service.find_all(owner.id, BudgetFilter(category="FOOD", month=1)) == [target]


def test_find_one_is_scoped_to_owner(service, owner):
    budget = make_budget(service, owner)

    with pytest.raises(NotFoundError):
        service.find_one(budget.id, uuid.uuid4())


def test_update_ignores_null_for_required_fields(service, owner):
    budget = make_budget(service, owner, description="first")

    updated = service.update(budget.id, owner.id, BudgetUpdate(name=None, description=None, spent_amount=10))

    assert updated.name == "Rent"
    assert updated.description is None
    assert updated.spent_amount == 10


def test_update_checks_dates_against_stored_budget(service, owner):
    budget = make_budget(service, owner)

    with pytest.raises(BadRequestError):
        service.update(budget.id, owner.id, BudgetUpdate(start_date=date(2026, 6, 15)))

    moved = service.update(
        budget.id, owner.id, BudgetUpdate(start_date=date(2026, 6, 1), end_date=date(2026, 6, 30))
    )
    assert (moved.start_date, moved.end_date) == (date(2026, 6, 1), date(2026, 6, 30))


def test_remove_deletes_row(service, owner):
    budget = make_budget(service, owner)

    assert service.remove(budget.id, owner.id) == {"message": "Budget deleted successfully"}
    assert service.find_all(owner.id) == []


def test_get_balance_uses_stored_amounts(service, owner):
    budget = make_budget(service, owner, initial_amount=500, spent_amount=125)

    balance = service.get_balance(budget.id, owner.id)

    assert balance.remaining_amount == 375
    assert balance.percentage_spent_amount == 25.0


def test_status_filter_uses_today(service, owner):
    today = date.today()
    make_budget(service, owner, start_date=today - timedelta(days=60), end_date=today - timedelta(days=30))
    current = make_budget(service, owner, start_date=today, end_date=today)

    assert service.find_all(owner.id, BudgetFilter(status=BudgetStatus.ACTIVE)) == [current]
