from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.data.budget import BudgetCreate, BudgetUpdate, BudgetFilter, BudgetOut, BudgetBalanceOut, MessageOut
from app.data.user import TokenPayload
from app.database.index import get_db
from app.models.budget import BudgetStatus
from app.services.budget_service import BudgetService
from app.util.guards import jwt_auth

router = APIRouter(
    prefix="/budgets",
    tags=["Budgets"],
    dependencies=[Depends(jwt_auth)],
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Unauthorized access."}},
)

BUDGET_ID = Path(
    ...,
    description="The unique identifier of the budget (UUID).",
    examples=["b2c6e182-6aef-4c38-8d26-9153d7ebc7d2"],
)
NOT_FOUND = {"description": "Budget not found."}


def get_budget_service(db: Session = Depends(get_db)) -> BudgetService:
    return BudgetService(db_session=db)


@router.post(
    "",
    response_model=BudgetOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a budget",
    responses={
        status.HTTP_201_CREATED: {"description": "Budget created successfully."},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Error: The budget could not be created."},
    },
)
def create(
        budget_create: BudgetCreate,
        user: TokenPayload = Depends(jwt_auth),
        service: BudgetService = Depends(get_budget_service),
):
    return service.create(user.sub, budget_create)


@router.get(
    "",
    response_model=List[BudgetOut],
    summary="List budgets",
    responses={status.HTTP_200_OK: {"description": "Budgets retrieved successfully."}},
)
def find_all(
        category: Optional[str] = Query(None, description="Filter budgets by category name."),
        month: Optional[int] = Query(
            None, ge=0, le=11,
            description="Filter budgets by month 0 - 11 (0 = January, 11 = December).",
        ),
        budget_status: Optional[BudgetStatus] = Query(
            None, alias="status",
            description="Filter budgets by their status (pending, active, completed).",
        ),
        user: TokenPayload = Depends(jwt_auth),
        service: BudgetService = Depends(get_budget_service),
):
    filters = BudgetFilter(category=category, month=month, status=budget_status)
    return service.find_all(user.sub, filters)


@router.get(
    "/{id}",
    response_model=BudgetOut,
    summary="Get a budget",
    responses={
        status.HTTP_200_OK: {"description": "Budget retrieved successfully."},
        status.HTTP_404_NOT_FOUND: NOT_FOUND,
    },
)
def find_one(
        id: UUID = BUDGET_ID,
        user: TokenPayload = Depends(jwt_auth),
        service: BudgetService = Depends(get_budget_service),
):
    return service.find_one(id, user.sub)


@router.patch(
    "/{id}",
    response_model=BudgetOut,
    summary="Update a budget",
    responses={
        status.HTTP_200_OK: {"description": "Budget updated successfully."},
        status.HTTP_404_NOT_FOUND: NOT_FOUND,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Error: The budget could not be updated."},
    },
)
def update(
        budget_update: BudgetUpdate,
        id: UUID = BUDGET_ID,
        user: TokenPayload = Depends(jwt_auth),
        service: BudgetService = Depends(get_budget_service),
):
    return service.update(id, user.sub, budget_update)


@router.delete(
    "/{id}",
    response_model=MessageOut,
    summary="Delete a budget",
    responses={
        status.HTTP_200_OK: {
            "description": "Budget deleted successfully.",
            "content": {"application/json": {"example": {"message": "Budget deleted successfully"}}},
        },
        status.HTTP_404_NOT_FOUND: NOT_FOUND,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Error: The budget could not be deleted."},
    },
)
def remove(
        id: UUID = BUDGET_ID,
        user: TokenPayload = Depends(jwt_auth),
        service: BudgetService = Depends(get_budget_service),
):
    return service.remove(id, user.sub)


@router.get(
    "/{id}/balance",
    response_model=BudgetBalanceOut,
    summary="Get the balance of a budget",
    responses={
        status.HTTP_200_OK: {
            "description": "Budget balance retrieved successfully.",
            "content": {"application/json": {"example": {
                "initial_amount": 1000,
                "spent_amount": 200,
                "percentage_spent_amount": 20.0,
                "remaining_amount": 800,
                "percentage_remaining_amount": 80.0,
            }}},
        },
        status.HTTP_404_NOT_FOUND: {"description": "Budget to calculate the balance not found."},
    },
)
def get_balance(
        id: UUID = BUDGET_ID,
        user: TokenPayload = Depends(jwt_auth),
        service: BudgetService = Depends(get_budget_service),
):
    return service.get_balance(id, user.sub)
