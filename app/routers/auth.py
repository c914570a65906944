from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.data.user import UserCreate, UserOut, Token, TokenPayload
from app.database.index import get_db
from app.models.user import User
from app.services.auth_service import AuthService
from app.util.guards import jwt_auth, local_auth

router = APIRouter(prefix="/auth", tags=["auth"])

TOKEN_EXAMPLE = {
    "accessToken": "JWT_TOKEN",
    "user": {
        "id": "b2c6e182-6aef-4c38-8d26-9153d7ebc7d2",
        "name": "Jane Smith",
        "email": "janesmith@example.com",
        "onboarding": False,
        "role": "user",
    },
}


@router.post(
    "/register",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Registers a new user with name, email, and password. "
                "Returns the authentication token and user data.",
    responses={
        status.HTTP_201_CREATED: {
            "description": "User successfully registered.",
            "content": {"application/json": {"example": TOKEN_EXAMPLE}},
        },
        status.HTTP_400_BAD_REQUEST: {
            "description": "Invalid input data. Validation failed.",
            "content": {"application/json": {"example": {
                "statusCode": 400,
                "message": ["name String should have at least 1 character",
                            "email value is not a valid email address"],
                "error": "Bad Request",
            }}},
        },
    },
)
def register_user(user_create: UserCreate, db: Session = Depends(get_db)):
    auth_service = AuthService(db_session=db)
    return auth_service.register_user(user_create)


@router.post(
    "/login",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Login a user",
    description="Authenticate a user using email and password. Returns a JWT token and user information.",
    responses={
        status.HTTP_201_CREATED: {
            "description": "Login successful. JWT token and user data returned.",
            "content": {"application/json": {"example": TOKEN_EXAMPLE}},
        },
        status.HTTP_401_UNAUTHORIZED: {
            "description": "Invalid credentials provided.",
            "content": {"application/json": {"example": {
                "statusCode": 401,
                "message": "Invalid credentials",
                "error": "Unauthorized",
            }}},
        },
    },
)
def login(user: User = Depends(local_auth), db: Session = Depends(get_db)):
    auth_service = AuthService(db_session=db)
    return auth_service.generate_jwt_token(user)


@router.get(
    "/profile",
    response_model=UserOut,
    summary="Current user",
    description="Returns the user the bearer token was issued to.",
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Unauthorized access."}},
)
def get_current_user(payload: TokenPayload = Depends(jwt_auth), db: Session = Depends(get_db)):
    auth_service = AuthService(db_session=db)
    return auth_service.get_user(payload.sub)
