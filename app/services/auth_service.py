from datetime import datetime, timedelta, timezone
import logging
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.user import UserCreate, UserOut, Token, TokenPayload
from app.models.user import User
from app.util.config import get_settings
from app.util.errors import BadRequestError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class AuthService:
    def __init__(self, db_session: Session):
        if not db_session:
            raise ValueError("Database session is not initialized.")
        self.db = db_session
        settings = get_settings()
        self.secret = settings.secret_key
        self.algorithm = settings.algorithm
        self.expire_minutes = settings.access_token_expire_minutes

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=self.expire_minutes))
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> TokenPayload:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return TokenPayload(**payload)
        except (JWTError, ValidationError) as e:
            logger.warning("Rejected access token: %s", e)
            raise UnauthorizedError("Invalid token")

    def generate_jwt_token(self, user: User) -> Token:
        data = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "role": user.role.value,
        }
        access_token = self.create_access_token(data=data)
        return Token(access_token=access_token, user=UserOut.model_validate(user))

    def register_user(self, user_create: UserCreate) -> Token:
        email = user_create.email.lower()
        if self.get_user_by_email(email):
            raise BadRequestError("Email already registered")

        db_user = User(
            name=user_create.name,
            email=email,
            hashed_password=self.hash_password(user_create.password),
        )
        self.db.add(db_user)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration of the same email
            self.db.rollback()
            raise BadRequestError("Email already registered")
        self.db.refresh(db_user)
        logger.info("Registered user %s", db_user.id)
        return self.generate_jwt_token(db_user)

    def authenticate_user(self, email: str, password: str) -> Optional[User]:
        user = self.get_user_by_email(email)
        if not user or not self.verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt for %s", email)
            return None
        return user

    def get_user(self, user_id: UUID) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()
