# eventra/routes/auth.py
from fastapi import APIRouter, HTTPException, Response, status, Depends
from eventra.models.user import UserCreate, User, LoginRequest, TokenData
from eventra.utils.auth_utils import create_access_token, get_current_user, TOKEN_COOKIE
from eventra.config import Settings, get_settings
from eventra.database import USERS, NO_MONGO_ID, get_database
from loguru import logger
from passlib.context import CryptContext
from pymongo.errors import DuplicateKeyError
import uuid

router = APIRouter()
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def get_password_hash(password):
    return pwd_context.hash(password)

def verify_password(password, hashed_password):
    return pwd_context.verify(password, hashed_password)

@router.post("/register", response_model=User)
async def register(user: UserCreate, db=Depends(get_database)):
    user_data = user.model_dump()
    user_data["id"] = str(uuid.uuid4())
    user_data["password"] = get_password_hash(user.password)

    # The unique index on email is the only duplicate guard
    try:
        await db[USERS].insert_one(user_data)
    except DuplicateKeyError:
        raise HTTPException(status_code=422, detail="Email already registered.")

    logger.info(f"Registered user {user_data['id']} <{user.email}>")
    return User(**user_data)


@router.post("/login", response_model=User)
async def login(
    credentials: LoginRequest,
    response: Response,
    db=Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    user = await db[USERS].find_one({"email": credentials.email}, NO_MONGO_ID)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if not verify_password(credentials.password, user["password"]):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")

    access_token = create_access_token(data={"email": user["email"], "id": user["id"]}, settings=settings)
    response.set_cookie(
        TOKEN_COOKIE,
        access_token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    logger.info(f"User {user['id']} logged in")
    return User(**user)


@router.get("/profile", response_model=User)
async def profile(current_user: TokenData = Depends(get_current_user), db=Depends(get_database)):
    user = await db[USERS].find_one({"id": current_user.id}, NO_MONGO_ID)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return User(**user)


@router.post("/logout")
async def logout(
    response: Response,
    current_user: TokenData = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
):
    # No server-side revocation: the token itself stays valid until it expires
    response.delete_cookie(TOKEN_COOKIE, httponly=True, secure=settings.cookie_secure, samesite=settings.cookie_samesite)
    logger.info(f"User {current_user.id} logged out")
    return True
