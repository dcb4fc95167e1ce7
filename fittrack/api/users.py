from fastapi import APIRouter, Depends

from ..core.security import PasswordHasher, TokenIssuer, bearer_token
from ..records import UserRecords
from ..schemas import AuthOut, ErrorResponse, LoginIn, SignupIn, UserPublic
from ..services import users as user_service
from .deps import password_hasher, token_issuer, user_records

router = APIRouter(prefix="/user", tags=["Users"])


@router.post(
    "/login",
    response_model=AuthOut,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Authenticate a user with credentials",
)
def login(
    payload: LoginIn,
    users: UserRecords = Depends(user_records),
    hasher: PasswordHasher = Depends(password_hasher),
    tokens: TokenIssuer = Depends(token_issuer),
):
    return user_service.authenticate(users, hasher, tokens, email=str(payload.email), password=payload.password)


@router.post(
    "/signup",
    response_model=AuthOut,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Register a new user",
)
def signup(
    payload: SignupIn,
    users: UserRecords = Depends(user_records),
    hasher: PasswordHasher = Depends(password_hasher),
    tokens: TokenIssuer = Depends(token_issuer),
):
    return user_service.register(
        users, hasher, tokens,
        username=payload.username,
        email=str(payload.email),
        password=payload.password,
    )


@router.get("/me", response_model=UserPublic, responses={401: {"model": ErrorResponse}}, summary="Get current user")
def me(
    token: str = Depends(bearer_token),
    users: UserRecords = Depends(user_records),
    tokens: TokenIssuer = Depends(token_issuer),
):
    return user_service.current_user(users, tokens, token)
