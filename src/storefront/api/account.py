"""Registration, login/logout and profile endpoints."""

from fastapi import APIRouter, Depends, Response
from fastapi.concurrency import run_in_threadpool
from protean.utils.globals import current_domain

from storefront.account.authentication import LogIn, LogOut
from storefront.account.profile import UpdateProfile
from storefront.account.registration import RegisterUser
from storefront.account.user import User
from storefront.api.dependencies import current_token, current_user
from storefront.api.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    UserResponse,
)

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    user_id = await run_in_threadpool(current_domain.process, RegisterUser(**body.model_dump()), asynchronous=False)
    token = await run_in_threadpool(
        current_domain.process, LogIn(username=body.username, password=body.password), asynchronous=False
    )

    user = current_domain.repository_for(User).get(user_id)
    return AuthResponse(user=UserResponse.from_user(user), token=token)


@auth_router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    token = await run_in_threadpool(
        current_domain.process, LogIn(username=body.username, password=body.password), asynchronous=False
    )

    user = current_domain.repository_for(User).find_by_username(body.username)
    return AuthResponse(user=UserResponse.from_user(user), token=token)


@auth_router.post("/logout", status_code=204)
async def logout(token: str = Depends(current_token)) -> Response:
    current_domain.process(LogOut(token=token), asynchronous=False)
    return Response(status_code=204)


@auth_router.get("/user", response_model=UserResponse)
async def get_user(user: User = Depends(current_user)) -> UserResponse:
    return UserResponse.from_user(user)


@auth_router.patch("/user", response_model=UserResponse)
async def update_user(body: UpdateProfileRequest, user: User = Depends(current_user)) -> UserResponse:
    command = UpdateProfile(user_id=str(user.id), **body.model_dump(exclude_unset=True))
    current_domain.process(command, asynchronous=False)

    updated = current_domain.repository_for(User).get(user.id)
    return UserResponse.from_user(updated)
