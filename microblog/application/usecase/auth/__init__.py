"""Authentication use cases."""

from .common import UserInfo
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .provider_login import (
    CompleteProviderLoginRequest,
    CompleteProviderLoginResponse,
    CompleteProviderLoginUseCase,
    InitiateProviderLoginRequest,
    InitiateProviderLoginResponse,
    InitiateProviderLoginUseCase,
)
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "CompleteProviderLoginRequest",
    "CompleteProviderLoginResponse",
    "CompleteProviderLoginUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "InitiateProviderLoginRequest",
    "InitiateProviderLoginResponse",
    "InitiateProviderLoginUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
    "UserInfo",
]
