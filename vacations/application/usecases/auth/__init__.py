"""
AUTH USE CASES PACKAGE: login / logout / restore sobre SessionManager.
"""

from __future__ import annotations

from .auth_results import AuthError, AuthErrorCode, LogoutResult, SessionResult
from .login import LoginUseCase
from .logout import LogoutUseCase
from .restore_session import RestoreSessionUseCase

__all__ = [
    "LoginUseCase",
    "LogoutUseCase",
    "RestoreSessionUseCase",
    "AuthError",
    "AuthErrorCode",
    "SessionResult",
    "LogoutResult",
]
