from .auth import (
    AuthOutcome,
    LoginInput,
    OutcomeKind,
    SignupInput,
    authenticate,
    register,
)

__all__ = [
    "AuthOutcome",
    "LoginInput",
    "OutcomeKind",
    "SignupInput",
    "authenticate",
    "register",
]
