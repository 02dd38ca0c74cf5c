from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from cookbook_auth.api.deps import get_hasher, get_store
from cookbook_auth.core.security import PasswordHasher
from cookbook_auth.schemas.auth import SignupIn, LoginIn, MessageOut
from cookbook_auth.services.auth import AuthOutcome, OutcomeKind, authenticate, register
from cookbook_auth.store import CredentialStore


router = APIRouter(tags=["auth"])

STATUS_BY_KIND = {
    OutcomeKind.SUCCESS: status.HTTP_200_OK,
    OutcomeKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    OutcomeKind.DUPLICATE: status.HTTP_400_BAD_REQUEST,
    OutcomeKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    OutcomeKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_response(outcome: AuthOutcome) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND[outcome.kind],
        content=MessageOut(message=outcome.message).model_dump(),
    )


@router.post("/signup", response_model=MessageOut)
def signup(
    payload: SignupIn,
    store: CredentialStore = Depends(get_store),
    hasher: PasswordHasher = Depends(get_hasher),
):
    return to_response(register(payload.to_input(), store, hasher))


@router.post("/login", response_model=MessageOut)
def login(
    payload: LoginIn,
    store: CredentialStore = Depends(get_store),
    hasher: PasswordHasher = Depends(get_hasher),
):
    return to_response(authenticate(payload.to_input(), store, hasher))
