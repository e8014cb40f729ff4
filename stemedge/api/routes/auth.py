from fastapi import APIRouter, Header, HTTPException
from stemedge.models.schemas import AuthResult, GreetingResponse, LoginRequest
from stemedge.services.auth import get_auth_service

router = APIRouter()


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token


@router.post("/auth/login", response_model=AuthResult)
def login(request: LoginRequest):
    """Sign in; a failed sign-in is a 401 with a short message."""
    result = get_auth_service().login(request.email, request.password)
    if result.error:
        raise HTTPException(status_code=401, detail=result.error)
    return result


@router.post("/auth/logout", response_model=AuthResult)
def logout():
    return get_auth_service().logout()


@router.get("/auth/greeting", response_model=GreetingResponse)
def greeting(authorization: str | None = Header(default=None)):
    """Personalized greeting for the signed-in user, generic otherwise."""
    auth_service = get_auth_service()
    user = auth_service.current_user(bearer_token(authorization))
    return GreetingResponse(greeting=auth_service.greeting(user))
