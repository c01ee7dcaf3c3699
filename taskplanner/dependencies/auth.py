from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from taskplanner.core.jwt import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)


def _extract_jwt(request: Request, token: str | None) -> str | None:
    return token or request.cookies.get("access_token")


def get_current_user(request: Request, token: str | None = Depends(oauth2_scheme)) -> UUID:
    """Strict auth dependency; the token's sub is the task owner id."""
    jwt_token = _extract_jwt(request, token)
    if not jwt_token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = decode_access_token(jwt_token)
    if payload is None or "sub" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return UUID(str(payload["sub"]))
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid subject")
