from fastapi import Depends, Header
from typing import Optional
from tradeinspect.config import Settings, get_settings
from tradeinspect.core.errors import AuthError
from tradeinspect.core.security import decode_token
from tradeinspect.schemas.auth import TokenPayload


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings)
) -> TokenPayload:
    """
    Verify the bearer token from the Authorization header and return its claims
    Expected header format: "Bearer <token>"
    """
    if not authorization:
        raise AuthError("No token, authorization denied.")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise AuthError("Token format invalid, authorization denied.")

    payload = decode_token(token, settings)
    if not payload.get("userId") or not payload.get("role"):
        raise AuthError("Token is not valid.")

    return TokenPayload.model_validate(payload)
