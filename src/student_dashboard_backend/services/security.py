'''
JWT handling and the authentication dependencies.
'''
from datetime import datetime, timedelta, timezone
from typing import Optional, Annotated
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..common.config import settings
from ..models.token import TokenPayload
from ..common.logger import log

# --- JWT Handling ---
class JWTHandler:
    @staticmethod
    def create_access_token(
        subject: str,
        # Add default value using settings
        expires_delta: Optional[timedelta] = None
    ) -> str:
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"sub": str(subject), "exp": expire}
        encoded_jwt = jwt.encode(
            to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )
        return encoded_jwt

    @staticmethod
    def decode_token(token: str) -> TokenPayload | None:
        try:
            payload = jwt.decode(
                token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
            )
            token_data = TokenPayload(**payload)
            return token_data
        except (JWTError, ValueError) as e: # Catch Pydantic validation errors too
            log.warning(f"JWT decode/validation error: {e}")
            return None

# --- JWT Verification Dependency Functions ---
# Tokens are issued by the institute's identity provider; this service only verifies them.
bearer_scheme = HTTPBearer(auto_error=False)

async def verify_token_and_get_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    ) -> str:
    """
    Dependency to verify the JWT and return the id of the calling student.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        log.warning("Request without a bearer token.")
        raise credentials_exception

    token_data = JWTHandler.decode_token(credentials.credentials)
    if not token_data or not token_data.sub:
        log.warning("JWT decode failed or invalid token structure.")
        raise credentials_exception

    log.info(f"JWT verified successfully for user: {token_data.sub}")
    return token_data.sub

async def verify_admin_user_id(
    user_id: Annotated[str, Depends(verify_token_and_get_user_id)],
    ) -> str:
    """
    Dependency that only lets calendar administrators through.
    """
    if user_id not in settings.ADMIN_USER_IDS:
        log.warning(f"SECURITY: User {user_id} tried to access an admin-only calendar endpoint.")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only calendar administrators can perform this action."
        )
    return user_id
