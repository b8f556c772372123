from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import jwt
from .config import settings

CAMERA_PERMISSION = "camera"

bearer = HTTPBearer(auto_error=False)

def require_camera_permission(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> dict:
    # Auth OFF mode (demo mode): every permission is granted
    if not settings.AUTH_ENABLED:
        return {
            "sub": "demo_user",
            "permissions": [CAMERA_PERMISSION],
            "service": settings.PROJECT_NAME,
        }

    if creds is None or not creds.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token"
        )

    try:
        payload = jwt.decode(
            creds.credentials,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")

    if CAMERA_PERMISSION not in payload.get("permissions", []):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Camera permission required"
        )
    return payload
