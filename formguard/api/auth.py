from fastapi import Header, HTTPException
from formguard.settings import settings


def require_api_key(x_api_key: str = Header(default="", alias="x-api-key")) -> None:
    """Guard for the /api form routes. An empty API_KEY leaves them open."""
    expected = settings.API_KEY
    if expected and x_api_key != expected:
        raise HTTPException(status_code=401, detail="Invalid API key")
