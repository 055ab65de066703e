import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    API_KEY: str = os.getenv("API_KEY", "")

    # Comma-separated list; "*" keeps the form API usable from any page during development
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Submission is simulated: the orchestrator waits this long before reporting success
    SUBMIT_DELAY_SEC: float = float(os.getenv("SUBMIT_DELAY_SEC", "1.5"))

    # In-process form sessions; the oldest one is evicted once the cap is reached
    MAX_FORMS: int = int(os.getenv("MAX_FORMS", "1000"))

    # Observability
    ENABLE_PII_REDACTION: bool = os.getenv("ENABLE_PII_REDACTION", "true").lower() == "true"
    LOG_FIELD_EVENTS: bool = os.getenv("LOG_FIELD_EVENTS", "true").lower() == "true"

    # Admin surface (metrics)
    ADMIN_RBAC_ENABLED: bool = os.getenv("ADMIN_RBAC_ENABLED", "true").lower() == "true"
    ADMIN_API_KEY: str = os.getenv("ADMIN_API_KEY", "")

settings = Settings()
