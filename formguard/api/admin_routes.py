from fastapi import APIRouter, Depends, Header, HTTPException
from formguard.settings import settings
from formguard.store.form_registry import form_registry
import formguard.observability.metrics as metrics

router = APIRouter(prefix="/admin", tags=["admin"])


def require_admin(x_admin_key: str = Header(default="", alias="x-admin-key")) -> None:
    if not settings.ADMIN_RBAC_ENABLED:
        return
    # RBAC on with no key configured locks the admin surface entirely
    if not settings.ADMIN_API_KEY or x_admin_key != settings.ADMIN_API_KEY:
        raise HTTPException(status_code=403, detail="Admin key required for form metrics")


@router.get("/metrics")
def get_metrics(_=Depends(require_admin)):
    """
    In-process counters plus the number of live forms.
    """
    snap = metrics.get_metrics_snapshot()
    snap["live_forms"] = len(form_registry)
    return snap
