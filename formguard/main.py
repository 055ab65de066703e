from fastapi import FastAPI
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from formguard.api.routes import router
from formguard.api.admin_routes import router as admin_router
from formguard.observability.logging import log
from formguard.settings import settings

app = FastAPI(title="Formguard Validation API")

# The form page is served from elsewhere; origins are restricted via env in prod.
origins = [x.strip() for x in settings.CORS_ORIGINS.split(",") if x.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
app.include_router(admin_router)


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Formguard is running. POST /api/forms to start a form session."
    }


@app.get("/health")
def health():
    return {"status": "ok"}


@app.exception_handler(Exception)
async def universal_exception_handler(request: Request, exc: Exception):
    log("unhandled_exception", path=request.url.path, error=f"{type(exc).__name__}:{str(exc)[:200]}")
    return JSONResponse(
        status_code=500,
        content={"status": "error", "detail": "Internal error"},
    )
