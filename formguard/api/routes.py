from fastapi import APIRouter, Depends, HTTPException

from formguard.api.auth import require_api_key
from formguard.api.schemas import (
    FieldFocusEvent,
    FieldValueEvent,
    FocusResponse,
    FormResponse,
    SubmitResponse,
    ValidateRequest,
    ValidateResponse,
)
from formguard.core.strength import score_strength
from formguard.core.validators import validate_field
from formguard.store.form_registry import FormSession, form_registry
from formguard.store.models import FieldKey

router = APIRouter(prefix="/api", dependencies=[Depends(require_api_key)])


def _session_or_404(form_id: str) -> FormSession:
    session = form_registry.get(form_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Unknown form")
    return session


def _form_response(session: FormSession, cls=FormResponse, **extra):
    # Every response carries the render instructions emitted since the last one
    return cls(
        formId=session.formId,
        instructions=session.renderer.drain(),
        snapshot=session.orchestrator.snapshot(),
        **extra,
    )


# ---------------------------------------------------------------------------
# Form lifecycle
# ---------------------------------------------------------------------------
@router.post("/forms", response_model=FormResponse, status_code=201)
async def create_form():
    return _form_response(form_registry.create())


@router.get("/forms/{form_id}", response_model=FormResponse)
async def get_form(form_id: str):
    session = _session_or_404(form_id)
    return FormResponse(formId=session.formId, snapshot=session.orchestrator.snapshot())


@router.delete("/forms/{form_id}")
async def close_form(form_id: str):
    if not form_registry.close(form_id):
        raise HTTPException(status_code=404, detail="Unknown form")
    return {"status": "success", "formId": form_id}


# ---------------------------------------------------------------------------
# Field events (collaborator -> core)
# ---------------------------------------------------------------------------
@router.post("/forms/{form_id}/input", response_model=FormResponse)
async def field_input(form_id: str, event: FieldValueEvent):
    session = _session_or_404(form_id)
    session.orchestrator.notify_input(event.field, event.value)
    return _form_response(session)


@router.post("/forms/{form_id}/blur", response_model=FormResponse)
async def field_blur(form_id: str, event: FieldValueEvent):
    session = _session_or_404(form_id)
    session.orchestrator.notify_blur(event.field, event.value)
    return _form_response(session)


@router.post("/forms/{form_id}/focus", response_model=FocusResponse)
async def field_focus(form_id: str, event: FieldFocusEvent):
    session = _session_or_404(form_id)
    cleared = session.orchestrator.notify_focus(event.field)
    return _form_response(session, FocusResponse, cleared=cleared)


@router.post("/forms/{form_id}/submit", response_model=SubmitResponse)
async def submit_form(form_id: str):
    session = _session_or_404(form_id)
    outcome = await session.orchestrator.notify_submit()
    return _form_response(session, SubmitResponse, outcome=outcome.value)


@router.post("/forms/{form_id}/reset", response_model=FormResponse)
async def reset_form(form_id: str):
    session = _session_or_404(form_id)
    session.orchestrator.notify_reset()
    return _form_response(session)


# ---------------------------------------------------------------------------
# Stateless preview (no form session involved)
# ---------------------------------------------------------------------------
@router.post("/validate", response_model=ValidateResponse)
async def validate_preview(req: ValidateRequest):
    result = validate_field(req.field, req.value, req.passwordValue)
    strength = None
    if req.field is FieldKey.PASSWORD:
        strength = score_strength(req.value).to_dict()
    return ValidateResponse(field=req.field, strength=strength, **result.to_dict())
