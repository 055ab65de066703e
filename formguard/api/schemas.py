from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from formguard.store.models import FieldKey

class FieldValueEvent(BaseModel):
    field: FieldKey
    value: str = ""

class FieldFocusEvent(BaseModel):
    field: FieldKey

class ValidateRequest(BaseModel):
    field: FieldKey
    value: str = ""
    # Only consulted for confirmPassword
    passwordValue: str = ""

class ValidateResponse(BaseModel):
    field: FieldKey
    isValid: bool
    message: str
    messageType: Literal["error", "success", "none"]
    strength: Optional[Dict[str, Any]] = None

class FormResponse(BaseModel):
    status: Literal["success", "error"] = "success"
    formId: str
    instructions: List[Dict[str, Any]] = Field(default_factory=list)
    snapshot: Dict[str, Any] = Field(default_factory=dict)

class SubmitResponse(FormResponse):
    outcome: Literal["accepted", "rejected", "in_progress"]

class FocusResponse(FormResponse):
    cleared: bool
