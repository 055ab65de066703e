import asyncio
import time
from enum import Enum
from typing import Dict, Optional, Tuple

from formguard.core import field_phase
from formguard.core.derived import compute_progress, compute_submit_eligible
from formguard.core.messages import SUBMIT_REJECTED_REASON
from formguard.core.strength import score_strength
from formguard.core.validators import validate_field
from formguard.observability.logging import log
from formguard.render.contract import Renderer
from formguard.settings import settings
from formguard.store.field_store import FieldStateStore
from formguard.store.models import FieldKey, StrengthTier, ValidationResult
from formguard.utils.time import elapsed_ms
import formguard.observability.metrics as metrics

# Declared dependency edges: a change to the key re-validates the listed fields.
# Cascades are one level deep; a cascaded field never triggers further cascades.
CASCADES: Dict[FieldKey, Tuple[FieldKey, ...]] = {
    FieldKey.PASSWORD: (FieldKey.CONFIRM_PASSWORD,),
}


class SubmitOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IN_PROGRESS = "in_progress"


class FormOrchestrator:
    """
    Entry points for one form instance.
    Each notify_* call runs to completion (cascade included) before returning;
    the submit delay is the only suspension point.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        store: Optional[FieldStateStore] = None,
        submit_delay: Optional[float] = None,
        form_id: str = "",
    ):
        self.renderer = renderer or Renderer()
        self.store = store or FieldStateStore()
        self.submit_delay = float(settings.SUBMIT_DELAY_SEC if submit_delay is None else submit_delay)
        self.form_id = form_id
        self._values: Dict[FieldKey, str] = {key: "" for key in FieldKey}
        self._submit_pending = False

    @property
    def submit_pending(self) -> bool:
        return self._submit_pending

    def value_of(self, key: FieldKey) -> str:
        return self._values[FieldKey(key)]

    def initialize(self) -> None:
        """Prime progress and submit state for a freshly rendered form."""
        self._render_derived()

    # ------------------------------------------------------------------
    # Collaborator -> core
    # ------------------------------------------------------------------
    def notify_input(self, key: FieldKey, value: str) -> ValidationResult:
        return self._handle_change(FieldKey(key), value, trigger="input")

    def notify_blur(self, key: FieldKey, value: str) -> ValidationResult:
        return self._handle_change(FieldKey(key), value, trigger="blur")

    def notify_focus(self, key: FieldKey) -> bool:
        """Returns True when the field's markers were cleared."""
        key = FieldKey(key)
        metrics.increment_event("focus")
        state = self.store.get(key)
        if state.touched and self._values[key].strip():
            return False
        self.renderer.clear_field(key)
        return True

    async def notify_submit(self) -> SubmitOutcome:
        metrics.increment_event("submit")
        if self._submit_pending:
            metrics.increment_submit(SubmitOutcome.IN_PROGRESS.value)
            log("submit_ignored_pending", formId=self.form_id)
            return SubmitOutcome.IN_PROGRESS

        if not compute_submit_eligible(self.store):
            metrics.increment_submit(SubmitOutcome.REJECTED.value)
            log(
                "submit_rejected",
                formId=self.form_id,
                progress=compute_progress(self.store),
                fields=self.store.snapshot(),
            )
            self.renderer.on_submit_rejected(SUBMIT_REJECTED_REASON)
            return SubmitOutcome.REJECTED

        t0 = time.monotonic()
        self._submit_pending = True
        self.renderer.render_submit_state(True, True)
        log("submit_started", formId=self.form_id, delaySec=self.submit_delay)
        try:
            await asyncio.sleep(self.submit_delay)
        finally:
            self._submit_pending = False

        latency = elapsed_ms(t0)
        metrics.increment_submit(SubmitOutcome.ACCEPTED.value)
        metrics.record_submit_latency(latency)
        self.renderer.on_submit_accepted()
        self.renderer.render_submit_state(compute_submit_eligible(self.store), False)
        log("submit_completed", formId=self.form_id, latencyMs=latency)
        return SubmitOutcome.ACCEPTED

    def notify_reset(self) -> None:
        metrics.increment_event("reset")
        self.store.reset()
        self._values = {key: "" for key in FieldKey}
        self.renderer.on_reset()
        self.renderer.render_strength(StrengthTier.UNSET, 0)
        self._render_derived()
        log("form_reset", formId=self.form_id)

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    def field_phase(self, key: FieldKey) -> str:
        return field_phase.phase_of(self.store.get(key))

    def snapshot(self) -> dict:
        """Field states and derived values. Raw values are never exposed."""
        fields = {}
        for key, state in self.store.items():
            fields[key.value] = {
                "isValid": state.isValid,
                "touched": state.touched,
                "phase": field_phase.phase_of(state),
            }
        return {
            "fields": fields,
            "progress": compute_progress(self.store),
            "submitEligible": compute_submit_eligible(self.store),
            "submitPending": self._submit_pending,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _handle_change(self, key: FieldKey, value: str, trigger: str) -> ValidationResult:
        metrics.increment_event(trigger)
        self._values[key] = value or ""

        # Touched flips on the first input OR blur, whichever comes first
        result = self._validate_and_store(key)

        if key is FieldKey.PASSWORD:
            strength = score_strength(self._values[key])
            self.renderer.render_strength(strength.tier, strength.score)

        for dependent in CASCADES.get(key, ()):
            if self._values[dependent]:
                cascaded = self._validate_and_store(dependent)
                metrics.increment_cascade()
                if settings.LOG_FIELD_EVENTS:
                    log(
                        "cascade_revalidated",
                        formId=self.form_id,
                        source=key.value,
                        field=dependent.value,
                        isValid=cascaded.isValid,
                    )

        self._render_derived()

        if settings.LOG_FIELD_EVENTS:
            log(
                "field_event",
                formId=self.form_id,
                trigger=trigger,
                field=key.value,
                isValid=result.isValid,
                phase=self.field_phase(key),
            )
        return result

    def _validate_and_store(self, key: FieldKey) -> ValidationResult:
        result = validate_field(key, self._values[key], self._values[FieldKey.PASSWORD])
        self.store.set(key, result.isValid, True)
        self.renderer.render_field(key, result.isValid, True, result.message, result.messageType)
        return result

    def _render_derived(self) -> None:
        self.renderer.render_progress(compute_progress(self.store))
        self.renderer.render_submit_state(compute_submit_eligible(self.store), self._submit_pending)
