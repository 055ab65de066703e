import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from formguard.core.orchestrator import FormOrchestrator
from formguard.observability.logging import log
from formguard.render.recorder import RecordingRenderer
from formguard.settings import settings
from formguard.utils.time import now_ms
import formguard.observability.metrics as metrics


@dataclass
class FormSession:
    formId: str
    orchestrator: FormOrchestrator
    renderer: RecordingRenderer
    createdAtMs: int = field(default_factory=now_ms)


class FormRegistry:
    """
    In-process map of live form sessions. Nothing is persisted.
    Insertion order doubles as age: once MAX_FORMS is reached the oldest session goes.
    """

    def __init__(self, max_forms: Optional[int] = None):
        self.max_forms = int(max_forms if max_forms is not None else settings.MAX_FORMS)
        self._forms: Dict[str, FormSession] = {}

    def create(self, submit_delay: Optional[float] = None) -> FormSession:
        while self._forms and len(self._forms) >= max(1, self.max_forms):
            oldest = next(iter(self._forms))
            del self._forms[oldest]
            metrics.increment_forms_evicted()
            log("form_evicted", formId=oldest)

        form_id = uuid.uuid4().hex
        renderer = RecordingRenderer()
        orchestrator = FormOrchestrator(renderer=renderer, submit_delay=submit_delay, form_id=form_id)
        session = FormSession(formId=form_id, orchestrator=orchestrator, renderer=renderer)
        self._forms[form_id] = session
        orchestrator.initialize()

        metrics.increment_forms_created()
        log("form_created", formId=form_id, liveForms=len(self._forms))
        return session

    def get(self, form_id: str) -> Optional[FormSession]:
        return self._forms.get(form_id)

    def close(self, form_id: str) -> bool:
        session = self._forms.pop(form_id, None)
        if session is None:
            return False
        metrics.increment_forms_closed()
        log("form_closed", formId=form_id)
        return True

    def __len__(self) -> int:
        return len(self._forms)

    def clear(self) -> None:
        self._forms.clear()


form_registry = FormRegistry()
