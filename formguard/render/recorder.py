from typing import Any, Dict, List

from formguard.render.contract import Renderer


class RecordingRenderer(Renderer):
    """
    Buffers render calls as JSON-ready instruction dicts, in emission order.
    The HTTP layer drains the buffer into each response so a browser client can replay it.
    """

    def __init__(self):
        self.instructions: List[Dict[str, Any]] = []

    def _emit(self, op: str, **fields) -> None:
        self.instructions.append({"op": op, **fields})

    def render_field(self, key, is_valid, touched, message, message_type):
        self._emit(
            "renderField",
            field=key.value,
            isValid=bool(is_valid),
            touched=bool(touched),
            message=message,
            messageType=message_type.value,
        )

    def render_strength(self, tier, score):
        self._emit("renderStrength", tier=tier.value, score=int(score))

    def render_progress(self, percent):
        self._emit("renderProgress", percent=int(percent))

    def render_submit_state(self, eligible, pending):
        self._emit("renderSubmitState", eligible=bool(eligible), pending=bool(pending))

    def clear_field(self, key):
        self._emit("clearField", field=key.value)

    def on_submit_accepted(self):
        self._emit("submitAccepted")

    def on_submit_rejected(self, reason):
        self._emit("submitRejected", reason=reason)

    def on_reset(self):
        self._emit("reset")

    def ops(self) -> List[str]:
        return [i["op"] for i in self.instructions]

    def drain(self) -> List[Dict[str, Any]]:
        out, self.instructions = self.instructions, []
        return out
