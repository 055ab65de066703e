"""
Render callback surface
-----------------------
Everything the core tells the presentation layer goes through a Renderer.
The base class ignores every instruction, so collaborators subclass it and
override only what they draw. The core never reads anything back.
"""

from __future__ import annotations

from formguard.store.models import FieldKey, MessageType, StrengthTier


class Renderer:
    def render_field(
        self,
        key: FieldKey,
        is_valid: bool,
        touched: bool,
        message: str,
        message_type: MessageType,
    ) -> None:
        pass

    def render_strength(self, tier: StrengthTier, score: int) -> None:
        pass

    def render_progress(self, percent: int) -> None:
        pass

    def render_submit_state(self, eligible: bool, pending: bool) -> None:
        pass

    def clear_field(self, key: FieldKey) -> None:
        """Drop valid/invalid styling, icon and message for one field."""
        pass

    def on_submit_accepted(self) -> None:
        pass

    def on_submit_rejected(self, reason: str) -> None:
        pass

    def on_reset(self) -> None:
        """Blank every input and move focus to the first field."""
        pass
