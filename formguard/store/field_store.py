from dataclasses import asdict, replace
from typing import Dict, Iterator, Tuple

from formguard.store.models import FieldKey, FieldState


def _fresh_states() -> Dict[FieldKey, FieldState]:
    return {key: FieldState() for key in FieldKey}


class FieldStateStore:
    """
    Per-form source of truth for {isValid, touched}.
    Keys are fixed at construction (one per FieldKey) and never added or removed.
    Readers always get copies, so the only way to mutate is set()/reset().
    """

    def __init__(self):
        self._states: Dict[FieldKey, FieldState] = _fresh_states()

    def get(self, key: FieldKey) -> FieldState:
        return replace(self._states[FieldKey(key)])

    def set(self, key: FieldKey, is_valid: bool, touched: bool) -> None:
        self._states[FieldKey(key)] = FieldState(isValid=bool(is_valid), touched=bool(touched))

    def reset(self) -> None:
        # Single assignment: a reader sees either the old mapping or the fresh one
        self._states = _fresh_states()

    def items(self) -> Iterator[Tuple[FieldKey, FieldState]]:
        for key, state in list(self._states.items()):
            yield key, replace(state)

    def __len__(self) -> int:
        return len(self._states)

    def snapshot(self) -> Dict[str, dict]:
        return {key.value: asdict(state) for key, state in self._states.items()}
