import math

from formguard.store.field_store import FieldStateStore


def _round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; progress uses half-up like the browser did
    return int(math.floor(x + 0.5))


def compute_progress(store: FieldStateStore) -> int:
    """Percent of fields currently valid, 0..100. Touched is irrelevant here."""
    total = len(store)
    if total == 0:
        return 0
    valid = sum(1 for _, state in store.items() if state.isValid)
    return _round_half_up(valid / total * 100)


def compute_submit_eligible(store: FieldStateStore) -> bool:
    """
    INVARIANT: every field must be valid AND touched.
    A value that is valid but was never edited or blurred does not unlock submit.
    """
    states = [state for _, state in store.items()]
    return bool(states) and all(s.isValid and s.touched for s in states)
