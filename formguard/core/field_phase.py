# Per-field lifecycle, derived from FieldState (never stored)

# No input or blur since construction / last reset
UNTOUCHED = "untouched"

# Edited or blurred, last verdict negative
TOUCHED_INVALID = "touched-invalid"

# Edited or blurred, last verdict positive
TOUCHED_VALID = "touched-valid"


def phase_of(state) -> str:
    if not state.touched:
        return UNTOUCHED
    return TOUCHED_VALID if state.isValid else TOUCHED_INVALID
