import time

def now_ms() -> int:
    return int(time.time() * 1000)

def elapsed_ms(t0: float) -> int:
    """Milliseconds since a time.monotonic() reading."""
    return int((time.monotonic() - t0) * 1000)
