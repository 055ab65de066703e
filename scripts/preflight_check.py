#!/usr/bin/env python3
import sys
import os

print("Running preflight import check...")
try:
    # Keep the check quiet and independent of any local .env
    os.environ.setdefault("LOG_FIELD_EVENTS", "false")

    import formguard.main
    print("Import formguard.main: OK")

    import formguard.core.orchestrator
    print("Import formguard.core.orchestrator: OK")

    from formguard.core.validators import validate_name
    assert validate_name("John Doe").isValid
    print("Validator sanity: OK")

    print("Preflight check passed.")
    sys.exit(0)
except Exception as e:
    print(f"Preflight check FAILED: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)
