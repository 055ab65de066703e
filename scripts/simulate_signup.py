"""
Drive one form instance through a scripted signup from the terminal, printing
every render instruction as it is emitted. Handy for eyeballing cascade and
submit-gating behaviour without a browser. Safe to run anywhere (no I/O besides stdout).
"""
import asyncio
import os

from formguard.core.orchestrator import FormOrchestrator
from formguard.render.contract import Renderer

SUBMIT_DELAY_SEC = float(os.getenv("SIMULATE_SUBMIT_DELAY_SEC", "0.2"))

# (event, field, value) in the order a user would produce them
SCRIPT = [
    ("input", "fullName", "Jo"),
    ("input", "fullName", "Jo Smith"),
    ("blur", "fullName", "Jo Smith"),
    ("input", "email", "jo@example"),
    ("blur", "email", "jo@example.com"),
    ("input", "confirmPassword", "Secret1!"),
    ("input", "password", "Secret1"),
    ("blur", "password", "Secret1!"),
    ("blur", "confirmPassword", "Secret1!"),
]


class ConsoleRenderer(Renderer):
    def __init__(self, out=print):
        self.out = out

    def render_field(self, key, is_valid, touched, message, message_type):
        mark = "ok " if is_valid else "err"
        self.out(f"  [{mark}] {key.value}: {message}")

    def render_strength(self, tier, score):
        self.out(f"  strength: {tier.value} ({score}/5)")

    def render_progress(self, percent):
        self.out(f"  progress: {percent}%")

    def render_submit_state(self, eligible, pending):
        label = "submitting..." if pending else ("enabled" if eligible else "disabled")
        self.out(f"  submit: {label}")

    def clear_field(self, key):
        self.out(f"  cleared: {key.value}")

    def on_submit_accepted(self):
        self.out("  >> account created")

    def on_submit_rejected(self, reason):
        self.out(f"  >> rejected: {reason}")

    def on_reset(self):
        self.out("  >> form cleared")


async def run(out=print) -> str:
    form = FormOrchestrator(renderer=ConsoleRenderer(out), submit_delay=SUBMIT_DELAY_SEC, form_id="simulate")
    form.initialize()
    for event, field, value in SCRIPT:
        out(f"{event} {field}")
        if event == "input":
            form.notify_input(field, value)
        else:
            form.notify_blur(field, value)
    out("submit")
    outcome = await form.notify_submit()
    out("reset")
    form.notify_reset()
    return outcome.value


def main():
    outcome = asyncio.run(run())
    print(f"OK: simulated signup finished with outcome={outcome}")

if __name__ == "__main__":
    main()
