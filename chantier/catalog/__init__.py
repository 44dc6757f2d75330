"""Static construction-guide catalogs."""

from .steps import DEFAULT_STEPS_PATH, load_steps, reload_steps, steps_from_payload

__all__ = ["DEFAULT_STEPS_PATH", "load_steps", "reload_steps", "steps_from_payload"]
