"""Terminal runtime for the interactive prompts.

``run_selection`` and ``run_confirmation`` own the tty while they run and
restore it on confirm, abort, and errors.
"""

from .app import run_confirmation, run_selection
from .loop import KeyNormalizer, run_model_loop

__all__ = ["KeyNormalizer", "run_confirmation", "run_model_loop", "run_selection"]
