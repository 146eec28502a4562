"""Public package surface for lnka.

Exports ``main`` for programmatic CLI invocation and ``resolve_link_target``
for callers that only need link-text computation.
"""

from __future__ import annotations

import logging

from .paths import resolve_link_target

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main", "resolve_link_target"]
