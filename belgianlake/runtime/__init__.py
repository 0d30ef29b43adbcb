"""Interactive session runtime.

``run_session`` is imported lazily so that importing the CLI does not pull in
terminal control modules.
"""

from __future__ import annotations


def run_session(*args, **kwargs):
    """Lazily import session entrypoint to avoid terminal imports on package import."""
    from .app import run_session as _run_session

    return _run_session(*args, **kwargs)


__all__ = ["run_session"]
