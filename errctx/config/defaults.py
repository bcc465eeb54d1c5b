"""errctx.config.defaults
======================

Central place for the small, stable default values used by the errctx
package. These defaults can be overridden via environment variables (see
``errctx.config.env``) and provide sensible fallbacks for library use and
tests.

Module Purpose
--------------
- Provide a single import location for default constants (no I/O).
- Keep the chain walker and logging setup free of magic literals.

This module intentionally avoids importing from other errctx modules to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Logging ----

# Level of the shared ``errctx`` logger. Construction events are emitted at
# DEBUG, so they stay silent unless a caller opts in.
ERRCTX_DEFAULT_LOG_LEVEL = "WARNING"
# Emit JSON lines (True) or the plain "asctime level name message" format.
ERRCTX_DEFAULT_JSON_LOGS = True

# ---- Chain walking ----

# Follow implicit ``__context__`` links when no explicit ``__cause__`` exists.
ERRCTX_DEFAULT_FOLLOW_CONTEXT = False
# Optional cap on how deep the walker descends; None walks the whole chain.
ERRCTX_DEFAULT_MAX_DEPTH = None


__all__ = [
    "ERRCTX_DEFAULT_LOG_LEVEL",
    "ERRCTX_DEFAULT_JSON_LOGS",
    "ERRCTX_DEFAULT_FOLLOW_CONTEXT",
    "ERRCTX_DEFAULT_MAX_DEPTH",
]
