"""Ubuntu desktop post-install setup (Python-first, best-effort).

Core design goals:
- Every external command goes through one execution policy
- Fallback once, log, keep going
- Typed command descriptors (no shell strings)
- Operator choices gate optional steps
- Centralized logging
"""

__all__ = []
