"""
Errors raised by the growth engine.

Caller mistakes (size mismatch, bad seeds) are plain ValueErrors raised
before any state is built. The exception below marks a broken internal
invariant: it is a defect, never a condition to retry.
"""


class FrontierInvariantError(Exception):
    """Raised when the frontier no longer matches the seen grid."""

    pass
