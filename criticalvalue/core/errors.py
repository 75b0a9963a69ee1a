"""
criticalvalue.core.errors
=========================

Error and warning types.

Two severities exist. `InvalidArgument` aborts the call when the inputs
cannot be resolved at all. `CriticalValueWarning` reports a quantity that
could not be derived; the affected field is set to NaN and the call returns.
"""

from __future__ import annotations
import logging
import os
import sys
import warnings
from typing import List

from criticalvalue.core.names import Diagnostic

logger = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


class InvalidArgument(ValueError):
    """Raised when a required or enumerated argument cannot be resolved."""


class CriticalValueWarning(UserWarning):
    """Warning category for non-fatal diagnostics."""


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside the package, as seen by `warnings.warn`."""
    frame = sys._getframe(1)
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(
        _PACKAGE_DIR
    ):
        frame = frame.f_back
        level += 1
    return level


def emit_diagnostic(
    diagnostics: List[Diagnostic], code: Diagnostic, message: str
) -> None:
    """Record `code` and emit `message` as a `CriticalValueWarning`.

    The warning is attributed to the caller's line outside this package, so
    the default filter reports it once per call site rather than once per
    library line.

    Args:
        diagnostics: Accumulator owned by the running derivation
        code: Diagnostic code to record
        message: Human-readable warning text
    """
    diagnostics.append(code)
    logger.debug("diagnostic %s: %s", code.value, message)
    warnings.warn(message, CriticalValueWarning, stacklevel=_caller_stacklevel())
