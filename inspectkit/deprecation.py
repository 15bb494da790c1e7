"""
Process-wide deprecation notices, printed once per distinct message.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
import re
import sys
import traceback

# Constants ------------------------------------------------------------------------------------------------------------

# Space or comma separated tags whose notices print with a stack trace
DEBUG_ENV = "INSPECTKIT_DEBUG"

_deprecation_warnings: set[str] = set()


# Methods --------------------------------------------------------------------------------------------------------------

def _deprecation_warning(tag: str, message: str) -> None:
    """
    Print a deprecation notice to stderr once per distinct message.

    When tag is listed as a whole word in the INSPECTKIT_DEBUG environment variable,
    the notice is printed as 'Trace: <message>' followed by the current call stack.

    Args:
        tag: Area of the deprecated feature, matched against INSPECTKIT_DEBUG.
        message: Notice text; also the deduplication key.
    """
    if message in _deprecation_warnings:
        return
    _deprecation_warnings.add(message)

    if re.search(rf"\b{re.escape(tag)}\b", os.environ.get(DEBUG_ENV, "")):
        stack = "".join(traceback.format_stack()[:-1])
        sys.stderr.write(f"Trace: {message}\n{stack}")
    else:
        sys.stderr.write(f"{message}\n")
