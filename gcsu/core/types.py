"""Small types and Enums used by gcsu."""

from enum import Enum


class BuildResult(str, Enum):
    """Outcome of the build an upload step runs for."""

    success = "SUCCESS"
    unstable = "UNSTABLE"
    failure = "FAILURE"
    not_built = "NOT_BUILT"
    aborted = "ABORTED"


class ValidationKind(str, Enum):
    ok = "OK"
    error = "ERROR"
