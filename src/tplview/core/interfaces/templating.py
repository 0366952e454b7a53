from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ScriptExecutorProtocol(Protocol):
    """Protocol for the interpreter that evaluates a template file.

    Implementations return the file text untouched when *parse* is False and
    raise ``ExecutionFault`` (``ResolutionFailure`` for a missing file) on
    any failure.
    """

    def execute(self, path: Path, variables: Mapping[str, Any], *, parse: bool = True) -> str:
        ...
