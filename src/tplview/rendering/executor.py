"""
executor – Concrete ScriptExecutorProtocol implementations for tplview.

This module provides:
  • JinjaScriptExecutor – evaluates template files with Jinja2.
  • PassthroughExecutor – no-op interpreter returning the file text as is.

Both report every failure as ExecutionFault (ResolutionFailure when the file
does not exist) so the rendering layer never sees interpreter-specific
exception types.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateRuntimeError,
    Undefined,
)

from tplview.core.errors import ExecutionFault, ResolutionFailure
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.logging.helpers import get_logger, trace_render


def read_template_text(path: Path) -> str:
    """Return the text of *path*, mapping I/O errors onto tplview faults."""
    try:
        return path.read_text(encoding='utf-8')
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        raise ResolutionFailure(path, template=path.name, cause=exc) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ExecutionFault(f"could not read {path}: {exc}", template=path.name, cause=exc) from exc


def _raise_error(message: str = 'error raised inside a template') -> None:
    """Template global: abort the current render with *message*."""
    raise TemplateRuntimeError(message)


class JinjaScriptExecutor(ScriptExecutorProtocol):
    """Evaluate template files with Jinja2.

    One Environment is kept per template directory so ``{% include %}`` and
    ``{% extends %}`` resolve next to the file being rendered. Every
    Environment loads the ``jinja2.ext.do`` extension, which lets templates
    run side-effecting statements such as ``{% do view.set("a", 1) %}``, and
    exposes a ``raise_error(message)`` global.
    """

    def __init__(
        self,
        *,
        strict: bool = True,
        extensions: Sequence[str] = (),
        template_globals: Optional[Mapping[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._undefined = StrictUndefined if strict else Undefined
        self._extensions = ['jinja2.ext.do', *extensions]
        self._globals: Dict[str, Any] = {'raise_error': _raise_error}
        self._globals.update(template_globals or {})
        self._envs: Dict[Path, Environment] = {}
        self._log = logger or get_logger('executor')

    def environment(self, directory: Path) -> Environment:
        """Return (building on first use) the Environment rooted at *directory*."""
        key = Path(directory)
        env = self._envs.get(key)
        if env is None:
            env = Environment(
                loader=FileSystemLoader(str(key)),
                undefined=self._undefined,
                extensions=self._extensions,
                keep_trailing_newline=True,
                autoescape=False,
            )
            env.globals.update(self._globals)
            self._envs[key] = env
        return env

    def execute(self, path: Path, variables: Mapping[str, Any], *, parse: bool = True) -> str:  # type: ignore[override]
        path = Path(path)
        if not parse:
            trace_render(self._log, 'raw read', path=str(path))
            return read_template_text(path)

        env = self.environment(path.parent)
        try:
            tpl = env.get_template(path.name)
        except TemplateNotFound as exc:
            raise ResolutionFailure(path, template=path.name, cause=exc) from exc
        except Exception as exc:  # noqa: BLE001 - syntax errors and loader failures
            raise ExecutionFault(str(exc), template=path.name, cause=exc) from exc

        trace_render(self._log, 'evaluating', path=str(path), variables=sorted(variables))
        try:
            return tpl.render(dict(variables))
        except ExecutionFault:
            # Nested tplview render (e.g. a template rendering another one).
            raise
        except Exception as exc:  # noqa: BLE001 - anything the template raised
            raise ExecutionFault(str(exc), template=path.name, cause=exc) from exc


class PassthroughExecutor(ScriptExecutorProtocol):
    """No-op interpreter: parsed output is the file text, unchanged."""

    def execute(self, path: Path, variables: Mapping[str, Any], *, parse: bool = True) -> str:  # type: ignore[override]
        return read_template_text(Path(path))


_DEFAULT_EXECUTOR: Optional[JinjaScriptExecutor] = None


def get_default_executor(logger: Optional[logging.Logger] = None) -> JinjaScriptExecutor:
    """Process-wide Jinja executor shared by Templates built without one."""
    global _DEFAULT_EXECUTOR
    if _DEFAULT_EXECUTOR is None:
        _DEFAULT_EXECUTOR = JinjaScriptExecutor(logger=logger)
    return _DEFAULT_EXECUTOR
