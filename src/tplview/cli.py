from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Dict, List, NoReturn, Optional, Sequence

from tplview.config.registry import ConfigRegistry
from tplview.core.errors import ExecutionFault
from tplview.core.interfaces.logging import LoggerFactoryProtocol
from tplview.core.interfaces.templating import ScriptExecutorProtocol
from tplview.logging.factory import DefaultLoggerFactory
from tplview.logging.helpers import get_logger
from tplview.rendering.diagnostics import fault_to_text
from tplview.rendering.executor import JinjaScriptExecutor, PassthroughExecutor
from tplview.rendering.template import Template
from tplview.utils.imports import instantiate_from_ref
from tplview.utils.items import parse_items

logger = get_logger('cli')


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser for a single render."""
    p = argparse.ArgumentParser(
        prog="tplview",
        description="Render a named template (optionally wrapped in a layout) to stdout.",
    )
    p.add_argument("name", help="template name, without format or extension")

    g_loc = p.add_argument_group("Resolution")
    g_loc.add_argument("-p", "--path", metavar="DIR", help="template root directory")
    g_loc.add_argument("-L", "--layouts", metavar="DIR", dest="path_layouts", help="layout root directory")
    g_loc.add_argument("-f", "--format", metavar="FMT", dest="fmt", help="format segment (default: html)")
    g_loc.add_argument("-x", "--extension", metavar="EXT", help="extension segment (default: j2)")

    g_lay = p.add_argument_group("Layout")
    excl = g_lay.add_mutually_exclusive_group()
    excl.add_argument("-l", "--layout", metavar="NAME", help="wrap the output in layout NAME")
    excl.add_argument("--no-layout", action="store_true", help="never wrap, even with --auto-layout")
    g_lay.add_argument("-a", "--auto-layout", metavar="NAME", help="registry-level default layout")

    g_out = p.add_argument_group("Rendering")
    g_out.add_argument(
        "-e", "--var", metavar="KEY=VALUE", action="append", dest="variables",
        help="bind a template variable (repeatable)",
    )
    g_out.add_argument("--raw", action="store_true", help="print the file text without evaluating it")
    g_out.add_argument(
        "--executor", metavar="MODULE:CLASS",
        help="script executor class, 'passthrough', or 'jinja' (default)",
    )

    g_misc = p.add_argument_group("Miscellaneous")
    g_misc.add_argument("--json-logs", action="store_true", help="emit JSON logs on stderr")
    g_misc.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _configure_logging(enable_json: bool, verbose: bool) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    global logger
    factory: LoggerFactoryProtocol = DefaultLoggerFactory.from_flags(json_logs=enable_json, verbose=verbose)
    logger = factory.get_logger('cli')


def _make_executor(ref: Optional[str]) -> ScriptExecutorProtocol:
    """Resolve the --executor flag.

    Resolution order:
        1) --executor / TPLVIEW_EXECUTOR
        2) 'passthrough' → PassthroughExecutor, 'jinja' or empty → JinjaScriptExecutor
        3) 'module.path:ClassName' → dynamic import, instantiated without arguments

    Raises:
        ImportError: If the reference does not yield a ScriptExecutorProtocol.
    """
    ref = (ref or os.getenv('TPLVIEW_EXECUTOR') or '').strip()
    if not ref or ref.lower() == 'jinja':
        return JinjaScriptExecutor(logger=logger)
    if ref.lower() == 'passthrough':
        return PassthroughExecutor()
    return instantiate_from_ref(ref, ScriptExecutorProtocol)


def _template_overrides(ns: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if ns.path:
        overrides['path'] = ns.path
    if ns.path_layouts:
        overrides['path_layouts'] = ns.path_layouts
    if ns.auto_layout:
        overrides['auto_layout'] = ns.auto_layout
    if ns.extension:
        overrides['default_extension'] = ns.extension
    return overrides


def render(argv: Sequence[str]) -> str:
    """Parse *argv* and return the rendered text; faults propagate."""
    return _render(_build_parser().parse_args(list(argv)))


def _render(ns: argparse.Namespace) -> str:
    _configure_logging(ns.json_logs, ns.verbose)

    registry = ConfigRegistry.from_env(logger=logger)
    registry.merge(_template_overrides(ns))

    tpl = Template(
        ns.name,
        parse_items(ns.variables),
        config=registry,
        executor=_make_executor(ns.executor),
        logger=logger,
    )
    if ns.fmt:
        tpl.format(ns.fmt)
    if ns.no_layout:
        tpl.layout(False)
    elif ns.layout:
        tpl.layout(ns.layout)
    return tpl.content(parse=not ns.raw)


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Entry point for `tplview` and `python -m tplview`."""
    args = sys.argv[1:] if argv is None else argv
    ns = _build_parser().parse_args(args)
    try:
        sys.stdout.write(_render(ns))
        sys.stdout.flush()
        raise SystemExit(0)
    except ExecutionFault as fault:
        sys.stderr.write(fault_to_text(ns.name, fault) + '\n')
        raise SystemExit(1)
    except (ImportError, ValueError) as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)


if __name__ == '__main__':
    main()
