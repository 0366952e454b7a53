#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command-line tests: flags map onto Template settings, faults map onto exit
codes and stderr diagnostics.
"""
from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

TESTS_DIR = Path(__file__).resolve().parent
for _p in (TESTS_DIR.parent / "src", TESTS_DIR / "tools"):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

import build_fixtures  # noqa: E402
from tplview import DIAGNOSTIC_MARKER, PassthroughExecutor  # noqa: E402
from tplview.cli import _make_executor, main, render  # noqa: E402
from tplview.rendering.executor import JinjaScriptExecutor  # noqa: E402

_CLEAN_ENV = {k: v for k, v in os.environ.items() if not k.startswith("TPLVIEW_")}


class CliTestBase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        cls._tmp = tempfile.TemporaryDirectory(prefix="tplview-cli-")
        cls.template_dir = build_fixtures.build(Path(cls._tmp.name) / "templates")
        cls.layout_dir = cls.template_dir + "layouts/"

    @classmethod
    def tearDownClass(cls) -> None:
        cls._tmp.cleanup()
        super().tearDownClass()

    def setUp(self) -> None:
        super().setUp()
        env = patch.dict(os.environ, _CLEAN_ENV, clear=True)
        env.start()
        self.addCleanup(env.stop)

    def _run(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(list(argv))
        return ctx.exception.code, out.getvalue(), err.getvalue()


class RenderTests(CliTestBase):
    def test_render_evaluates_template(self) -> None:
        self.assertEqual("42", render(["dynamic", "-p", self.template_dir]))

    def test_render_raw(self) -> None:
        self.assertEqual("{{ 6 * 7 }}", render(["dynamic", "-p", self.template_dir, "--raw"]))

    def test_render_binds_variables(self) -> None:
        out = render(["variableSet", "-p", self.template_dir, "-e", "variable=hi"])
        self.assertEqual("hi", out)

    def test_render_with_layout(self) -> None:
        out = render(["test", "-p", self.template_dir, "-L", self.layout_dir, "-l", "div"])
        self.assertEqual("<div><p>Test</p></div>", out)

    def test_auto_layout_and_no_layout(self) -> None:
        base = ["test", "-p", self.template_dir, "-L", self.layout_dir, "-a", "div"]
        self.assertEqual("<div><p>Test</p></div>", render(base))
        self.assertEqual("<p>Test</p>", render(base + ["--no-layout"]))

    def test_format_flag(self) -> None:
        self.assertEqual("<index/>", render(["index", "-p", self.template_dir, "-f", "xml"]))

    def test_env_supplies_paths(self) -> None:
        env = {"TPLVIEW_TEMPLATE_PATH": self.template_dir, "TPLVIEW_LAYOUT_PATH": self.layout_dir}
        with patch.dict(os.environ, env):
            self.assertEqual("<div>42</div>", render(["dynamic", "-l", "div"]))

    def test_passthrough_executor(self) -> None:
        out = render(["dynamic", "-p", self.template_dir, "--executor", "passthrough"])
        self.assertEqual("{{ 6 * 7 }}", out)


class ExecutorFlagTests(CliTestBase):
    def test_default_is_jinja(self) -> None:
        self.assertIsInstance(_make_executor(None), JinjaScriptExecutor)
        self.assertIsInstance(_make_executor("JINJA"), JinjaScriptExecutor)

    def test_env_variable_is_consulted(self) -> None:
        with patch.dict(os.environ, {"TPLVIEW_EXECUTOR": "passthrough"}):
            self.assertIsInstance(_make_executor(None), PassthroughExecutor)

    def test_dotted_reference(self) -> None:
        ex = _make_executor("tplview.rendering.executor:PassthroughExecutor")
        self.assertIsInstance(ex, PassthroughExecutor)

    def test_bad_reference(self) -> None:
        with self.assertRaises(ImportError):
            _make_executor("no_such_module_xyz:Thing")

    def test_reference_must_yield_an_executor(self) -> None:
        with self.assertRaises(ImportError):
            _make_executor("tplview.core.models:Request")
        with self.assertRaises(ImportError):
            _make_executor("tplview.constants:MAX_LAYOUT_DEPTH")


class MainExitCodeTests(CliTestBase):
    def test_success_writes_stdout(self) -> None:
        code, out, _ = self._run("test", "-p", self.template_dir)
        self.assertEqual(0, code)
        self.assertEqual("<p>Test</p>", out)

    def test_execution_fault_exits_1_with_diagnostic(self) -> None:
        code, out, err = self._run("exception", "-p", self.template_dir)
        self.assertEqual(1, code)
        self.assertEqual("", out)
        self.assertIn(DIAGNOSTIC_MARKER, err)
        self.assertIn(build_fixtures.EXCEPTION_MESSAGE, err)
        self.assertNotIn("Traceback", err)

    def test_missing_template_exits_1(self) -> None:
        code, _, err = self._run("missing", "-p", self.template_dir)
        self.assertEqual(1, code)
        self.assertIn(DIAGNOSTIC_MARKER + " 'missing':", err)
        self.assertIn("missing.html.j2", err)

    def test_malformed_variable_exits_2(self) -> None:
        code, out, _ = self._run("test", "-p", self.template_dir, "-e", "novalue")
        self.assertEqual((2, ""), (code, out))

    def test_bad_executor_exits_2(self) -> None:
        code, _, _ = self._run("test", "-p", self.template_dir, "--executor", "nope_mod:Nope")
        self.assertEqual(2, code)

    def test_executor_needing_arguments_exits_2(self) -> None:
        code, out, _ = self._run("test", "-p", self.template_dir, "--executor", "os.path:join")
        self.assertEqual((2, ""), (code, out))

    def test_executor_without_execute_method_exits_2(self) -> None:
        code, out, _ = self._run(
            "test", "-p", self.template_dir, "--executor", "tplview.core.models:Response"
        )
        self.assertEqual((2, ""), (code, out))

    def test_conflicting_layout_flags_are_usage_errors(self) -> None:
        code, _, _ = self._run("test", "-l", "div", "--no-layout")
        self.assertEqual(2, code)


if __name__ == "__main__":
    unittest.main()
