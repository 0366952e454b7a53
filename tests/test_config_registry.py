#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR.parent / "src") not in sys.path:
    sys.path.insert(0, str(TESTS_DIR.parent / "src"))

from tplview import ConfigError, ConfigRegistry, TemplateConfig  # noqa: E402
from tplview.config.registry import get_global_config_registry  # noqa: E402


class ConfigRegistryTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ConfigRegistry().get()
        self.assertEqual(TemplateConfig(), cfg)
        self.assertIsNone(cfg.auto_layout_name)

    def test_merge_only_overwrites_supplied_keys(self) -> None:
        reg = ConfigRegistry({"path": "a/", "path_layouts": "b/"})
        reg.merge({"path": "c/"})
        cfg = reg.get()
        self.assertEqual("c/", cfg.path)
        self.assertEqual("b/", cfg.path_layouts)
        self.assertEqual("html", cfg.default_format)

    def test_merge_rejects_unknown_keys(self) -> None:
        reg = ConfigRegistry()
        with self.assertRaises(ConfigError):
            reg.merge({"pth": "typo/"})
        self.assertEqual(TemplateConfig(), reg.get())

    def test_merge_rejects_non_mapping(self) -> None:
        with self.assertRaises(ConfigError):
            ConfigRegistry().merge(["path"])  # type: ignore[arg-type]

    def test_config_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            ConfigRegistry({"nope": 1})

    def test_merge_does_not_validate_paths(self) -> None:
        reg = ConfigRegistry()
        reg.merge({"path": "/definitely/not/here/"})
        self.assertEqual("/definitely/not/here/", reg.get().path)

    def test_falsy_auto_layout_disables_it(self) -> None:
        reg = ConfigRegistry({"auto_layout": "div"})
        self.assertEqual("div", reg.get().auto_layout_name)
        reg.merge({"auto_layout": False})
        self.assertIsNone(reg.get().auto_layout)
        reg.merge({"auto_layout": "div"})
        reg.merge({"auto_layout": ""})
        self.assertIsNone(reg.get().auto_layout_name)

    def test_snapshot_and_restore(self) -> None:
        reg = ConfigRegistry()
        saved = reg.snapshot()
        reg.merge({"path": "x/", "auto_layout": "div"})
        reg.restore(saved)
        self.assertEqual(TemplateConfig(), reg.get())

    def test_merging_a_snapshot_restores_every_key(self) -> None:
        reg = ConfigRegistry()
        saved = reg.get()
        reg.merge({"path": "x/"})
        reg.merge(saved)
        self.assertEqual(saved, reg.get())

    def test_reset_returns_to_constructor_defaults(self) -> None:
        reg = ConfigRegistry({"path": "base/"})
        reg.merge({"path": "other/"})
        self.assertEqual("base/", reg.reset().path)

    def test_override_context_manager(self) -> None:
        reg = ConfigRegistry()
        with reg.override(auto_layout="div") as cfg:
            self.assertEqual("div", cfg.auto_layout)
            self.assertEqual("div", reg.get().auto_layout)
        self.assertIsNone(reg.get().auto_layout)

    def test_override_restores_on_error(self) -> None:
        reg = ConfigRegistry()
        with self.assertRaises(RuntimeError):
            with reg.override(path="tmp/"):
                raise RuntimeError("inside")
        self.assertEqual(TemplateConfig().path, reg.get().path)

    def test_from_env(self) -> None:
        env = {
            "TPLVIEW_TEMPLATE_PATH": "/srv/views/",
            "TPLVIEW_LAYOUT_PATH": "/srv/layouts/",
            "TPLVIEW_AUTO_LAYOUT": "site",
        }
        with patch.dict(os.environ, env):
            cfg = ConfigRegistry.from_env().get()
        self.assertEqual(("/srv/views/", "/srv/layouts/", "site"), (cfg.path, cfg.path_layouts, cfg.auto_layout))

    def test_from_env_ignores_unset_variables(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(TemplateConfig(), ConfigRegistry.from_env().get())

    def test_global_registry_is_a_singleton(self) -> None:
        self.assertIs(get_global_config_registry(), get_global_config_registry())


if __name__ == "__main__":
    unittest.main()
