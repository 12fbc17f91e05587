# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description:
"""
import os
import sys
import json
import tempfile
import unittest
from unittest import mock

sys.path.append('..')
from cmdbuilder.config import CommandConfig, load_config, timeout_from_env
from cmdbuilder.format_command import Separators


class ConfigTestCase(unittest.TestCase):

    @mock.patch("cmdbuilder.config.DEFAULT_CONFIG_PATH", "/nonexistent/config.json")
    def test_defaults(self):
        config = load_config()
        self.assertEqual(config.separators, Separators("-", " ", "--", "="))
        self.assertEqual(config.encoding, "utf-8")
        self.assertIsNone(config.cwd)
        self.assertFalse(config.debug)

    def test_separators_normalized(self):
        config = CommandConfig(separators=["/", ":", "-", " "])
        self.assertIsInstance(config.separators, Separators)
        self.assertEqual(config.separators.long_value_sep, " ")

    def test_load_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"separators": ["/", ":", "-", " "], "timeout": 10, "debug": True}, f)
            config = load_config(path)
        self.assertEqual(config.separators, Separators("/", ":", "-", " "))
        self.assertEqual(config.timeout, 10.0)
        self.assertTrue(config.debug)

    def test_bad_file_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{not json")
            config = load_config(path)
        self.assertEqual(config.separators, Separators())

    def test_missing_file(self):
        config = load_config("/nonexistent/config.json")
        self.assertEqual(config, CommandConfig())

    def test_default_config_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"timeout": 7, "cwd": "/tmp"}, f)
            with mock.patch("cmdbuilder.config.DEFAULT_CONFIG_PATH", path):
                config = load_config()
        self.assertEqual(config.timeout, 7.0)
        self.assertEqual(config.cwd, "/tmp")

    def test_explicit_path_wins_over_default(self):
        with tempfile.TemporaryDirectory() as tmp:
            default_path = os.path.join(tmp, "default.json")
            path = os.path.join(tmp, "config.json")
            with open(default_path, "w", encoding="utf-8") as f:
                json.dump({"timeout": 7}, f)
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"timeout": 9}, f)
            with mock.patch("cmdbuilder.config.DEFAULT_CONFIG_PATH", default_path):
                config = load_config(path)
        self.assertEqual(config.timeout, 9.0)

    def test_timeout_from_env(self):
        with mock.patch.dict(os.environ, {"CMDBUILDER_TIMEOUT": "12.5"}):
            self.assertEqual(timeout_from_env(), 12.5)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(timeout_from_env(), 300.0)

    def test_invalid_timeout_from_env(self):
        with mock.patch.dict(os.environ, {"CMDBUILDER_TIMEOUT": "soon"}):
            self.assertEqual(timeout_from_env(), 300.0)
            self.assertEqual(timeout_from_env(60.0), 60.0)


if __name__ == '__main__':
    unittest.main()
