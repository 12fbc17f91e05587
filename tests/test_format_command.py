# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description:
"""
import sys
import unittest

sys.path.append('..')
from cmdbuilder.format_command import (
    Separators, quote, escape_name, is_short, format_argument, format_command
)


class QuoteTestCase(unittest.TestCase):

    def test_single_quotes(self):
        self.assertEqual(quote("hello 'x' world"), '"hello \'x\' world"')

    def test_double_quotes(self):
        self.assertEqual(quote('hello "x" world'), '\'hello "x" world\'')

    def test_both_quotes(self):
        self.assertEqual(quote('hello "som\'thing" world'), '"hello \\"som\'thing\\" world"')

    def test_space(self):
        self.assertEqual(quote("plain value"), '"plain value"')

    def test_unchanged(self):
        self.assertEqual(quote("noquotesnospace"), "noquotesnospace")
        self.assertEqual(quote(42), "42")
        self.assertEqual(quote(""), "")

    def test_single_quote_without_space(self):
        self.assertEqual(quote("it's"), '"it\'s"')


class FormatTestCase(unittest.TestCase):

    def test_escape_name(self):
        self.assertEqual(escape_name("my tool"), "my\\ tool")
        self.assertEqual(escape_name("ls"), "ls")

    def test_is_short(self):
        self.assertTrue(is_short("m"))
        self.assertTrue(is_short(5))
        self.assertFalse(is_short(""))
        self.assertFalse(is_short("max"))

    def test_format_argument(self):
        self.assertEqual(format_argument("m", 2), "-m 2")
        self.assertEqual(format_argument("max", 2), "--max=2")
        self.assertEqual(format_argument("p"), "-p")
        self.assertEqual(format_argument("", "x"), "--=x")

    def test_format_argument_custom_separators(self):
        separators = Separators("/", ":", "-", " ")
        self.assertEqual(format_argument("m", 2, separators), "/m:2")
        self.assertEqual(format_argument("dest", "value", separators), "-dest value")

    def test_format_command(self):
        result = format_command("jpegoptim", [("m", 2), ("preserve", None)], ["image.jpg"])
        self.assertEqual(result, "jpegoptim -m 2 --preserve image.jpg")
        self.assertEqual(format_command("foo"), "foo")


if __name__ == '__main__':
    unittest.main()
