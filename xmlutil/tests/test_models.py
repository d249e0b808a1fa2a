#!/usr/bin/env python3
"""
Tests for the result type and exceptions.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from xmlutil.config import FAILURE_META
from xmlutil.models import FailureReason, NotATextNodeError, XmlResult, XmlUtilError


class TestFailureMetadata(unittest.TestCase):
    """Every failure reason has a description."""

    def test_all_reasons_described(self):
        for reason in FailureReason:
            self.assertIn(reason.value, FAILURE_META, f"Missing reason: {reason}")

    def test_str(self):
        self.assertEqual(str(FailureReason.PARSE_ERROR), "PARSE_ERROR")


class TestXmlResult(unittest.TestCase):

    def test_success(self):
        result = XmlResult.success("<a/>")
        self.assertTrue(result.ok)
        self.assertFalse(result.is_failure)
        self.assertEqual(result.value_or("fallback"), "<a/>")
        self.assertEqual(result.describe(), "OK")

    def test_failure(self):
        result = XmlResult.failed(FailureReason.TRANSFORM_ERROR, "boom")
        self.assertFalse(result.ok)
        self.assertTrue(result.is_failure)
        self.assertIsNone(result.value)
        self.assertIsNone(result.value_or())
        self.assertEqual(result.value_or(""), "")
        self.assertEqual(result.describe(), "Cannot serialize node: boom")

    def test_failure_without_message(self):
        result = XmlResult.failed(FailureReason.IO_ERROR)
        self.assertEqual(result.describe(), FAILURE_META["IO_ERROR"])


class TestExceptions(unittest.TestCase):

    def test_not_a_text_node(self):
        err = NotATextNodeError("name", "Element")
        self.assertIsInstance(err, XmlUtilError)
        self.assertEqual(err.tag, "name")
        self.assertIn("<name>", str(err))
        self.assertIn("Element", str(err))

    def test_not_a_text_node_without_child(self):
        err = NotATextNodeError("name")
        self.assertIn("no child", str(err))


if __name__ == "__main__":
    unittest.main()
