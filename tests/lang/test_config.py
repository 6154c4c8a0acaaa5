import os
import unittest
from unittest.mock import patch

from tuber.lang import config
from tuber.lang.config import DisplayStyle


class ConfigTestCase(unittest.TestCase):

    def test_display_style(self):
        cases = {
            "Lazy_K": DisplayStyle.LAZY_K,
            "ECMAScript": DisplayStyle.ECMASCRIPT,
            "ecmascript": DisplayStyle.LAZY_K,
            "": DisplayStyle.LAZY_K,
        }
        for case, result in cases.items():
            with patch.dict(os.environ, {config.STYLE_VAR: case}):
                self.assertIs(result, config.display_style(), case)

        with patch.dict(os.environ, clear=True):
            self.assertIs(DisplayStyle.LAZY_K, config.display_style())

    def test_step_limit(self):
        cases = {"5": 5, "1": 1, "0": 1000, "-3": 1000, "many": 1000, "2.5": 1000}
        for case, result in cases.items():
            with patch.dict(os.environ, {config.LIMIT_VAR: case}):
                self.assertEqual(result, config.step_limit(), case)

        with patch.dict(os.environ, clear=True):
            self.assertEqual(config.DEFAULT_STEP_LIMIT, config.step_limit())

    def test_history_dir(self):
        with patch.dict(os.environ, {config.HISTORY_VAR: "/tmp/tuber-history"}):
            self.assertEqual("/tmp/tuber-history", config.history_dir())

        with patch.dict(os.environ, {"HOME": "/home/church"}, clear=True):
            self.assertEqual(os.path.join("/home/church", ".tuber"), config.history_dir())


if __name__ == '__main__':
    unittest.main()
