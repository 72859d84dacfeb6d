import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.core import policy as policy_module
from resume_optimizer.core.policy import get_policy_config, get_policy_value


class PolicyConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_policy_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_policy_value("rewrite.word_count.min_words"), 500)
        self.assertEqual(get_policy_value("ats.match_levels.excellent"), 85)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_policy_value("rewrite.word_count.nope", 7), 7)
        self.assertEqual(get_policy_value("rewrite.max_attempts.deeper", "x"), "x")
        self.assertIsNone(get_policy_value(""))

    def test_default_policy_file_ships_inside_the_package(self):
        package_dir = Path(policy_module.__file__).resolve().parents[1]
        self.assertEqual(policy_module._DEFAULT_POLICY_PATH.parent.parent, package_dir)
        self.assertTrue(policy_module._DEFAULT_POLICY_PATH.is_file())


if __name__ == "__main__":
    unittest.main()
