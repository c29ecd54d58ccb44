import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import resume_checker.main  # noqa: F401
from resume_checker.core.scoring import get_scoring_value


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_scoring_config_lookup(self):
        self.assertEqual(get_scoring_value("score.skills_weight"), 0.7)

    def test_routes_are_mounted_under_api(self):
        paths = set(resume_checker.main.app.openapi()["paths"])
        self.assertTrue({"/api/health", "/api/analyze", "/api/parse-file"} <= paths)


if __name__ == "__main__":
    unittest.main()
