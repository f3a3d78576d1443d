import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from unused_tree.config import (
    AnalysisConfig,
    AppConfig,
    ConfigError,
    ReportConfig,
    safe_load_dataclass,
)


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.test_path = Path(self.test_dir).resolve()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def write_config(self, content):
        path = self.test_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_load_config_success(self):
        path = self.write_config(f"""
analysis:
  check_path: "{self.test_path.as_posix()}"
  only_show_unused: false
  skip_paths: ["dist"]
  skip_files: ["index.d.ts"]
report:
  need_report: true
  report_file_name: "unused.txt"
logging:
  level: "DEBUG"
""")
        config = AppConfig.load(path)
        self.assertEqual(config.analysis.check_path, self.test_path)
        self.assertFalse(config.analysis.only_show_unused)
        self.assertEqual(config.analysis.skip_paths, ("dist", "node_modules"))
        self.assertEqual(config.analysis.skip_files, ("index.d.ts",))
        self.assertTrue(config.report.need_report)
        self.assertEqual(config.report_file, self.test_path / "unused.txt")
        self.assertEqual(config.logging.level, "DEBUG")

    def test_missing_sections_use_defaults(self):
        config = AppConfig.load(self.write_config("analysis:\n  only_show_unused: true\n"))
        self.assertEqual(config.report, ReportConfig())
        self.assertEqual(config.logging.level, "INFO")
        self.assertEqual(config.analysis.skip_files, ("type.ts",))

    def test_empty_file_uses_defaults(self):
        config = AppConfig.load(self.write_config(""))
        self.assertTrue(config.analysis.only_show_unused)
        self.assertFalse(config.report.need_report)

    def test_unknown_key_is_ignored_with_warning(self):
        path = self.write_config("report:\n  need_report: true\n  colour: red\n")
        with self.assertLogs("unused_tree.config.models", level="WARNING") as logs:
            config = AppConfig.load(path)
        self.assertTrue(config.report.need_report)
        self.assertIn("colour", logs.output[0])

    def test_scalar_where_list_expected(self):
        path = self.write_config("analysis:\n  skip_paths: dist\n  skip_files: index.d.ts\n")
        config = AppConfig.load(path)
        self.assertEqual(config.analysis.skip_paths, ("dist", "node_modules"))
        self.assertEqual(config.analysis.skip_files, ("index.d.ts",))

    def test_invalid_yaml(self):
        with self.assertRaises(ConfigError):
            AppConfig.load(self.write_config("analysis: [unclosed\n"))

    def test_section_must_be_mapping(self):
        with self.assertRaises(ConfigError):
            safe_load_dataclass(AnalysisConfig, ["not", "a", "mapping"], "analysis")

    def test_load_config_not_found(self):
        with patch("pathlib.Path.exists", return_value=False):
            with self.assertRaises(ConfigError):
                AppConfig.load("missing.yaml")

    def test_report_path_overrides_check_path(self):
        config = AppConfig(
            analysis=AnalysisConfig(check_path=self.test_path),
            report=ReportConfig(report_path=self.test_path / "out"),
            logging=AppConfig.default().logging,
        )
        self.assertEqual(config.report_file, self.test_path / "out" / "report.txt")

    def test_overrides(self):
        config = AppConfig.default(self.test_path).with_overrides(
            only_show_unused=False, need_report=True
        )
        self.assertFalse(config.analysis.only_show_unused)
        self.assertTrue(config.report.need_report)
        self.assertEqual(config.analysis.skip_paths, ("node_modules",))

    def test_config_is_immutable(self):
        config = AppConfig.default(self.test_path)
        with self.assertRaises(AttributeError):
            config.analysis.only_show_unused = False


if __name__ == '__main__':
    unittest.main()
