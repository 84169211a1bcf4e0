import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pydantic import ValidationError

from core.config import AppSettings, LogLevel, get_user_config_dir, write_user_env_vars


class AppSettingsTests(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = AppSettings(_env_file=None)

        self.assertEqual(settings.endpoint, "https://localhost")
        self.assertIsNone(settings.username)
        self.assertFalse(settings.verify_tls)
        self.assertEqual(settings.http_timeout_seconds, 30.0)

    def test_reads_prefixed_environment(self):
        env = {
            "REDFISH_ENDPOINT": "https://10.0.0.5",
            "REDFISH_USERNAME": "root",
            "REDFISH_VERIFY_TLS": "true",
            "REDFISH_HTTP_TIMEOUT_SECONDS": "12.5",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = AppSettings(_env_file=None)

        self.assertEqual(settings.endpoint, "https://10.0.0.5")
        self.assertEqual(settings.username, "root")
        self.assertTrue(settings.verify_tls)
        self.assertEqual(settings.http_timeout_seconds, 12.5)

    def test_log_level_is_normalized(self):
        with mock.patch.dict(os.environ, {"REDFISH_LOG_LEVEL": "info"}, clear=True):
            settings = AppSettings(_env_file=None)

        self.assertIs(settings.log_level, LogLevel.INFO)

    def test_rejects_unknown_log_level(self):
        with self.assertRaises(ValidationError):
            AppSettings(_env_file=None, log_level="verbose")

    def test_rejects_non_positive_timeout(self):
        with self.assertRaises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)

    def test_reads_env_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / ".env"
            env_file.write_text("REDFISH_ENDPOINT=https://from-file\n", encoding="utf-8")
            with mock.patch.dict(os.environ, {}, clear=True):
                settings = AppSettings(_env_file=env_file)

        self.assertEqual(settings.endpoint, "https://from-file")


class UserEnvFileTests(unittest.TestCase):
    def test_user_config_dir_honours_xdg(self):
        with mock.patch("sys.platform", "linux"), mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": "/tmp/xdg"}):
            self.assertEqual(get_user_config_dir(), Path("/tmp/xdg/redfish-inventory"))

    def test_write_merges_existing_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / "nested" / ".env"
            write_user_env_vars({"REDFISH_ENDPOINT": "https://a", "REDFISH_USERNAME": "u"}, env_path=env_file)
            write_user_env_vars({"REDFISH_ENDPOINT": "https://b", "REDFISH_PASSWORD": None}, env_path=env_file)

            lines = env_file.read_text(encoding="utf-8").splitlines()

        self.assertEqual(
            lines,
            [
                "# redfish-inventory user config (.env)",
                "REDFISH_ENDPOINT=https://b",
                "REDFISH_USERNAME=u",
            ],
        )
