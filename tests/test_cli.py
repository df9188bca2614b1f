import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from pydantic import ValidationError

from http_healthcheck.cli import MAX_INTERVAL_S, main, parse_args
from http_healthcheck.config import settings
from http_healthcheck.models import Configuration


class ParseArgsTests(unittest.TestCase):
    def test_interval_and_url(self) -> None:
        config, verbose = parse_args(["2", "http://example.com/"])

        self.assertEqual(config.interval, 2)
        self.assertEqual(config.url, "http://example.com/")
        self.assertEqual(config.timeout_s, settings.HEALTHCHECK_TIMEOUT_SECONDS)
        self.assertFalse(verbose)

    def test_url_is_not_validated_at_parse_time(self) -> None:
        config, _ = parse_args(["1", "this_is_not_an_url"])
        self.assertEqual(config.url, "this_is_not_an_url")

    def test_zero_interval_allowed(self) -> None:
        config, _ = parse_args(["0", "http://example.com/"])
        self.assertEqual(config.interval, 0)

    def test_largest_sleepable_interval_is_accepted(self) -> None:
        config, _ = parse_args([str(MAX_INTERVAL_S), "http://example.com/"])
        self.assertEqual(config.interval, MAX_INTERVAL_S)

    def test_timeout_and_verbose_flags(self) -> None:
        config, verbose = parse_args(["1", "http://example.com/", "--timeout", "2.5", "-v"])
        self.assertEqual(config.timeout_s, 2.5)
        self.assertTrue(verbose)

    def test_invalid_arguments_exit_with_usage_error(self) -> None:
        for argv in (
            [],
            ["http://example.com/"],
            ["abc", "http://example.com/"],
            ["-1", "http://example.com/"],
            ["1.5", "http://example.com/"],
            ["1", "http://example.com/", "--timeout", "0"],
            ["1", "http://example.com/", "--timeout", "nan"],
            ["1", "http://example.com/", "--timeout", "inf"],
            [str(10**10), "http://example.com/"],
        ):
            with self.subTest(argv=argv):
                err = io.StringIO()
                with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
                    parse_args(argv)
                self.assertEqual(ctx.exception.code, 2)
                self.assertIn("usage:", err.getvalue())

    def test_non_numeric_interval_message(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit):
            parse_args(["abc", "http://example.com/"])
        self.assertIn("invalid non-negative integer: 'abc'", err.getvalue())

    def test_version_flag(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            parse_args(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("http-healthcheck", out.getvalue())

    def test_configuration_is_immutable(self) -> None:
        config = Configuration(interval=1, url="http://example.com/", timeout_s=1)
        with self.assertRaises(ValidationError):
            config.interval = 5


class MainTests(unittest.TestCase):
    def test_bad_url_exits_non_zero_without_requests(self) -> None:
        out = io.StringIO()
        with patch("http_healthcheck.checks.http_check.requests.Session") as session_cls, redirect_stdout(
            out
        ), redirect_stderr(io.StringIO()):
            code = main(["1", "this_is_not_an_url"])

        self.assertEqual(code, 1)
        self.assertEqual(out.getvalue(), "URL parsing error\n")
        session_cls.return_value.get.assert_not_called()
        session_cls.return_value.close.assert_called_once_with()

    def test_interrupt_returns_130(self) -> None:
        with patch("http_healthcheck.cli.loop_forever", side_effect=KeyboardInterrupt):
            self.assertEqual(main(["1", "http://example.com/"]), 130)


if __name__ == "__main__":
    unittest.main()
