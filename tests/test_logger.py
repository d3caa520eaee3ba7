import contextlib
import io
import json
import unittest

from optionpy import ConsoleLogger


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_with_fields(self):
        buf = io.StringIO()
        log = ConsoleLogger(name="t", stream=buf).bind(example="horse")
        log.info("hello", n=1)
        line = buf.getvalue().strip()
        self.assertIn("t INFO: hello", line)
        self.assertTrue(line.endswith(" example=horse n=1"))

    def test_level_filtering(self):
        buf = io.StringIO()
        log = ConsoleLogger(level="WARN", stream=buf)
        log.info("skipped")
        log.error("kept")
        self.assertNotIn("skipped", buf.getvalue())
        self.assertIn("ERROR: kept", buf.getvalue())
        log.set_level("debug")
        log.debug("now visible")
        self.assertIn("DEBUG: now visible", buf.getvalue())

    def test_unknown_levels(self):
        self.assertEqual(ConsoleLogger(level="LOUD").level_name, "INFO")
        log = ConsoleLogger(level="ERROR")
        log.set_level("LOUD")
        self.assertEqual(log.level_name, "ERROR")

    def test_json_output(self):
        buf = io.StringIO()
        ConsoleLogger(name="j", json_output=True, stream=buf).warn("careful", key="v")
        data = json.loads(buf.getvalue())
        self.assertEqual(data["name"], "j")
        self.assertEqual(data["level"], "WARN")
        self.assertEqual(data["msg"], "careful")
        self.assertEqual(data["fields"], {"key": "v"})

    def test_bind_keeps_settings(self):
        log = ConsoleLogger(name="b", level="DEBUG", json_output=True, context={"a": 1})
        child = log.bind(b=2)
        self.assertEqual(child.context, {"a": 1, "b": 2})
        self.assertEqual(log.context, {"a": 1})
        self.assertEqual(child.level_name, "DEBUG")
        self.assertTrue(child.json_output)

    def test_defaults_to_stderr(self):
        buf = io.StringIO()
        with contextlib.redirect_stderr(buf):
            ConsoleLogger().info("to stderr")
        self.assertIn("optionpy INFO: to stderr", buf.getvalue())

    def test_format_without_writing(self):
        log = ConsoleLogger(name="f", level="ERROR", context={"a": 1})
        self.assertFalse(log.enabled_for("INFO"))
        self.assertTrue(log.enabled_for("ERROR"))
        self.assertTrue(log.format("INFO", "m", {"b": 2}).endswith("f INFO: m a=1 b=2"))
        log.json_output = True
        data = json.loads(log.format("INFO", "m", {}))
        self.assertEqual(data["fields"], {"a": 1})


if __name__ == "__main__":
    unittest.main()
