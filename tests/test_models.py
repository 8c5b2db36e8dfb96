from __future__ import annotations

import json
import unittest

from argflags import PRESENT, FlagValueError, ParseResult, PresenceFlag, StringValue, parse_flags


class FlagValueTests(unittest.TestCase):
    def test_variants(self) -> None:
        self.assertEqual(StringValue("a").as_str(), "a")
        self.assertEqual(StringValue("a").to_raw(), "a")
        self.assertIsNone(PRESENT.as_str())
        self.assertIs(PRESENT.to_raw(), True)
        self.assertEqual(PresenceFlag(), PRESENT)
        self.assertNotEqual(StringValue(""), PRESENT)


class ParseResultTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = parse_flags(["--port", "80", "--debug", "--empty=", "file"])

    def test_unpacks_as_pair(self) -> None:
        flags, args = self.result
        self.assertEqual(set(flags), {"port", "debug", "empty"})
        self.assertEqual(args, ("file",))

    def test_get_str(self) -> None:
        self.assertEqual(self.result.get_str("port"), "80")
        self.assertEqual(self.result.get_str("empty"), "")
        self.assertIsNone(self.result.get_str("debug"))
        self.assertEqual(self.result.get_str("debug", "fallback"), "fallback")
        self.assertEqual(self.result.get_str("missing", "x"), "x")

    def test_presence_checks(self) -> None:
        self.assertTrue(self.result.is_present("debug"))
        self.assertTrue(self.result.is_present("port"))
        self.assertFalse(self.result.is_present("missing"))
        self.assertTrue(self.result.is_presence_flag("debug"))
        self.assertFalse(self.result.is_presence_flag("port"))
        self.assertFalse(self.result.is_presence_flag("missing"))

    def test_require_str(self) -> None:
        self.assertEqual(self.result.require_str("port"), "80")
        with self.assertRaises(FlagValueError) as ctx:
            self.result.require_str("debug")
        self.assertEqual(ctx.exception.name, "debug")
        with self.assertRaises(ValueError):
            self.result.require_str("missing")

    def test_equal_by_value_but_unhashable(self) -> None:
        again = parse_flags(["--port", "80", "--debug", "--empty=", "file"])
        self.assertEqual(again, self.result)
        self.assertIsNone(ParseResult.__hash__)
        with self.assertRaises(TypeError):
            hash(self.result)

    def test_flags_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.result.flags["port"] = StringValue("81")  # type: ignore[index]

    def test_frozen(self) -> None:
        with self.assertRaises(AttributeError):
            self.result.args = ()  # type: ignore[misc]

    def test_caller_dict_is_copied(self) -> None:
        source = {"a": PRESENT}
        result = ParseResult(flags=source, args=["x"])
        source["b"] = PRESENT
        self.assertEqual(set(result.flags), {"a"})
        self.assertEqual(result.args, ("x",))

    def test_to_dict_is_json_serializable(self) -> None:
        payload = json.loads(json.dumps(self.result.to_dict()))
        self.assertEqual(
            payload,
            {"flags": {"port": "80", "debug": True, "empty": ""}, "args": ["file"]},
        )


if __name__ == "__main__":
    unittest.main()
