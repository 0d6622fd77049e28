import json
import os
import sys
import tempfile
import unittest

# Ensure src/ is on sys.path for imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from catalog import ModuleConfig, load_module_set, validate_modules_payload  # noqa: E402
from errors import ModuleLoadError, ModuleValidationError  # noqa: E402


class TestLoadModuleSet(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, content):
        path = os.path.join(self.tmp.name, "modules.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_missing_branch_defaults_to_main(self):
        path = self.write(json.dumps({"foo": {"git": "https://github.com/x/foo"}}))
        modules = load_module_set(path)
        self.assertEqual(modules["foo"].branch, "main")
        self.assertEqual(modules["foo"].description, "")

    def test_empty_branch_defaults_to_main(self):
        path = self.write(json.dumps({"foo": {"git": "https://github.com/x/foo", "branch": ""}}))
        self.assertEqual(load_module_set(path)["foo"].branch, "main")

    def test_explicit_fields_kept(self):
        path = self.write(
            json.dumps(
                {
                    "foo/bar": {
                        "git": "https://github.com/x/bar",
                        "branch": "develop",
                        "description": "Bar things",
                    }
                }
            )
        )
        self.assertEqual(
            load_module_set(path)["foo/bar"],
            ModuleConfig(git="https://github.com/x/bar", branch="develop", description="Bar things"),
        )

    def test_missing_file(self):
        with self.assertRaises(ModuleLoadError) as ctx:
            load_module_set(os.path.join(self.tmp.name, "nope.json"))
        self.assertIn("not found", str(ctx.exception))

    def test_malformed_json(self):
        path = self.write("{not json")
        with self.assertRaises(ModuleLoadError) as ctx:
            load_module_set(path)
        self.assertIn("failed to decode", str(ctx.exception))

    def test_empty_object_is_valid(self):
        self.assertEqual(load_module_set(self.write("{}")), {})


class TestValidatePayload(unittest.TestCase):
    def test_root_must_be_object(self):
        with self.assertRaises(ModuleValidationError):
            validate_modules_payload([{"git": "https://github.com/x/foo"}])

    def test_entry_must_be_object(self):
        with self.assertRaises(ModuleValidationError):
            validate_modules_payload({"foo": "https://github.com/x/foo"})

    def test_git_required(self):
        with self.assertRaises(ModuleValidationError):
            validate_modules_payload({"foo": {"description": "no repo"}})

    def test_non_string_field(self):
        with self.assertRaises(ModuleValidationError):
            validate_modules_payload({"foo": {"git": "https://github.com/x/foo", "branch": 3}})

    def test_path_escaping_names_rejected(self):
        for name in ["../evil", "/abs", "a//b", "a/./b", "", "a\\b"]:
            with self.subTest(name=name):
                with self.assertRaises(ModuleValidationError):
                    validate_modules_payload({name: {"git": "https://github.com/x/foo"}})

    def test_unknown_fields_ignored(self):
        normed = validate_modules_payload(
            {"foo": {"git": "https://github.com/x/foo", "stars": 10}}
        )
        self.assertEqual(set(normed["foo"]), {"git", "branch", "description"})

    def test_nul_in_name_rejected(self):
        with self.assertRaises(ModuleValidationError):
            validate_modules_payload({"a\u0000b": {"git": "https://github.com/x/foo"}})

    def test_values_kept_as_given(self):
        normed = validate_modules_payload(
            {"foo": {"git": " https://github.com/x/foo ", "branch": " dev "}}
        )
        self.assertEqual(normed["foo"]["git"], " https://github.com/x/foo ")
        self.assertEqual(normed["foo"]["branch"], " dev ")

    def test_blank_git_rejected(self):
        with self.assertRaises(ModuleValidationError):
            validate_modules_payload({"foo": {"git": "   "}})

    def test_validation_error_is_load_error(self):
        self.assertTrue(issubclass(ModuleValidationError, ModuleLoadError))


if __name__ == "__main__":
    unittest.main()
