"""
Unit tests for descriptor/names.py module.
"""

import unittest

from ..descriptor.loader import from_dict
from ..descriptor import names


def make_file(name="foo/bar_baz.proto", package="", options=None, **types):
    data = {"name": name, "package": package}
    if options:
        data["options"] = options
    data.update(types)
    return from_dict(data)


class TestCamelCase(unittest.TestCase):
    """Tests for camel_case function."""

    def test_underscores(self):
        self.assertEqual(names.camel_case("foo_bar_baz", True), "FooBarBaz")
        self.assertEqual(names.camel_case("foo_bar", False), "fooBar")

    def test_digits_capitalize_next_letter(self):
        self.assertEqual(names.camel_case("foo2bar", True), "Foo2Bar")

    def test_leading_capital_lowered(self):
        self.assertEqual(names.camel_case("FooBar", False), "fooBar")

    def test_other_separators_dropped(self):
        self.assertEqual(names.camel_case("hello-world.v1", True), "HelloWorldV1")


class TestClassNames(unittest.TestCase):
    """Tests for outer class name resolution."""

    def test_default_class_name(self):
        self.assertEqual(names.file_default_class_name(make_file()), "BarBaz")
        self.assertEqual(names.file_default_class_name(make_file(name="plain.protodevel")), "Plain")

    def test_explicit_outer_classname(self):
        file = make_file(options={"java_outer_classname": "Protos"})
        self.assertEqual(names.file_class_name(file, True), "Protos")

    def test_conflict_appends_outer_class(self):
        file = make_file(messages=[{"name": "BarBaz"}])
        self.assertEqual(names.file_class_name(file, True), "BarBazOuterClass")

    def test_mutable_prefix(self):
        self.assertEqual(names.file_class_name(make_file(), False), "MutableBarBaz")

    def test_conflict_in_nested_type(self):
        file = make_file(messages=[{"name": "Outer", "messages": [{"name": "Inner"}],
                                    "enums": [{"name": "Kind", "values": [{"name": "A", "number": 0}]}]}])
        self.assertTrue(names.has_conflicting_class_name(file, "Inner"))
        self.assertTrue(names.has_conflicting_class_name(file, "Kind"))
        self.assertFalse(names.has_conflicting_class_name(file, "inner"))
        self.assertTrue(names.has_conflicting_class_name(file, "inner", ignore_case=True))

    def test_conflict_with_service(self):
        file = make_file(services=[{"name": "Search"}])
        self.assertTrue(names.has_conflicting_class_name(file, "Search"))


class TestJavaPackage(unittest.TestCase):
    """Tests for Java package and directory resolution."""

    def test_java_package_option_wins(self):
        file = make_file(package="shop", options={"java_package": "com.example.shop"})
        self.assertEqual(names.file_java_package(file, opensource_runtime=False), "com.example.shop")
        self.assertEqual(names.file_java_package(file, opensource_runtime=True), "com.example.shop")

    def test_opensource_uses_package(self):
        self.assertEqual(names.file_java_package(make_file(package="shop"), True), "shop")
        self.assertEqual(names.file_java_package(make_file(), True), "")

    def test_internal_runtime_prefix(self):
        self.assertEqual(names.file_java_package(make_file(package="shop"), False), "com.google.protos.shop")
        self.assertEqual(names.file_java_package(make_file(), False), "com.google.protos")

    def test_package_to_dir(self):
        self.assertEqual(names.java_package_to_dir("com.example.shop"), "com/example/shop/")
        self.assertEqual(names.java_package_to_dir(""), "")


if __name__ == "__main__":
    unittest.main()
