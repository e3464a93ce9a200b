"""
Unit tests for emit/writer.py and emit/annotations.py.

Tests variable substitution, indentation and the byte offsets recorded for
annotations.
"""

import io
import unittest

from ..common import GeneratorException
from ..emit.writer import CodePrinter
from ..emit.annotations import Annotation, AnnotationCollector, GeneratedCodeInfo


def make_printer(annotate=True):
    sink = io.BytesIO()
    info = GeneratedCodeInfo()
    printer = CodePrinter(sink, "$", AnnotationCollector(info) if annotate else None)
    return printer, sink, info


class TestCodePrinter(unittest.TestCase):
    """Tests for CodePrinter."""

    def test_substitution(self):
        printer, sink, _ = make_printer()
        printer.print("class $name$ extends $base$ {}\n", name="Foo", base="Bar")
        self.assertEqual(sink.getvalue(), b"class Foo extends Bar {}\n")

    def test_variables_dict_and_kwargs(self):
        printer, sink, _ = make_printer()
        printer.print("$a$-$b$", {"a": 1}, b=2)
        self.assertEqual(sink.getvalue(), b"1-2")

    def test_escaped_delimiter(self):
        printer, sink, _ = make_printer()
        printer.print("cost: $$5\n")
        self.assertEqual(sink.getvalue(), b"cost: $5\n")

    def test_indentation_skips_blank_lines(self):
        printer, sink, _ = make_printer()
        printer.print("a {\n")
        printer.indent()
        printer.print("b;\n\nc;\n")
        printer.outdent()
        printer.print("}\n")
        self.assertEqual(sink.getvalue(), b"a {\n  b;\n\n  c;\n}\n")

    def test_undefined_variable(self):
        printer, _, _ = make_printer()
        with self.assertRaises(GeneratorException) as ctx:
            printer.print("$missing$")
        self.assertIn("missing", str(ctx.exception))

    def test_unclosed_variable(self):
        printer, _, _ = make_printer()
        with self.assertRaises(GeneratorException):
            printer.print("$oops")

    def test_outdent_without_indent(self):
        printer, _, _ = make_printer()
        with self.assertRaises(GeneratorException):
            printer.outdent()

    def test_annotation_offsets_are_bytes(self):
        """Offsets count UTF-8 bytes, including the indentation."""
        printer, sink, info = make_printer()
        printer.print("// café\n")
        printer.indent()
        printer.print("$name$ x;\n", name="Foo")
        printer.annotate("name", "name", "a.proto", [4, 1])

        self.assertEqual(len(info.annotation), 1)
        annotation = info.annotation[0]
        self.assertEqual((annotation.begin, annotation.end), (11, 14))
        self.assertEqual(sink.getvalue()[annotation.begin:annotation.end], b"Foo")
        self.assertEqual(annotation.path, [4, 1])
        self.assertEqual(annotation.source_file, "a.proto")

    def test_annotation_spanning_two_variables(self):
        printer, sink, info = make_printer()
        printer.print("$type$ $getter$();\n", type="int", getter="getId")
        printer.annotate("type", "getter", "a.proto", [4, 0, 2, 0])

        annotation = info.annotation[0]
        self.assertEqual(sink.getvalue()[annotation.begin:annotation.end], b"int getId")

    def test_annotate_without_collector_is_noop(self):
        printer, _, info = make_printer(annotate=False)
        printer.annotate("never_printed", "never_printed", "a.proto", [])
        self.assertEqual(info.annotation, [])

    def test_annotate_unknown_variable(self):
        printer, _, _ = make_printer()
        with self.assertRaises(GeneratorException):
            printer.annotate("never_printed", "never_printed", "a.proto", [])


class TestGeneratedCodeInfo(unittest.TestCase):
    """Tests for GeneratedCodeInfo serialization."""

    def test_serialized_form(self):
        info = GeneratedCodeInfo([Annotation([4, 0], "a.proto", 3, 9)])
        sink = io.BytesIO()
        info.serialize_to_stream(sink)

        self.assertIn(b'"sourceFile": "a.proto"', sink.getvalue())
        self.assertEqual(GeneratedCodeInfo.parse(sink.getvalue()), info)

    def test_empty(self):
        self.assertEqual(GeneratedCodeInfo.parse(GeneratedCodeInfo().serialize()).annotation, [])


if __name__ == "__main__":
    unittest.main()
