"""
Unit tests for the reference Java emitter (java/ package).
"""

import io
import os
import unittest
from unittest import mock

from ..common import VariantValidationError
from ..options import parse_config
from ..descriptor.loader import load, from_dict
from ..emit.writer import CodePrinter
from ..emit.annotations import AnnotationCollector, GeneratedCodeInfo
from ..emit.sink import MemoryContext
from ..java import FileGenerator


DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def render(generator, annotate=False):
    sink = io.BytesIO()
    info = GeneratedCodeInfo()
    generator.generate(CodePrinter(sink, "$", AnnotationCollector(info) if annotate else None))
    return sink.getvalue(), info


class TestValidate(unittest.TestCase):
    """Tests for FileGenerator.validate."""

    def setUp(self):
        self.file = load(os.path.join(DATA_DIR, "addressbook.yaml"))

    def test_valid(self):
        FileGenerator(self.file, parse_config("")).validate()

    def test_outer_class_matches_type(self):
        self.file.options.java_outer_classname = "AddressBook"
        with self.assertRaises(VariantValidationError) as ctx:
            FileGenerator(self.file, parse_config("")).validate()
        self.assertTrue(str(ctx.exception).startswith("tutorial/addressbook.proto: Cannot generate Java output"))
        self.assertIn('"AddressBook"', str(ctx.exception))

    def test_case_insensitive_match_warns(self):
        self.file.options.java_outer_classname = "PERSON"
        with mock.patch("protojava.java.file_generator.warn") as warn:
            FileGenerator(self.file, parse_config("")).validate()
        warn.assert_called_once()
        self.assertIn("case is ignored", warn.call_args[0][0])

    def test_lite_runtime_option_warns_without_lite(self):
        file = from_dict({"name": "a.proto", "options": {"optimize_for": "LITE_RUNTIME"}})
        with mock.patch("protojava.java.file_generator.warn") as warn:
            FileGenerator(file, parse_config("")).validate()
            warn.assert_called_once()
            warn.reset_mock()
            FileGenerator(file, parse_config("lite")).validate()
            warn.assert_not_called()


class TestGenerate(unittest.TestCase):
    """Tests for FileGenerator.generate."""

    def setUp(self):
        self.file = load(os.path.join(DATA_DIR, "addressbook.yaml"))

    def test_outer_class_contents(self):
        source, _ = render(FileGenerator(self.file, parse_config("")))
        text = source.decode("utf-8")

        self.assertTrue(text.startswith("// Generated by the protocol buffer compiler.  DO NOT EDIT!\n"
                                        "// source: tutorial/addressbook.proto\n"))
        self.assertIn("package com.example.tutorial;\n", text)
        self.assertIn("public interface PersonOrBuilder extends\n", text)
        self.assertIn("java.util.List<Person.PhoneNumber> getPhonesList();", text)
        self.assertIn("public enum PhoneType\n", text)
        self.assertIn("case 2: return WORK;", text)
        self.assertIn("com.google.protobuf.GeneratedMessageV3", text)
        self.assertTrue(text.endswith("}\n"))

    def test_shared_code_controls_descriptor(self):
        with_shared, _    = render(FileGenerator(self.file, parse_config("immutable,shared")))
        without_shared, _ = render(FileGenerator(self.file, parse_config("immutable")))

        self.assertIn(b"getDescriptor()", with_shared)
        self.assertNotIn(b"getDescriptor()", without_shared)

    def test_lite(self):
        source, _ = render(FileGenerator(self.file, parse_config("lite")))

        self.assertIn(b"com.google.protobuf.GeneratedMessageLite", source)
        self.assertIn(b"com.google.protobuf.MessageLiteOrBuilder", source)
        self.assertNotIn(b"getDescriptor()", source)

    def test_mutable_names(self):
        generator = FileGenerator(self.file, parse_config("mutable"), immutable_api=False)
        source, _ = render(generator)

        self.assertEqual(generator.classname, "MutableAddressBookProtos")
        self.assertIn(b"public static final class MutablePerson extends", source)
        self.assertIn(b"java.util.List<MutablePerson> getPeopleList()", source)

    def test_annotations_point_at_names(self):
        source, info = render(FileGenerator(self.file, parse_config("annotate_code")), annotate=True)

        spans = {tuple(a.path): source[a.begin:a.end] for a in info.annotation}
        self.assertEqual(spans[()], b"AddressBookProtos")
        self.assertEqual(spans[(4, 0)], b"Person")
        self.assertEqual(spans[(4, 0, 3, 0)], b"PhoneNumber")
        self.assertEqual(spans[(4, 0, 4, 0)], b"PhoneType")
        self.assertEqual(spans[(4, 0, 2, 0)], b"getName")
        self.assertTrue(all(a.source_file == "tutorial/addressbook.proto" for a in info.annotation))


class TestGenerateSiblings(unittest.TestCase):
    """Tests for FileGenerator.generate_siblings."""

    def setUp(self):
        self.file = load(os.path.join(DATA_DIR, "multiple_files.yaml"))

    def test_no_siblings_without_multiple_files(self):
        file = load(os.path.join(DATA_DIR, "addressbook.yaml"))
        context, files, annotations = MemoryContext(), [], []
        FileGenerator(file, parse_config("annotate_code")).generate_siblings("", context, files, annotations)

        self.assertEqual((files, annotations, context.opened), ([], [], []))

    def test_sibling_files(self):
        context, files, annotations = MemoryContext(), [], []
        generator = FileGenerator(self.file, parse_config("", opensource_runtime=True))
        generator.generate_siblings("shop/", context, files, annotations)

        self.assertEqual(files, ["shop/Status.java", "shop/Order.java", "shop/OrderOrBuilder.java", "shop/OrderService.java"])
        self.assertEqual(annotations, [])
        self.assertIn("package shop;", context.read_text("shop/Order.java"))
        self.assertIn("public final class Order extends", context.read_text("shop/Order.java"))
        self.assertIn("public abstract class OrderService", context.read_text("shop/OrderService.java"))
        self.assertIn("com.google.protobuf.RpcCallback<Order> done", context.read_text("shop/OrderService.java"))

    def test_sibling_annotations(self):
        context, files, annotations = MemoryContext(), [], []
        generator = FileGenerator(self.file, parse_config("annotate_code", opensource_runtime=True))
        generator.generate_siblings("shop/", context, files, annotations)

        self.assertEqual(annotations, [f + ".pb.meta" for f in files])
        info = GeneratedCodeInfo.parse(context.files["shop/Status.java.pb.meta"])
        source = context.files["shop/Status.java"]
        self.assertEqual(source[info.annotation[0].begin:info.annotation[0].end], b"Status")

    def test_services_need_generic_services(self):
        self.file.options.java_generic_services = False
        context, files, annotations = MemoryContext(), [], []
        FileGenerator(self.file, parse_config("")).generate_siblings("", context, files, annotations)

        self.assertNotIn("OrderService.java", files)

    def test_mutable_prefix_only_on_declared_types(self):
        file = from_dict({
            "name": "svc.proto", "package": "p",
            "options": {"java_multiple_files": True, "java_generic_services": True},
            "messages": [{"name": "Request", "messages": [{"name": "Inner"}]}],
            "services": [{"name": "Api", "methods": [{"name": "call", "input_type": "Request", "output_type": "Request.Inner"}]}],
        })
        generator = FileGenerator(file, parse_config("mutable"), immutable_api=False)

        self.assertEqual(generator.class_name_of("p.Request"), "MutableRequest")
        self.assertEqual(generator.class_name_of(".p.Request.Inner"), "MutableRequest.Inner")
        self.assertEqual(generator.class_name_of("p.Elsewhere"), "Elsewhere")
        self.assertEqual(generator.class_name_of("other.Thing"), "other.Thing")

        context, files, annotations = MemoryContext(), [], []
        generator.generate_siblings("p/", context, files, annotations)
        source = context.read_text("p/MutableApi.java")
        self.assertIn("MutableRequest request,", source)
        self.assertIn("com.google.protobuf.RpcCallback<MutableRequest.Inner> done", source)


if __name__ == "__main__":
    unittest.main()
