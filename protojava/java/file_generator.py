"""
Per-file Java emitter.

A FileGenerator is built for one schema file and one API flavor. The driver
calls `validate` on every generator before any of them prints, then
`generate` into the primary output and `generate_siblings` for the extra
files the schema asks for.
"""

from typing import Callable, List

from ..common import VariantValidationError, JAVA_SUFFIX, META_SUFFIX, warn
from ..state import GenerationConfig
from ..descriptor import names
from ..descriptor.model import FileDescriptor, OptimizeMode
from ..emit.writer import CodePrinter
from ..emit.annotations import AnnotationCollector, GeneratedCodeInfo
from .enum_gen import EnumGenerator
from .message_gen import MessageGenerator
from .service_gen import ServiceGenerator
from .types import escape_java_string


class FileGenerator:
    def __init__(self, file: FileDescriptor, options: GenerationConfig, immutable_api: bool = True) -> None:
        self.file           = file
        self.options        = options
        self.immutable_api  = immutable_api
        self.java_package   = names.file_java_package(file, options.opensource_runtime)
        self.classname      = names.file_class_name(file, immutable_api)
        self.declared_types = { t.name for t in file.messages + file.enums }

    def top_level_name(self, name: str) -> str:
        return name if self.immutable_api else names.MUTABLE_CLASS_PREFIX + name

    def class_name_of(self, full_name: str) -> str:
        """ Java name of a message or enum, relative to the generated package.
            "tutorial.Person.PhoneType" -> "Person.PhoneType" """
        full_name = full_name.lstrip(".")
        prefix    = f"{self.file.package}." if self.file.package else ""
        if not full_name.startswith(prefix):
            return full_name

        # Only types declared in this file are renamed in the mutable API.
        head, sep, tail = full_name[len(prefix):].partition(".")
        if head not in self.declared_types:
            return full_name[len(prefix):]

        return self.top_level_name(head) + sep + tail

    def validate(self) -> None:
        # A type named like the outer class would be shadowed by it, and with
        # java_multiple_files its sibling file would overwrite the outer class.
        if names.has_conflicting_class_name(self.file, self.classname):
            raise VariantValidationError(
                f"{self.file.name}: Cannot generate Java output because the file's outer class name, "
                f"\"{self.classname}\", matches the name of one of the types declared inside it.  "
                f"Please either rename the type or use the java_outer_classname option to specify "
                f"a different outer class name for the .proto file.")

        if names.has_conflicting_class_name(self.file, self.classname, ignore_case=True):
            warn(f"{self.file.name}: The file's outer class name, \"{self.classname}\", matches the name "
                 f"of one of the types declared inside it when case is ignored. This can cause "
                 f"compilation issues on Windows / MacOS. Please either rename the type or use the "
                 f"java_outer_classname option to specify a different outer class name for the .proto file.")

        if self.file.options.optimize_for == OptimizeMode.LITE_RUNTIME and not self.options.enforce_lite:
            warn("The optimize_for = LITE_RUNTIME option is no longer supported by the Java code "
                 "generator and is ignored; full runtime code is always generated. Use the 'lite' "
                 "generator option for Java Lite code.")

    def _print_header(self, printer: CodePrinter) -> None:
        printer.print("// Generated by the protocol buffer compiler.  DO NOT EDIT!\n"
                      "// source: $filename$\n\n", filename=self.file.name)
        if self.java_package:
            printer.print("package $package$;\n\n", package=self.java_package)

    def generate(self, printer: CodePrinter) -> None:
        self._print_header(printer)

        printer.print("public final class $classname$ {\n", classname=self.classname)
        printer.annotate("classname", "classname", self.file.name, [])
        printer.indent()
        printer.print("private $classname$() {}\n\n", classname=self.classname)

        if not self.file.options.java_multiple_files:
            for enum in self.file.enums:
                EnumGenerator(enum, self, self.top_level_name(enum.name)).generate(printer)

            for message in self.file.messages:
                generator = MessageGenerator(message, self, self.top_level_name(message.name))
                generator.generate_interface(printer)
                generator.generate(printer, nested=True)

            if self.file.options.java_generic_services:
                for service in self.file.services:
                    ServiceGenerator(service, self, self.top_level_name(service.name)).generate(printer, nested=True)

        if self.options.generate_shared_code and not self.options.enforce_lite:
            self._generate_descriptor(printer)

        printer.outdent()
        printer.print("}\n")

    def _descriptor_data(self) -> str:
        lines = [f"{self.file.name}", f"package {self.file.package}"]
        lines += [f"import {dep}" for dep in self.file.dependencies]
        lines += [f"message {m.full_name}" for m in self.file.all_messages()]
        lines += [f"enum {e.full_name}" for e in self.file.all_enums()]
        lines += [f"service {s.full_name}" for s in self.file.services]
        return escape_java_string("\n".join(lines) + "\n")

    def _generate_descriptor(self, printer: CodePrinter) -> None:
        printer.print(
            "public static com.google.protobuf.Descriptors.FileDescriptor\n"
            "    getDescriptor() {\n"
            "  return descriptor;\n"
            "}\n"
            "private static final com.google.protobuf.Descriptors.FileDescriptor\n"
            "    descriptor;\n"
            "static {\n"
            "  java.lang.String[] descriptorData = {\n"
            "    \"$data$\"\n"
            "  };\n"
            "  descriptor = com.google.protobuf.Descriptors.FileDescriptor\n"
            "    .internalBuildGeneratedFileFrom(descriptorData,\n"
            "      new com.google.protobuf.Descriptors.FileDescriptor[] {\n"
            "      });\n"
            "}\n", data=self._descriptor_data())

    def _generate_sibling(self, package_dir: str, context, classname: str,
                          generate: Callable[[CodePrinter], None],
                          file_list: List[str], annotation_list: List[str]) -> None:
        filename = f"{package_dir}{classname}{JAVA_SUFFIX}"
        file_list.append(filename)

        info      = GeneratedCodeInfo()
        collector = AnnotationCollector(info) if self.options.annotate_code else None

        with context.open(filename) as sink:
            printer = CodePrinter(sink, "$", collector)
            self._print_header(printer)
            generate(printer)

        if self.options.annotate_code:
            info_path = filename + META_SUFFIX
            with context.open(info_path) as sink:
                info.serialize_to_stream(sink)
            annotation_list.append(info_path)

    def generate_siblings(self, package_dir: str, context, file_list: List[str], annotation_list: List[str]) -> None:
        if not self.file.options.java_multiple_files:
            return

        for enum in self.file.enums:
            generator = EnumGenerator(enum, self, self.top_level_name(enum.name))
            self._generate_sibling(package_dir, context, generator.classname,
                                   generator.generate, file_list, annotation_list)

        for message in self.file.messages:
            generator = MessageGenerator(message, self, self.top_level_name(message.name))
            self._generate_sibling(package_dir, context, generator.classname,
                                   lambda p, g=generator: g.generate(p, nested=False),
                                   file_list, annotation_list)
            self._generate_sibling(package_dir, context, generator.classname + "OrBuilder",
                                   generator.generate_interface, file_list, annotation_list)

        if self.file.options.java_generic_services:
            for service in self.file.services:
                generator = ServiceGenerator(service, self, self.top_level_name(service.name))
                self._generate_sibling(package_dir, context, generator.classname,
                                       lambda p, g=generator: g.generate(p, nested=False),
                                       file_list, annotation_list)
