"""
Message class and OrBuilder interface emission.

Nested messages and enums are printed inside their parent class. A message
printed into its own sibling file is top-level and therefore not static.
"""

from ..emit.writer import CodePrinter
from ..descriptor.model import MessageDescriptor, FieldDescriptor
from ..descriptor.names import camel_case
from .types import java_field_type, java_default_value
from .enum_gen import EnumGenerator


def _field_vars(field: FieldDescriptor, class_name_of) -> dict:
    capitalized = camel_case(field.name, True)
    return {
        "type":     java_field_type(field, class_name_of),
        "default":  java_default_value(field, class_name_of),
        "member":   camel_case(field.name, False) + "_",
        "getter":   f"get{capitalized}List" if field.is_repeated else f"get{capitalized}",
        "count":    f"get{capitalized}Count",
        "constant": field.name.upper() + "_FIELD_NUMBER",
        "number":   field.number,
    }


class MessageGenerator:
    def __init__(self, descriptor: MessageDescriptor, file_generator, classname: str = None) -> None:
        self.descriptor = descriptor
        self.context    = file_generator
        self.classname  = classname or descriptor.name

    @property
    def _lite(self) -> bool:
        return self.context.options.enforce_lite

    def generate_interface(self, printer: CodePrinter) -> None:
        source = self.context.file.name
        base   = "com.google.protobuf.MessageLiteOrBuilder" if self._lite else "com.google.protobuf.MessageOrBuilder"

        printer.print("public interface $classname$OrBuilder extends\n", classname=self.classname)
        printer.annotate("classname", "classname", source, self.descriptor.path)
        printer.print("    $base$ {\n", base=base)
        printer.indent()

        for field in self.descriptor.fields:
            variables = _field_vars(field, self.context.class_name_of)
            printer.print("\n$type$ $getter$();\n", variables)
            printer.annotate("getter", "getter", source, field.path)
            if field.is_repeated:
                printer.print("int $count$();\n", variables)

        printer.outdent()
        printer.print("}\n")

    def generate(self, printer: CodePrinter, nested: bool) -> None:
        source = self.context.file.name
        if self._lite:
            base = "com.google.protobuf.GeneratedMessageLite"
        else:
            base = "com.google.protobuf.GeneratedMessageV3"

        printer.print("/**\n * Protobuf type {@code $full_name$}\n */\n", full_name=self.descriptor.full_name)
        printer.print("public $static$final class $classname$ extends\n",
                      static="static " if nested else "", classname=self.classname)
        printer.annotate("classname", "classname", source, self.descriptor.path)
        printer.print("    $base$ implements\n    $classname$OrBuilder {\n", base=base, classname=self.classname)
        printer.indent()

        printer.print("private static final long serialVersionUID = 0L;\n")
        printer.print("private $classname$() {\n}\n\n", classname=self.classname)

        for enum in self.descriptor.enums:
            EnumGenerator(enum, self.context).generate(printer)

        for message in self.descriptor.messages:
            child = MessageGenerator(message, self.context)
            child.generate_interface(printer)
            child.generate(printer, nested=True)

        for field in self.descriptor.fields:
            self._generate_field(printer, field, source)

        printer.print(
            "private static final $classname$ DEFAULT_INSTANCE = new $classname$();\n\n"
            "public static $classname$ getDefaultInstance() {\n"
            "  return DEFAULT_INSTANCE;\n"
            "}\n", classname=self.classname)

        printer.outdent()
        printer.print("}\n\n")

    def _generate_field(self, printer: CodePrinter, field: FieldDescriptor, source: str) -> None:
        variables = _field_vars(field, self.context.class_name_of)

        printer.print("public static final int $constant$ = $number$;\n", variables)
        printer.print("private $type$ $member$ = $default$;\n", variables)
        if not self._lite:
            printer.print("@java.lang.Override\n")
        printer.print("public $type$ $getter$() {\n", variables)
        printer.annotate("getter", "getter", source, field.path)
        printer.print("  return $member$;\n}\n", variables)

        if field.is_repeated:
            printer.print("public int $count$() {\n  return $member$.size();\n}\n", variables)

        printer.print("\n")
