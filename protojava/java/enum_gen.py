from ..emit.writer import CodePrinter
from ..descriptor.model import EnumDescriptor


class EnumGenerator:
    def __init__(self, descriptor: EnumDescriptor, file_generator, classname: str = None) -> None:
        self.descriptor = descriptor
        self.context    = file_generator
        self.classname  = classname or descriptor.name

    def _base(self) -> str:
        if self.context.options.enforce_lite:
            return "com.google.protobuf.Internal.EnumLite"
        return "com.google.protobuf.ProtocolMessageEnum"

    def generate(self, printer: CodePrinter) -> None:
        source = self.context.file.name

        printer.print("/**\n * Protobuf enum {@code $full_name$}\n */\n", full_name=self.descriptor.full_name)
        printer.print("public enum $classname$\n", classname=self.classname)
        printer.annotate("classname", "classname", source, self.descriptor.path)
        printer.print("    implements $base$ {\n", base=self._base())
        printer.indent()

        for value in self.descriptor.values:
            printer.print("$name$($number$),\n", name=value.name, number=value.number)
            printer.annotate("name", "name", source, value.path)
        printer.print("UNRECOGNIZED(-1),\n;\n\n")

        for value in self.descriptor.values:
            printer.print("public static final int $name$_VALUE = $number$;\n", name=value.name, number=value.number)
        printer.print("\n")

        printer.print(
            "public final int getNumber() {\n"
            "  if (this == UNRECOGNIZED) {\n"
            "    throw new java.lang.IllegalArgumentException(\n"
            "        \"Can't get the number of an unknown enum value.\");\n"
            "  }\n"
            "  return value;\n"
            "}\n\n")

        printer.print("public static $classname$ forNumber(int value) {\n", classname=self.classname)
        printer.indent()
        printer.print("switch (value) {\n")
        printer.indent()
        seen = set()
        for value in self.descriptor.values:
            # Aliases share a number; the first name wins.
            if value.number in seen:
                continue
            seen.add(value.number)
            printer.print("case $number$: return $name$;\n", name=value.name, number=value.number)
        printer.print("default: return null;\n")
        printer.outdent()
        printer.print("}\n")
        printer.outdent()
        printer.print("}\n\n")

        printer.print(
            "private final int value;\n\n"
            "private $classname$(int value) {\n"
            "  this.value = value;\n"
            "}\n", classname=self.classname)

        printer.outdent()
        printer.print("}\n\n")
