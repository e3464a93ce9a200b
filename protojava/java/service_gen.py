from ..emit.writer import CodePrinter
from ..descriptor.model import ServiceDescriptor
from ..descriptor.names import camel_case


class ServiceGenerator:
    def __init__(self, descriptor: ServiceDescriptor, file_generator, classname: str = None) -> None:
        self.descriptor = descriptor
        self.context    = file_generator
        self.classname  = classname or descriptor.name

    def generate(self, printer: CodePrinter, nested: bool) -> None:
        source = self.context.file.name

        printer.print("/**\n * Protobuf service {@code $full_name$}\n */\n", full_name=self.descriptor.full_name)
        printer.print("public $static$abstract class $classname$\n",
                      static="static " if nested else "", classname=self.classname)
        printer.annotate("classname", "classname", source, self.descriptor.path)
        printer.print("    implements com.google.protobuf.Service {\n")
        printer.indent()
        printer.print("protected $classname$() {}\n\n", classname=self.classname)

        for method in self.descriptor.methods:
            printer.print(
                "public abstract void $method$(\n"
                "    com.google.protobuf.RpcController controller,\n"
                "    $input$ request,\n"
                "    com.google.protobuf.RpcCallback<$output$> done);\n",
                method=camel_case(method.name, False),
                input=self.context.class_name_of(method.input_type_name),
                output=self.context.class_name_of(method.output_type_name))
            printer.annotate("method", "method", source, method.path)
            printer.print("\n")

        printer.outdent()
        printer.print("}\n\n")
