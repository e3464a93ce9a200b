"""
Java name resolution for schema descriptors.

Derives the Java package, the package directory and the outer class name of
a generated file, and checks outer class names against the types declared
in the file.
"""

from .model import FileDescriptor, MessageDescriptor


OUTER_CLASS_SUFFIX    = "OuterClass"
MUTABLE_CLASS_PREFIX  = "Mutable"
INTERNAL_PACKAGE_ROOT = "com.google.protos"


def camel_case(name: str, cap_first: bool) -> str:
    """
    Convert an underscore separated name to CamelCase.

    Letters following an underscore, a digit or any other non-alphanumeric
    character are capitalized; those separators other than digits are
    dropped. An uppercase first letter is lowered when cap_first is False.
    """
    result, cap_next = [], cap_first

    for i, c in enumerate(name):
        if "a" <= c <= "z":
            result.append(c.upper() if cap_next else c)
            cap_next = False
        elif "A" <= c <= "Z":
            result.append(c.lower() if i == 0 and not cap_first else c)
            cap_next = False
        elif "0" <= c <= "9":
            result.append(c)
            cap_next = True
        else:
            cap_next = True

    return "".join(result)


def strip_proto(filename: str) -> str:
    for suffix in (".protodevel", ".proto"):
        if filename.endswith(suffix):
            return filename[:-len(suffix)]
    return filename


def file_default_class_name(file: FileDescriptor) -> str:
    basename = file.name.rsplit("/", 1)[-1]
    return camel_case(strip_proto(basename), True)


def _same(a: str, b: str, ignore_case: bool) -> bool:
    return a.lower() == b.lower() if ignore_case else a == b


def _message_has_conflict(message: MessageDescriptor, classname: str, ignore_case: bool) -> bool:
    if _same(message.name, classname, ignore_case):
        return True

    for nested in message.messages:
        if _message_has_conflict(nested, classname, ignore_case):
            return True

    return any(_same(e.name, classname, ignore_case) for e in message.enums)


def has_conflicting_class_name(file: FileDescriptor, classname: str, ignore_case: bool = False) -> bool:
    for enum in file.enums:
        if _same(enum.name, classname, ignore_case):
            return True

    for service in file.services:
        if _same(service.name, classname, ignore_case):
            return True

    return any(_message_has_conflict(m, classname, ignore_case) for m in file.messages)


def file_immutable_class_name(file: FileDescriptor) -> str:
    if file.options.java_outer_classname:
        return file.options.java_outer_classname

    classname = file_default_class_name(file)
    if has_conflicting_class_name(file, classname):
        classname += OUTER_CLASS_SUFFIX

    return classname


def file_class_name(file: FileDescriptor, immutable: bool) -> str:
    classname = file_immutable_class_name(file)
    return classname if immutable else MUTABLE_CLASS_PREFIX + classname


def file_java_package(file: FileDescriptor, opensource_runtime: bool) -> str:
    if file.options.java_package is not None:
        return file.options.java_package

    result = "" if opensource_runtime else INTERNAL_PACKAGE_ROOT
    if file.package:
        result = f"{result}.{file.package}" if result else file.package

    return result


def java_package_to_dir(package: str) -> str:
    """ "com.example.foo" -> "com/example/foo/", "" -> "" """
    if not package:
        return ""

    return package.replace(".", "/") + "/"
