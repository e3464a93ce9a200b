from ..descriptor.model import FieldDescriptor


_SCALAR_JAVA_TYPES = {
    "double":   ("double",  "java.lang.Double"),
    "float":    ("float",   "java.lang.Float"),
    "int32":    ("int",     "java.lang.Integer"),
    "uint32":   ("int",     "java.lang.Integer"),
    "sint32":   ("int",     "java.lang.Integer"),
    "fixed32":  ("int",     "java.lang.Integer"),
    "sfixed32": ("int",     "java.lang.Integer"),
    "int64":    ("long",    "java.lang.Long"),
    "uint64":   ("long",    "java.lang.Long"),
    "sint64":   ("long",    "java.lang.Long"),
    "fixed64":  ("long",    "java.lang.Long"),
    "sfixed64": ("long",    "java.lang.Long"),
    "bool":     ("boolean", "java.lang.Boolean"),
    "string":   ("java.lang.String", "java.lang.String"),
    "bytes":    ("com.google.protobuf.ByteString", "com.google.protobuf.ByteString"),
}

_SCALAR_DEFAULTS = {
    "double": "0D", "float": "0F", "int": "0", "long": "0L", "boolean": "false",
    "java.lang.String": '""', "com.google.protobuf.ByteString": "com.google.protobuf.ByteString.EMPTY",
}


def java_field_type(field: FieldDescriptor, class_name_of) -> str:
    """
    Java type of a field's accessor. class_name_of maps the full name of a
    message or enum to the Java class name to use for it.
    """
    if field.kind == "scalar":
        primitive, boxed = _SCALAR_JAVA_TYPES[field.type]
    else:
        primitive = boxed = class_name_of(field.type_name)

    if field.is_repeated:
        return f"java.util.List<{boxed}>"

    return primitive


def java_default_value(field: FieldDescriptor, class_name_of) -> str:
    if field.is_repeated:
        return "java.util.Collections.emptyList()"

    if field.kind == "scalar":
        return _SCALAR_DEFAULTS[_SCALAR_JAVA_TYPES[field.type][0]]

    if field.kind == "enum":
        return f"{class_name_of(field.type_name)}.forNumber(0)"

    return f"{class_name_of(field.type_name)}.getDefaultInstance()"


def escape_java_string(text: str) -> str:
    out = []
    for c in text:
        if c == "\\":
            out.append("\\\\")
        elif c == '"':
            out.append('\\"')
        elif c == "\n":
            out.append("\\n")
        elif ord(c) > 0xffff:
            code = ord(c) - 0x10000
            out.append(f"\\u{0xd800 + (code >> 10):04x}\\u{0xdc00 + (code & 0x3ff):04x}")
        elif ord(c) < 0x20 or ord(c) > 0x7e:
            out.append(f"\\u{ord(c):04x}")
        else:
            out.append(c)
    return "".join(out)
