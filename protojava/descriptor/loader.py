"""
Schema description loader.

Reads a schema description written in YAML (or JSON, which YAML accepts),
checks it against `SCHEMA_DESCRIPTION_SCHEMA` and builds the descriptor
tree. Example::

    name: tutorial/addressbook.proto
    package: tutorial
    options:
      java_package: com.example.tutorial
      java_multiple_files: true
    messages:
      - name: Person
        fields:
          - {name: name, number: 1, type: string}
          - {name: phones, number: 4, type: PhoneNumber, label: repeated}
        messages:
          - name: PhoneNumber
            fields:
              - {name: number, number: 1, type: string}
"""

import os
from typing import Dict, List, Optional

import fastjsonschema

from ..common import SchemaError, file_load_yaml
from ..suggest import suggest_similar, format_suggestion
from .model import (
    FileDescriptor, FileOptions, MessageDescriptor, FieldDescriptor,
    EnumDescriptor, EnumValueDescriptor, ServiceDescriptor, MethodDescriptor,
    OptimizeMode, SCALAR_TYPES,
    FILE_MESSAGE_TYPE, FILE_ENUM_TYPE, FILE_SERVICE, MESSAGE_FIELD,
    MESSAGE_NESTED_TYPE, MESSAGE_ENUM_TYPE, ENUM_VALUE, SERVICE_METHOD,
)


_IDENT = {"type": "string", "pattern": "^[A-Za-z_][A-Za-z0-9_]*$"}

SCHEMA_DESCRIPTION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "definitions": {
        "field": {
            "type": "object",
            "required": ["name", "number", "type"],
            "additionalProperties": False,
            "properties": {
                "name":   _IDENT,
                "number": {"type": "integer", "minimum": 1, "maximum": 536870911},
                "type":   {"type": "string", "pattern": "^\\.?[A-Za-z_][A-Za-z0-9_.]*$"},
                "label":  {"enum": ["optional", "required", "repeated"]},
            },
        },
        "enum": {
            "type": "object",
            "required": ["name", "values"],
            "additionalProperties": False,
            "properties": {
                "name":   _IDENT,
                "values": {
                    "type": "array",
                    "minItems": 1,
                    "items": {
                        "type": "object",
                        "required": ["name", "number"],
                        "additionalProperties": False,
                        "properties": {"name": _IDENT, "number": {"type": "integer"}},
                    },
                },
            },
        },
        "message": {
            "type": "object",
            "required": ["name"],
            "additionalProperties": False,
            "properties": {
                "name":     _IDENT,
                "fields":   {"type": "array", "items": {"$ref": "#/definitions/field"}},
                "messages": {"type": "array", "items": {"$ref": "#/definitions/message"}},
                "enums":    {"type": "array", "items": {"$ref": "#/definitions/enum"}},
            },
        },
        "service": {
            "type": "object",
            "required": ["name"],
            "additionalProperties": False,
            "properties": {
                "name":    _IDENT,
                "methods": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["name", "input_type", "output_type"],
                        "additionalProperties": False,
                        "properties": {
                            "name":        _IDENT,
                            "input_type":  {"type": "string"},
                            "output_type": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
    "type": "object",
    "required": ["name"],
    "additionalProperties": False,
    "properties": {
        "name":         {"type": "string", "minLength": 1},
        "package":      {"type": "string", "pattern": "^([A-Za-z_][A-Za-z0-9_]*(\\.[A-Za-z_][A-Za-z0-9_]*)*)?$"},
        "dependencies": {"type": "array", "items": {"type": "string"}},
        "options": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "java_package":          {"type": "string"},
                "java_outer_classname":  {"type": "string"},
                "java_multiple_files":   {"type": "boolean"},
                "java_generic_services": {"type": "boolean"},
                "optimize_for":          {"enum": [m.value for m in OptimizeMode]},
            },
        },
        "messages": {"type": "array", "items": {"$ref": "#/definitions/message"}},
        "enums":    {"type": "array", "items": {"$ref": "#/definitions/enum"}},
        "services": {"type": "array", "items": {"$ref": "#/definitions/service"}},
    },
}

_validator = None


def get_validator():
    global _validator  # pylint: disable=global-statement
    if _validator is None:
        _validator = fastjsonschema.compile(SCHEMA_DESCRIPTION_SCHEMA)
    return _validator


def _qualify(scope: str, name: str) -> str:
    return f"{scope}.{name}" if scope else name


class _Builder:
    def __init__(self, data: dict) -> None:
        self.data  = data
        self.types: Dict[str, str] = {}
        self.fields: List[tuple] = []

    def _register(self, full_name: str, kind: str) -> None:
        if full_name in self.types:
            raise SchemaError(f'"{full_name}" is already defined.')
        self.types[full_name] = kind

    def build_enum(self, d: dict, scope: str, path: List[int]) -> EnumDescriptor:
        full_name = _qualify(scope, d["name"])
        self._register(full_name, "enum")

        values, seen = [], set()
        for i, v in enumerate(d["values"]):
            if v["name"] in seen:
                raise SchemaError(f'Enum value "{v["name"]}" is already defined in "{full_name}".')
            seen.add(v["name"])
            values.append(EnumValueDescriptor(v["name"], v["number"], path + [ENUM_VALUE, i]))

        return EnumDescriptor(d["name"], full_name, values, path)

    def build_message(self, d: dict, scope: str, path: List[int]) -> MessageDescriptor:
        full_name = _qualify(scope, d["name"])
        self._register(full_name, "message")

        message = MessageDescriptor(d["name"], full_name, path=path)

        names, numbers = set(), set()
        for i, f in enumerate(d.get("fields", [])):
            if f["name"] in names:
                raise SchemaError(f'Field "{f["name"]}" is already defined in "{full_name}".')
            if f["number"] in numbers:
                raise SchemaError(f'Field number {f["number"]} has already been used in "{full_name}" by another field.')
            names.add(f["name"])
            numbers.add(f["number"])

            field = FieldDescriptor(f["name"], f["number"], f["type"], f.get("label", "optional"),
                                    path + [MESSAGE_FIELD, i])
            message.fields.append(field)
            self.fields.append((field, full_name))

        for i, e in enumerate(d.get("enums", [])):
            message.enums.append(self.build_enum(e, full_name, path + [MESSAGE_ENUM_TYPE, i]))

        for i, m in enumerate(d.get("messages", [])):
            message.messages.append(self.build_message(m, full_name, path + [MESSAGE_NESTED_TYPE, i]))

        return message

    def lookup(self, type_name: str, scope: str) -> Optional[str]:
        """Full name a type reference made from scope refers to, searching
        the innermost scope first. A leading "." makes the name absolute."""
        if type_name.startswith("."):
            candidates = [type_name[1:]]
        else:
            candidates, parts = [], scope.split(".") if scope else []
            for i in range(len(parts), -1, -1):
                candidates.append(_qualify(".".join(parts[:i]), type_name))

        for candidate in candidates:
            if candidate in self.types:
                return candidate
        return None

    def resolve(self, field: FieldDescriptor, scope: str) -> None:
        if field.type in SCALAR_TYPES:
            field.kind = "scalar"
            return

        full_name = self.lookup(field.type, scope)
        if full_name is None or self.types[full_name] == "service":
            hint = format_suggestion(suggest_similar(field.type, self._names("message", "enum") + list(SCALAR_TYPES)))
            raise SchemaError(f'Field "{scope}.{field.name}": "{field.type}" is not defined. {hint}'.rstrip())

        field.kind      = self.types[full_name]
        field.type_name = full_name

    def resolve_method(self, method: MethodDescriptor, scope: str) -> None:
        resolved = []
        for type_name in (method.input_type, method.output_type):
            full_name = self.lookup(type_name, scope)
            if full_name is None:
                hint = format_suggestion(suggest_similar(type_name, self._names("message")))
                raise SchemaError(f'Method "{scope}.{method.name}": "{type_name}" is not defined. {hint}'.rstrip())
            if self.types[full_name] != "message":
                raise SchemaError(f'Method "{scope}.{method.name}": "{type_name}" is not a message type.')
            resolved.append(full_name)

        method.input_type_name, method.output_type_name = resolved

    def _names(self, *kinds: str) -> List[str]:
        return [ name for name, kind in self.types.items() if kind in kinds ]

    def build(self) -> FileDescriptor:
        d       = self.data
        package = d.get("package", "")
        opts    = d.get("options", {})

        file = FileDescriptor(
            name=d["name"],
            package=package,
            dependencies=list(d.get("dependencies", [])),
            options=FileOptions(
                java_package=opts.get("java_package"),
                java_outer_classname=opts.get("java_outer_classname"),
                java_multiple_files=opts.get("java_multiple_files", False),
                java_generic_services=opts.get("java_generic_services", False),
                optimize_for=OptimizeMode(opts.get("optimize_for", OptimizeMode.SPEED.value)),
            ),
        )

        for i, e in enumerate(d.get("enums", [])):
            file.enums.append(self.build_enum(e, package, [FILE_ENUM_TYPE, i]))

        for i, m in enumerate(d.get("messages", [])):
            file.messages.append(self.build_message(m, package, [FILE_MESSAGE_TYPE, i]))

        for i, s in enumerate(d.get("services", [])):
            full_name = _qualify(package, s["name"])
            self._register(full_name, "service")
            service = ServiceDescriptor(s["name"], full_name, path=[FILE_SERVICE, i])
            for j, m in enumerate(s.get("methods", [])):
                service.methods.append(MethodDescriptor(m["name"], m["input_type"], m["output_type"],
                                                        [FILE_SERVICE, i, SERVICE_METHOD, j]))
            file.services.append(service)

        for field, scope in self.fields:
            self.resolve(field, scope)

        for service in file.services:
            for method in service.methods:
                self.resolve_method(method, service.full_name)

        return file


def from_dict(data: dict) -> FileDescriptor:
    """Validate a loaded schema description and build its descriptor tree."""
    if not isinstance(data, dict):
        raise SchemaError("A schema description must be a mapping.")

    try:
        get_validator()(data)
    except fastjsonschema.JsonSchemaException as exc:
        raise SchemaError(f"{exc}") from exc

    return _Builder(data).build()


def load(filepath: str) -> FileDescriptor:
    if not os.path.isfile(filepath):
        raise SchemaError(f'Schema description "{filepath}" does not exist.')

    data = file_load_yaml(filepath)
    try:
        return from_dict(data)
    except SchemaError as exc:
        raise SchemaError(f"{filepath}: {exc}") from exc
