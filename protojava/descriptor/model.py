"""
Schema Descriptor Dataclasses.

These mirror the parts of a protocol buffer file descriptor the Java
generator reads. Each element carries its descriptor ``path`` (field
numbers and indices from the file down to the element), which is what
generated-code annotations refer to.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


# Field numbers of the repeated members in the descriptor messages, used to
# build element paths.
FILE_MESSAGE_TYPE    = 4
FILE_ENUM_TYPE       = 5
FILE_SERVICE         = 6
MESSAGE_FIELD        = 2
MESSAGE_NESTED_TYPE  = 3
MESSAGE_ENUM_TYPE    = 4
ENUM_VALUE           = 2
SERVICE_METHOD       = 2

SCALAR_TYPES = (
    "double", "float", "int32", "int64", "uint32", "uint64", "sint32",
    "sint64", "fixed32", "fixed64", "sfixed32", "sfixed64", "bool",
    "string", "bytes",
)


class OptimizeMode(Enum):
    SPEED        = "SPEED"
    CODE_SIZE    = "CODE_SIZE"
    LITE_RUNTIME = "LITE_RUNTIME"


@dataclass
class FileOptions:
    java_package:          Optional[str] = None
    java_outer_classname:  Optional[str] = None
    java_multiple_files:   bool = False
    java_generic_services: bool = False
    optimize_for:          OptimizeMode = OptimizeMode.SPEED


@dataclass
class FieldDescriptor:  # pylint: disable=too-many-instance-attributes
    name:   str
    number: int
    type:   str                         # Scalar type name or a type reference
    label:  str = "optional"            # optional, required or repeated
    path:   List[int] = field(default_factory=list)

    # Filled in by the loader once references are resolved
    kind:      str = ""                 # "scalar", "message" or "enum"
    type_name: Optional[str] = None     # Resolved full name for message/enum

    @property
    def is_repeated(self) -> bool:
        return self.label == "repeated"


@dataclass
class EnumValueDescriptor:
    name:   str
    number: int
    path:   List[int] = field(default_factory=list)


@dataclass
class EnumDescriptor:
    name:      str
    full_name: str = ""
    values:    List[EnumValueDescriptor] = field(default_factory=list)
    path:      List[int] = field(default_factory=list)


@dataclass
class MessageDescriptor:
    name:      str
    full_name: str = ""
    fields:    List[FieldDescriptor] = field(default_factory=list)
    messages:  List["MessageDescriptor"] = field(default_factory=list)
    enums:     List[EnumDescriptor] = field(default_factory=list)
    path:      List[int] = field(default_factory=list)


@dataclass
class MethodDescriptor:
    name:        str
    input_type:  str
    output_type: str
    path:        List[int] = field(default_factory=list)

    # Full names the input and output types resolve to.
    input_type_name:  str = ""
    output_type_name: str = ""


@dataclass
class ServiceDescriptor:
    name:      str
    full_name: str = ""
    methods:   List[MethodDescriptor] = field(default_factory=list)
    path:      List[int] = field(default_factory=list)


@dataclass
class FileDescriptor:
    name:         str
    package:      str = ""
    dependencies: List[str] = field(default_factory=list)
    options:      FileOptions = field(default_factory=FileOptions)
    messages:     List[MessageDescriptor] = field(default_factory=list)
    enums:        List[EnumDescriptor] = field(default_factory=list)
    services:     List[ServiceDescriptor] = field(default_factory=list)

    def all_messages(self) -> Iterator[MessageDescriptor]:
        """Yield every message in the file, outer messages before nested ones."""
        pending = list(self.messages)
        while pending:
            message = pending.pop(0)
            yield message
            pending.extend(message.messages)

    def all_enums(self) -> Iterator[EnumDescriptor]:
        yield from self.enums
        for message in self.all_messages():
            yield from message.enums
