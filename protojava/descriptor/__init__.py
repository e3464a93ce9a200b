"""
In-memory schema descriptors and the loader that builds them from YAML or
JSON schema descriptions.
"""

from .model import (
    FileDescriptor,
    FileOptions,
    MessageDescriptor,
    FieldDescriptor,
    EnumDescriptor,
    EnumValueDescriptor,
    ServiceDescriptor,
    MethodDescriptor,
    OptimizeMode,
)
from .loader import load, from_dict

__all__ = [
    "FileDescriptor",
    "FileOptions",
    "MessageDescriptor",
    "FieldDescriptor",
    "EnumDescriptor",
    "EnumValueDescriptor",
    "ServiceDescriptor",
    "MethodDescriptor",
    "OptimizeMode",
    "load",
    "from_dict",
]
