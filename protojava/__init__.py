"""
protojava: Java source generation from schema descriptions.

    from protojava import JavaGenerator, MemoryContext, load

    outcome = JavaGenerator().generate(load("addressbook.yaml"), "annotate_code", MemoryContext())
"""

from .generator import JavaGenerator, java_variant_factory
from .outcome import ErrorKind, GenerationError, GenerationOutcome, VariantResult
from .state import GenerationConfig
from .options import parse_generator_parameter, build_config
from .plan import VariantRequest, select_variants
from .emit.sink import DirectoryContext, MemoryContext
from .descriptor.loader import load

__version__ = "0.1"

__all__ = [
    "JavaGenerator",
    "java_variant_factory",
    "ErrorKind",
    "GenerationError",
    "GenerationOutcome",
    "VariantResult",
    "GenerationConfig",
    "parse_generator_parameter",
    "build_config",
    "VariantRequest",
    "select_variants",
    "DirectoryContext",
    "MemoryContext",
    "load",
]
