"""
Output plumbing shared by the driver and the Java emitter: generator
contexts that hand out scoped sinks, the code printer, and the annotation
collector.
"""

from .sink import GeneratorContext, DirectoryContext, MemoryContext
from .writer import CodePrinter
from .annotations import Annotation, AnnotationCollector, GeneratedCodeInfo

__all__ = [
    "GeneratorContext",
    "DirectoryContext",
    "MemoryContext",
    "CodePrinter",
    "Annotation",
    "AnnotationCollector",
    "GeneratedCodeInfo",
]
