"""
Reference Java emitter.

`FileGenerator` is the variant the driver runs once per requested API
flavor. It validates the schema, prints the outer class into the primary
output and writes sibling files for top-level types when the schema asks for
``java_multiple_files``.
"""

from .file_generator import FileGenerator

__all__ = ["FileGenerator"]
