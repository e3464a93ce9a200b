"""
Generated-code annotations.

An annotation ties a byte range of a generated file to the schema element
it was emitted for. The element is named by its descriptor path: the list
of field numbers and indices that leads from the file descriptor to the
element (e.g. ``[4, 0]`` is the first top-level message, ``[4, 0, 3, 1]``
the second message nested inside it).

One `GeneratedCodeInfo` is collected per generated file and written next to
it as ``<file>.pb.meta``.
"""

import json
import dataclasses
from typing import List, BinaryIO


@dataclasses.dataclass
class Annotation:
    path:        List[int]
    source_file: str
    begin:       int
    end:         int

    def to_dict(self) -> dict:
        return {
            "path":       list(self.path),
            "sourceFile": self.source_file,
            "begin":      self.begin,
            "end":        self.end,
        }

    @staticmethod
    def from_dict(d: dict) -> "Annotation":
        return Annotation(list(d["path"]), d["sourceFile"], int(d["begin"]), int(d["end"]))


@dataclasses.dataclass
class GeneratedCodeInfo:
    annotation: List[Annotation] = dataclasses.field(default_factory=list)

    def serialize(self) -> bytes:
        data = {"annotation": [a.to_dict() for a in self.annotation]}
        return json.dumps(data, indent=2, sort_keys=True).encode("utf-8")

    def serialize_to_stream(self, sink: BinaryIO) -> None:
        sink.write(self.serialize())

    @staticmethod
    def parse(data: bytes) -> "GeneratedCodeInfo":
        d = json.loads(data.decode("utf-8"))
        return GeneratedCodeInfo([Annotation.from_dict(a) for a in d.get("annotation", [])])


class AnnotationCollector:
    """Receives annotated spans from a CodePrinter and records them."""

    def __init__(self, info: GeneratedCodeInfo) -> None:
        self.info = info

    def add_annotation(self, begin: int, end: int, source_file: str, path: List[int]) -> None:
        self.info.annotation.append(Annotation(list(path), source_file, begin, end))
