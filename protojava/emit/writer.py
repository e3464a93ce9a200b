"""
Code printer with variable substitution and annotation hooks.

Text passed to `CodePrinter.print` may reference variables between two
delimiter characters (``$name$``); ``$$`` prints a single delimiter. Every
line printed while indented starts with the current indentation. The printer
tracks the byte offset of everything it has written so that the span of a
substituted variable can later be recorded as an annotation.
"""

import re
from typing import Any, BinaryIO, Dict, List, Optional, Tuple

from ..common import GeneratorException
from .annotations import AnnotationCollector


INDENT = "  "

_RE_LINES = re.compile(r"(?<=\n)")


class CodePrinter:
    def __init__(self, sink: BinaryIO, delimiter: str = "$",
                 annotation_collector: Optional[AnnotationCollector] = None) -> None:
        self.sink                 = sink
        self.delimiter            = delimiter
        self.annotation_collector = annotation_collector
        self.offset               = 0
        self.at_start_of_line     = True

        self._indent: List[str] = []
        self._substitutions: Dict[str, Tuple[int, int]] = {}

    def indent(self) -> None:
        self._indent.append(INDENT)

    def outdent(self) -> None:
        if not self._indent:
            raise GeneratorException("CodePrinter: outdent() without matching indent().")

        self._indent.pop()

    def _write(self, text: str) -> None:
        if not text:
            return

        data = text.encode("utf-8")
        self.sink.write(data)
        self.offset += len(data)

    def _emit(self, text: str) -> None:
        for line in _RE_LINES.split(text):
            if not line:
                continue
            if self.at_start_of_line and line != "\n":
                self._write(''.join(self._indent))
            self._write(line)
            self.at_start_of_line = line.endswith("\n")

    def _substitute(self, name: str, value: Any) -> None:
        value = str(value)
        if self.at_start_of_line and value and not value.startswith("\n"):
            self._write(''.join(self._indent))
            self.at_start_of_line = False

        begin = self.offset
        self._emit(value)
        self._substitutions[name] = (begin, self.offset)

    def print(self, text: str, variables: Dict[str, Any] = None, **kwargs) -> None:
        variables = dict(variables or {}, **kwargs)
        delim, pos = self.delimiter, 0

        while True:
            start = text.find(delim, pos)
            if start < 0:
                self._emit(text[pos:])
                return

            self._emit(text[pos:start])

            end = text.find(delim, start + 1)
            if end < 0:
                raise GeneratorException(f"CodePrinter: unclosed variable name in {text!r}.")

            name = text[start + 1:end]
            if name == "":
                self._emit(delim)
            elif name not in variables:
                raise GeneratorException(f'CodePrinter: undefined variable "{name}" in {text!r}.')
            else:
                self._substitute(name, variables[name])

            pos = end + 1

    def print_raw(self, text: str) -> None:
        self._emit(text)

    def annotate(self, begin_varname: str, end_varname: str, source_file: str, path: List[int]) -> None:
        """
        Record that the text from the start of the last substitution of
        begin_varname to the end of the last substitution of end_varname was
        generated for the schema element at path. No-op without a collector.
        """
        if self.annotation_collector is None:
            return

        for name in (begin_varname, end_varname):
            if name not in self._substitutions:
                raise GeneratorException(f'CodePrinter: cannot annotate "{name}", it was never printed.')

        begin = self._substitutions[begin_varname][0]
        end   = self._substitutions[end_varname][1]
        if end < begin:
            raise GeneratorException(f'CodePrinter: annotation "{begin_varname}".."{end_varname}" ends before it begins.')

        self.annotation_collector.add_annotation(begin, end, source_file, path)
