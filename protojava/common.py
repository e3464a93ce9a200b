import os

import yaml

from .printer import cons


MANIFEST_ENCODING = "utf-8"
JAVA_SUFFIX       = ".java"
META_SUFFIX       = ".pb.meta"


class GeneratorException(Exception):
    pass


class ConfigurationError(GeneratorException):
    pass


class VariantValidationError(GeneratorException):
    pass


class SchemaError(GeneratorException):
    pass


def file_load_yaml(filepath: str):
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (IOError, yaml.YAMLError) as exc:
        raise GeneratorException(f'Failed to load YAML from "{filepath}": {exc}') from exc


def create_directory(dirpath: str) -> None:
    if isspace(dirpath):
        return

    try:
        os.makedirs(dirpath, exist_ok=True)
    except OSError as exc:
        raise GeneratorException(f'Failed to create directory "{dirpath}": {exc}') from exc


def isspace(s: str) -> bool:
    """
    Returns whether a string, s, is empty, whitespace, or None.
    """

    if s is None:
        return True

    return len(s.strip()) == 0


def format_list_to_string(arr: list, item_style=None, empty=None):
    if empty is None:
        empty = "nothing"

    pre, post = "", ""
    if item_style is not None:
        pre  = f"[{item_style}]"
        post = f"[/{item_style}]"

    if len(arr) == 0:
        return f"{pre}{empty}{post}"

    if len(arr) == 1:
        return f"{pre}{arr[0]}{post}"

    if len(arr) == 2:
        return f"{pre}{arr[0]}{post} and {pre}{arr[1]}{post}"

    lhs = ', '.join([ f"{pre}{e}{post}" for e in arr[:-1]])
    rhs = f", and {pre}{arr[-1]}{post}"

    return lhs + rhs


def warn(msg: str) -> None:
    cons.warning(msg)
