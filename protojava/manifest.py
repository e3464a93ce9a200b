from typing import Iterable

from .common import MANIFEST_ENCODING


def render_manifest(filenames: Iterable[str]) -> bytes:
    return "".join(f"{filename}\n" for filename in filenames).encode(MANIFEST_ENCODING)


def write_manifest(context, path: str, filenames: Iterable[str]) -> bool:
    """ Writes one filename per line to path through context. Returns False,
        writing nothing, when no path was configured. """
    if not path:
        return False

    with context.open(path) as sink:
        sink.write(render_manifest(filenames))

    return True
