"""
Generator parameter parsing and plan validation.

The parameter string handed to the generator is a comma separated list of
``key`` or ``key=value`` fragments, e.g.::

    immutable,annotate_code,output_list_file=out/srcs.txt

`parse_generator_parameter` splits it into ordered (key, value) pairs and
`build_config` turns those pairs into a validated `GenerationConfig`.
"""

from typing import Iterable, List, Tuple

from .common import ConfigurationError
from .state import GenerationConfig
from .suggest import suggest_similar, format_suggestion


LITE_MUTABLE_CONFLICT = "lite runtime generator option cannot be used with mutable API."


def _set_output_list_file(config: GenerationConfig, value: str) -> None:
    config.output_list_file = value


def _set_immutable(config: GenerationConfig, _: str) -> None:
    config.generate_immutable_code = True


def _set_mutable(config: GenerationConfig, _: str) -> None:
    config.generate_mutable_code = True


def _set_shared(config: GenerationConfig, _: str) -> None:
    config.generate_shared_code = True


def _set_lite(config: GenerationConfig, _: str) -> None:
    # Java Lite does not guarantee API/ABI stability.
    config.enforce_lite = True


def _set_annotate_code(config: GenerationConfig, _: str) -> None:
    config.annotate_code = True


def _set_annotation_list_file(config: GenerationConfig, value: str) -> None:
    config.annotation_list_file = value


OPTION_HANDLERS = {
    "output_list_file":     _set_output_list_file,
    "immutable":            _set_immutable,
    "mutable":              _set_mutable,
    "shared":               _set_shared,
    "lite":                 _set_lite,
    "annotate_code":        _set_annotate_code,
    "annotation_list_file": _set_annotation_list_file,
}


def parse_generator_parameter(text: str) -> List[Tuple[str, str]]:
    """
    Split a generator parameter string into (key, value) pairs.

    Fragments are separated by commas and empty fragments are dropped. Each
    fragment is split at its first '='; a fragment without '=' yields its
    whole text as the key and an empty value. Never raises.
    """
    if not text:
        return []

    options = []
    for fragment in text.split(","):
        if fragment == "":
            continue

        key, sep, value = fragment.partition("=")
        options.append((key, value if sep else ""))

    return options


def unknown_option_message(key: str) -> str:
    """Build the diagnostic for an unrecognized option key."""
    message = f"Unknown generator option: {key}"
    hint = format_suggestion(suggest_similar(key, OPTION_HANDLERS.keys()))
    if hint:
        message += f" {hint}"
    return message


def build_config(options: Iterable[Tuple[str, str]],
                 opensource_runtime: bool = False) -> GenerationConfig:
    """
    Apply parsed options, in order, to a fresh GenerationConfig.

    Raises:
        ConfigurationError: On the first unknown key (later options are not
            applied), or when both ``lite`` and ``mutable`` were requested.
    """
    config = GenerationConfig(opensource_runtime=opensource_runtime)

    for key, value in options:
        handler = OPTION_HANDLERS.get(key)
        if handler is None:
            raise ConfigurationError(unknown_option_message(key))

        handler(config, value)

    if config.enforce_lite and config.generate_mutable_code:
        raise ConfigurationError(LITE_MUTABLE_CONFLICT)

    # By default we generate immutable code and shared code for immutable API.
    if not config.has_variant():
        config.generate_immutable_code = True
        config.generate_shared_code    = True

    return config


def parse_config(parameter: str, opensource_runtime: bool = False) -> GenerationConfig:
    return build_config(parse_generator_parameter(parameter), opensource_runtime)
