import os
import dataclasses

from .common import GeneratorException, file_load_yaml


USER_CONFIG_FILENAME = "protojava.yaml"
USER_CONFIG_ENV      = "PROTOJAVA_CONFIG"


@dataclasses.dataclass
class UserConfig:
    opensource_runtime: bool
    parameter:          str
    output:             str

    def __init__(self, data: dict = None) -> None:
        data = data or {}

        unknown = set(data.keys()) - { "opensource_runtime", "parameter", "output" }
        if unknown:
            raise GeneratorException(f"Unknown user configuration key(s): {', '.join(sorted(unknown))}.")

        self.opensource_runtime = bool(data.get("opensource_runtime", False))
        self.parameter          =  str(data.get("parameter",          ""))
        self.output             =  str(data.get("output",             "."))


def get_user_config_filepath() -> str:
    return os.environ.get(USER_CONFIG_ENV, USER_CONFIG_FILENAME)


def load(filepath: str = None) -> UserConfig:
    """ Loads user defaults. A missing file is not an error unless its path
        was given explicitly (argument or environment variable). """
    explicit = filepath is not None or USER_CONFIG_ENV in os.environ
    filepath = filepath or get_user_config_filepath()

    if not os.path.isfile(filepath):
        if explicit:
            raise GeneratorException(f'User configuration file "{filepath}" does not exist.')
        return UserConfig()

    data = file_load_yaml(filepath)
    if data is not None and not isinstance(data, dict):
        raise GeneratorException(f'User configuration file "{filepath}" must contain a mapping.')

    return UserConfig(data)
