import typing, dataclasses

from .state import GenerationConfig


@dataclasses.dataclass(frozen=True)
class VariantRequest:
    is_immutable: bool

    @property
    def label(self) -> str:
        return "immutable" if self.is_immutable else "mutable"


def select_variants(config: GenerationConfig) -> typing.List[VariantRequest]:
    """ Returns the variants to generate, immutable first. The shared flag
        never adds a variant of its own; the emitter reads it from config. """
    requests = []

    if config.generate_immutable_code:
        requests.append(VariantRequest(is_immutable=True))

    if config.generate_mutable_code:
        requests.append(VariantRequest(is_immutable=False))

    return requests
