import typing, dataclasses


@dataclasses.dataclass
class GenerationConfig:
    # pylint: disable=too-many-instance-attributes
    generate_immutable_code: bool = False
    generate_mutable_code:   bool = False
    generate_shared_code:    bool = False
    enforce_lite:            bool = False
    annotate_code:           bool = False
    output_list_file:        str  = ""
    annotation_list_file:    str  = ""
    opensource_runtime:      bool = False

    @staticmethod
    def from_dict(d: dict):
        """ Create a GenerationConfig object from a dictionary whose keys are a
            subset of the fields of GenerationConfig """
        r = GenerationConfig()

        for field in dataclasses.fields(GenerationConfig):
            if field.name in d:
                setattr(r, field.name, d[field.name])

        return r

    def items(self) -> typing.Iterable[typing.Tuple[str, typing.Any]]:
        return dataclasses.asdict(self).items()

    def has_variant(self) -> bool:
        return self.generate_immutable_code or self.generate_mutable_code or self.generate_shared_code

    def make_parameter(self) -> str:
        """ Returns a parameter string that parses back into this configuration.
            Example: immutable,shared,annotate_code,output_list_file=srcs.txt """
        options = []
        for key, field in _PARAMETER_FLAGS:
            if getattr(self, field):
                options.append(key)

        for key in ("output_list_file", "annotation_list_file"):
            if getattr(self, key):
                options.append(f"{key}={getattr(self, key)}")

        return ','.join(options)

    def __str__(self) -> str:
        """ Returns a string like "immutable=Yes & mutable=No & ... & output_list_file=srcs.txt" """
        strings = []
        for k, v in self.items():
            k = k.replace("generate_", "").replace("_code", "")
            if isinstance(v, bool):
                strings.append(f"{k}={'Yes' if v else 'No'}")
            elif v:
                strings.append(f"{k}={v}")

        return ' & '.join(strings)


# Boolean parameter keys and the GenerationConfig field each one sets.
_PARAMETER_FLAGS = [
    ("immutable",     "generate_immutable_code"),
    ("mutable",       "generate_mutable_code"),
    ("shared",        "generate_shared_code"),
    ("lite",          "enforce_lite"),
    ("annotate_code", "annotate_code"),
]


gARG: dict = {}

def ARG(arg: str, dflt = None) -> typing.Any:
    # pylint: disable=global-variable-not-assigned
    global gARG
    if arg in gARG:
        return gARG[arg]
    if dflt is not None:
        return dflt

    raise KeyError(f"{arg} is not an argument.")

def ARGS() -> dict:
    # pylint: disable=global-variable-not-assigned
    global gARG
    return gARG
