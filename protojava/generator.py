"""
Java generator driver.

`JavaGenerator.generate` takes one schema file, a generator parameter string
and a generator context, and runs the whole plan:

1. parse the parameter string and validate the options,
2. pick the variants to produce (immutable first, then mutable),
3. validate every variant before any of them writes,
4. for each variant, print the primary file, its siblings and, with
   ``annotate_code``, a ``.pb.meta`` annotation file next to each,
5. write the generated-file and annotation-file manifests when requested.

The result is a `GenerationOutcome`; configuration, validation and generation
failures are reported through it instead of being raised.
"""

from typing import Callable, List, Optional, Protocol

from .common import GeneratorException, ConfigurationError, VariantValidationError, JAVA_SUFFIX, META_SUFFIX
from .state import GenerationConfig
from .options import parse_config
from .plan import VariantRequest, select_variants
from .outcome import ErrorKind, GenerationOutcome, VariantResult
from .manifest import write_manifest
from .descriptor.model import FileDescriptor
from .descriptor.names import java_package_to_dir
from .emit.writer import CodePrinter
from .emit.annotations import AnnotationCollector, GeneratedCodeInfo
from .java import FileGenerator


class Variant(Protocol):
    """What the driver needs from a per-variant emitter."""

    java_package: str
    classname:    str

    def validate(self) -> None:
        """Raise VariantValidationError when the schema cannot be generated."""
        ...

    def generate(self, printer: CodePrinter) -> None:
        """Print the primary file."""
        ...

    def generate_siblings(self, package_dir: str, context, file_list: List[str], annotation_list: List[str]) -> None:
        """Write extra files, appending their paths to file_list and annotation_list."""
        ...


VariantFactory = Callable[[FileDescriptor, GenerationConfig, VariantRequest], Variant]


def java_variant_factory(file: FileDescriptor, config: GenerationConfig, request: VariantRequest) -> Variant:
    return FileGenerator(file, config, request.is_immutable)


class JavaGenerator:
    def __init__(self, opensource_runtime: bool = False, variant_factory: Optional[VariantFactory] = None) -> None:
        self.opensource_runtime = opensource_runtime
        self.variant_factory    = variant_factory or java_variant_factory

    def generate(self, file: FileDescriptor, parameter: str, context) -> GenerationOutcome:
        try:
            config = parse_config(parameter, self.opensource_runtime)
        except ConfigurationError as exc:
            return GenerationOutcome.failure(ErrorKind.CONFIGURATION, str(exc))

        variants = [ self.variant_factory(file, config, request) for request in select_variants(config) ]

        # Every variant must validate before any output is opened.
        for variant in variants:
            try:
                variant.validate()
            except VariantValidationError as exc:
                return GenerationOutcome.failure(ErrorKind.VALIDATION, str(exc))

        all_files:       List[str] = []
        all_annotations: List[str] = []
        results:         List[VariantResult] = []

        try:
            for variant in variants:
                results.append(self._generate_variant(variant, config, context, all_files, all_annotations))

            write_manifest(context, config.output_list_file,     all_files)
            write_manifest(context, config.annotation_list_file, all_annotations)
        except (GeneratorException, OSError) as exc:
            return GenerationOutcome.failure(ErrorKind.GENERATION, str(exc), all_files, all_annotations)
        except Exception as exc:
            return GenerationOutcome.failure(ErrorKind.GENERATION, f"{type(exc).__name__}: {exc}",
                                             all_files, all_annotations)

        return GenerationOutcome(
            success=True,
            generated_files=all_files,
            annotation_files=all_annotations,
            results=results,
        )

    @staticmethod
    def _generate_variant(variant: Variant, config: GenerationConfig, context,
                          all_files: List[str], all_annotations: List[str]) -> VariantResult:
        package_dir   = java_package_to_dir(variant.java_package)
        java_filename = f"{package_dir}{variant.classname}{JAVA_SUFFIX}"
        info_path     = java_filename + META_SUFFIX

        all_files.append(java_filename)
        if config.annotate_code:
            all_annotations.append(info_path)

        files_before       = len(all_files)
        annotations_before = len(all_annotations)

        info      = GeneratedCodeInfo()
        collector = AnnotationCollector(info) if config.annotate_code else None

        try:
            with context.open(java_filename) as sink:
                variant.generate(CodePrinter(sink, "$", collector))

            variant.generate_siblings(package_dir, context, all_files, all_annotations)

            if config.annotate_code:
                with context.open(info_path) as sink:
                    info.serialize_to_stream(sink)
        except Exception:
            # The primary annotation file was listed up front but never written.
            if config.annotate_code:
                all_annotations.remove(info_path)
            raise

        return VariantResult(
            primary=java_filename,
            siblings=all_files[files_before:],
            annotations=all_annotations[annotations_before - (1 if config.annotate_code else 0):],
        )
