#!/usr/bin/env python3

import sys

from . import args, cfg, state
from .state import ARG
from .common import GeneratorException
from .printer import cons
from .outcome import GenerationOutcome
from .generator import JavaGenerator
from .descriptor import loader
from .emit.sink import DirectoryContext, MemoryContext


def __pick(arg: str, default):
    value = state.ARGS().get(arg)
    return default if value is None else value


def run() -> GenerationOutcome:
    user = cfg.load(ARG("config"))

    parameter          = __pick("parameter",          user.parameter)
    output             = __pick("output",             user.output)
    opensource_runtime = __pick("opensource_runtime", user.opensource_runtime)

    file    = loader.load(ARG("input"))
    context = MemoryContext() if ARG("dry_run") else DirectoryContext(output)

    cons.print(f"Generating Java for [bold magenta]{file.name}[/bold magenta] ([dim]{parameter or 'defaults'}[/dim]):")
    cons.indent()

    outcome = JavaGenerator(opensource_runtime).generate(file, parameter, context)

    if outcome.success:
        for filepath in outcome.generated_files + outcome.annotation_files:
            verb = "Planned" if ARG("dry_run") else "Generated"
            cons.print(f"[green]{verb}[/green] {filepath}")
    else:
        cons.error(f"{outcome.error.kind.value} failed: {outcome.error_message}")

    cons.unindent()

    return outcome


def main(argv=None) -> int:
    try:
        state.gARG = args.parse(argv)
        cons.quiet = ARG("quiet")

        return 0 if run().success else 1
    except GeneratorException as exc:
        cons.reset()
        cons.error(str(exc))
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception:  # pylint: disable=broad-except
        cons.reset()
        cons.print_exception()
        cons.error("An unexpected exception occurred.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
