import typing

import rich, rich.console


class GeneratorPrinter:
    def __init__(self):
        self.stack = []
        self.quiet = False
        self.raw   = rich.console.Console()
        self.err   = rich.console.Console(stderr=True)

    def reset(self):
        self.stack = []

    def indent(self, msg: str = None):
        msg = msg if msg is not None else "  "

        self.stack.append(msg)

    def unindent(self, times: int = None):
        if times is None:
            times = 1

        for _ in range(times):
            self.stack.pop()

    def print(self, msg: typing.Any = None, *args, no_indent: bool = False, **kwargs):
        if self.quiet:
            return

        if msg is None:
            msg = ""

        if no_indent:
            self.raw.print(str(msg), soft_wrap=True, *args, **kwargs)
        else:
            print_s, lines = "", str(msg).split('\n', maxsplit=-1)
            for i, s in enumerate(lines):
                newline = '\n' if (i != len(lines)-1) else ''
                print_s += f"{''.join(self.stack)}{s}{newline}"

            self.raw.print(print_s, soft_wrap=True, *args, **kwargs)

    def warning(self, msg: str):
        self.err.print(f"[bold yellow]WARNING:[/bold yellow] {msg}", soft_wrap=True, highlight=False)

    def error(self, msg: str):
        self.err.print(f"[bold red]Error[/bold red]: {msg}", soft_wrap=True, highlight=False)

    def print_exception(self):
        self.err.print_exception()


cons = GeneratorPrinter()
