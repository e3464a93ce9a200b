import argparse

from .options import OPTION_HANDLERS
from .common import format_list_to_string


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="protojava",
        description=f"""\
Generate Java sources from a schema description (YAML or JSON). The generator \
parameter is a comma separated list of options; recognized options are \
{format_list_to_string(sorted(OPTION_HANDLERS.keys()))}.""",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("input",                   metavar="SCHEMA",                 type=str,                   help="Schema description file to generate from.")
    parser.add_argument("-o", "--output",          metavar="DIR",                    type=str,   default=None,   help="Output directory (user configuration or '.' when omitted).")
    parser.add_argument("-p", "--parameter",       metavar="PARAMETER",              type=str,   default=None,   help="Generator parameter, e.g. 'immutable,annotate_code'.")
    parser.add_argument("-c", "--config",          metavar="CONFIG",                 type=str,   default=None,   help="User configuration file.")
    parser.add_argument(      "--opensource-runtime", action="store_true", dest="opensource_runtime", default=None, help="Generate for the open-source runtime.")
    parser.add_argument(      "--dry-run",         action="store_true",                          default=False,  help="Generate in memory and only list the files.")
    parser.add_argument("-q", "--quiet",           action="store_true",                          default=False,  help="Only print errors.")

    return parser


def parse(argv=None) -> dict:
    return vars(make_parser().parse_args(argv))
