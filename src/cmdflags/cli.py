from __future__ import annotations

"""
cmdflags – inspect how an argument list parses against a set of declarations.

    cmdflags --declare n:int! --declare name:string,verbose:bool -- -n 3 -verbose
    cmdflags --declare n:int -- -is run.flags

Each declaration is NAME:KIND with an optional trailing '!' for required
flags. The arguments after '--' go through `CmdParser.parse`, and the
resulting slots are printed as JSON on stdout.
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, List, NoReturn, Optional, Sequence, Tuple

from cmdflags.core.errors import CmdlineParseError
from cmdflags.core.kinds import ArgKind, kind_from_name
from cmdflags.logging.factory import DefaultLoggerFactory
from cmdflags.logging.helpers import get_logger
from cmdflags.parsing.parser import CmdParser

logger = get_logger('cmdflags')

Declaration = Tuple[str, ArgKind, bool]


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == bool(enable_json):
        return
    factory = DefaultLoggerFactory.from_env(json_logs=enable_json)
    lg = factory.get_logger('cmdflags')
    global logger
    logger = lg
    setattr(_configure_logging, '_configured_mode', bool(enable_json))


def parse_declaration(spec: str) -> List[Declaration]:
    """Parse 'name:kind[!]' items (comma separated) into declarations.

    Raises:
        argparse.ArgumentTypeError: an item is malformed or names an unknown kind.
    """
    out: List[Declaration] = []
    for item in (x.strip() for x in spec.split(',')):
        if not item:
            continue
        required = item.endswith('!')
        body = item[:-1] if required else item
        name, sep, kind_name = body.partition(':')
        if not sep or not name:
            raise argparse.ArgumentTypeError(f'bad declaration {item!r}, expected NAME:KIND')
        kind = kind_from_name(kind_name)
        if kind is ArgKind.NONE:
            raise argparse.ArgumentTypeError(f'unknown kind {kind_name!r} in {item!r}')
        out.append((name, kind, required))
    return out


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='cmdflags',
        description='Parse ARGS against declared flags and print the result as JSON.',
    )
    p.add_argument(
        '-d', '--declare', action='append', default=[], type=parse_declaration,
        metavar='NAME:KIND[!]',
        help='declare flags (kinds: int, int64, float, string, bool; "!" marks required)',
    )
    p.add_argument('--only-loaded', action='store_true', help='print loaded flags only')
    p.add_argument('--json-logs', action='store_true', help='emit diagnostics as JSON lines')
    p.add_argument('args', nargs=argparse.REMAINDER, help='arguments to parse (after "--")')
    return p


def _snapshot(cp: CmdParser, *, only_loaded: bool) -> Dict[str, Dict[str, Any]]:
    out: Dict[str, Dict[str, Any]] = {}
    for name in cp.names():
        loaded = cp.is_loaded(name)
        if only_loaded and not loaded:
            continue
        out[name] = {
            'kind': cp.kind_of(name).value,
            'required': cp.is_required(name),
            'loaded': loaded,
            'value': cp.get_var(name),
        }
    return out


class CmdFlags:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the JSON report."""
        ns = _build_parser().parse_args(list(argv))
        _configure_logging(ns.json_logs)

        args = list(ns.args)
        if args and args[0] == '--':
            args = args[1:]

        cp = CmdParser()
        for group in ns.declare:
            for name, kind, required in group:
                cp.add_flag(kind, name, required)

        cp.parse(args)
        return json.dumps(_snapshot(cp, only_loaded=ns.only_loaded), indent=2)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `cmdflags` and `python -m cmdflags`."""
    try:
        sys.stdout.write(CmdFlags.run(sys.argv[1:] if argv is None else argv) + '\n')
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except CmdlineParseError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
