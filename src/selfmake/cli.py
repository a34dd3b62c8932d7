from __future__ import annotations

import argparse
import logging
import os
import sys
import traceback
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from selfmake.bootstrap.rebuild import SelfRebuilder
from selfmake.core.errors import SelfMakeError
from selfmake.core.interfaces.logging import LoggerFactoryProtocol
from selfmake.core.interfaces.process import ProcessRunnerProtocol
from selfmake.core.models import Include
from selfmake.execution.runner import ProcessRunner
from selfmake.logging.factory import DefaultLoggerFactory
from selfmake.logging.helpers import get_logger
from selfmake.parsing.parser import _build_parser
from selfmake.resolution.resolver import IncludeResolver
from selfmake.runtime.config import ToolchainConfig
from selfmake.scanning.tree_index import TreeIndexer
from selfmake.utils.extensions import extension_preset, normalize_extensions

logger = get_logger('selfmake')


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = logging.DEBUG if verbose else logging.INFO
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('selfmake')


def _error_location(exc: BaseException) -> str:
    """Return `file:line[:col]` of the innermost frame that raised *exc*."""
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return '<unknown>'
    frame = frames[-1]
    col = getattr(frame, 'colno', None)
    if col is not None:
        return f'{frame.filename}:{frame.lineno}:{col + 1}'
    return f'{frame.filename}:{frame.lineno}'


def _fatal(exc: BaseException, code: int = 1) -> NoReturn:
    """Exit the process after logging *exc* with its source location."""
    logger.error('%s: %s', _error_location(exc), exc)
    sys.exit(code)


class SelfMake:
    """Top-level façade for command-style execution.

    Every method returns the process exit code instead of exiting, except
    for the rebuild path of `build`, which exits through the bootstrap.
    """

    def __init__(
        self,
        *,
        stdout: Optional[TextIO] = None,
        runner: Optional[ProcessRunnerProtocol] = None,
        toolchain: Optional[ToolchainConfig] = None,
    ) -> None:
        self._out = stdout
        self._runner = runner
        self._toolchain = toolchain

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def runner(self) -> ProcessRunnerProtocol:
        if self._runner is None:
            self._runner = ProcessRunner(stream=self._out)
        return self._runner

    @property
    def toolchain(self) -> ToolchainConfig:
        if self._toolchain is None:
            self._toolchain = ToolchainConfig.from_env()
        return self._toolchain

    def run(self, argv: Sequence[str]) -> int:
        """Parse *argv* and dispatch to the selected command."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('SELFMAKE_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        handler = getattr(self, f'cmd_{ns.command}')
        return handler(ns)

    # ----------------------------------------------------------------- scan

    def cmd_scan(self, ns: argparse.Namespace) -> int:
        if ns.extensions:
            extensions = normalize_extensions(ns.extensions)
        else:
            extensions = extension_preset(ns.lang, ns.kind)

        index = TreeIndexer().index(ns.root, extensions)
        resolver = IncludeResolver(ns.include_dirs) if ns.resolve else None

        for filename, includes in index.items():
            self.out.write(f'{filename}\n')
            for inc in includes:
                line = f'  {inc}'
                if resolver is not None:
                    found = resolver.resolve(inc, filename)
                    if found is not None:
                        line += f' -- {found}'
                self.out.write(line + '\n')
        return 0

    # -------------------------------------------------------------- resolve

    def cmd_resolve(self, ns: argparse.Namespace) -> int:
        include = Include(ns.target, not ns.angle)
        found = IncludeResolver(ns.include_dirs).resolve(include, ns.relative_to)
        if found is None:
            logger.info('%s not found', include)
            return 1
        self.out.write(f'{found}\n')
        return 0

    # ------------------------------------------------------------------ run

    def cmd_run(self, ns: argparse.Namespace) -> int:
        argv = list(ns.argv)
        if argv and argv[0] == '--':
            argv = argv[1:]
        return self.runner.run(argv).exit_code

    # ---------------------------------------------------------------- build

    def cmd_build(self, ns: argparse.Namespace) -> int:
        if ns.program:
            source = ns.source or str(Path(ns.program).with_suffix('.cc'))
            SelfRebuilder(
                ns.program,
                source,
                runner=self.runner,
                toolchain=self.toolchain,
            ).rebuild_if_stale()

        if not ns.inputs:
            logger.info('nothing to compile')
            return 0

        argv = self.toolchain.compile_command(ns.inputs, output=ns.output, include_dirs=ns.include_dirs)
        return self.runner.run(argv).exit_code


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `selfmake` console script."""
    try:
        code = SelfMake().run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except SelfMakeError as exc:
        _fatal(exc)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s: %s', _error_location(exc), exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
