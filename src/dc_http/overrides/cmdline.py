"""
Command-line override stage.

Only the attached long form is understood: ``--port=8080``. A bare
``--port`` is ignored and does not consume the next argument.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from dc_http.core.logging import logger
from dc_http.models.config import Config
from dc_http.overrides.base import TEXT_CHECKS, apply_candidate

CMDLINE_OPTIONS: Dict[str, str] = {
    "--port": "port",
    "--mode": "mode",
    "--root-dir": "root_dir",
    "--index-page": "index_page",
    "--not-found-page": "not_found_page",
}

CONFIG_FILE_OPTION = "--config-file"


class OptionScanner:
    """
    Resettable cursor over an argument list.

    Iterating yields (option, value) for every recognised option, with
    value None when nothing was attached. Unknown options and positional
    words are skipped; "--" ends the scan.
    """

    def __init__(self, args: Sequence[str], options: Iterable[str]):
        self.args: List[str] = list(args)
        self.options = frozenset(options)
        self.position = 0

    def reset(self, args: Optional[Sequence[str]] = None) -> None:
        """Rewind to the first argument, optionally over a new list."""
        if args is not None:
            self.args = list(args)
        self.position = 0

    def __iter__(self) -> "OptionScanner":
        return self

    def __next__(self) -> Tuple[str, Optional[str]]:
        while self.position < len(self.args):
            arg = self.args[self.position]
            self.position += 1
            if arg == "--":
                self.position = len(self.args)
                break
            if not arg.startswith("--"):
                continue
            name, sep, value = arg.partition("=")
            if name not in self.options:
                continue
            return name, value if sep and value else None
        raise StopIteration


def apply_cmdline_config(
    cfg: Config, args: Sequence[str], scanner: Optional[OptionScanner] = None
) -> None:
    """
    Override cfg from long command-line options.

    Args:
        cfg: Configuration to update in place
        args: Arguments without the program name
        scanner: Cursor to reuse; it is rewound over args before scanning
    """
    if scanner is None:
        scanner = OptionScanner(args, CMDLINE_OPTIONS)
    else:
        scanner.reset(args)

    applied = []
    for option, value in scanner:
        if value is None:
            logger.debug("Option without value ignored", option=option)
            continue
        field = CMDLINE_OPTIONS.get(option)
        if field is None:
            continue
        if apply_candidate(cfg, field, value, TEXT_CHECKS[field], "cmdline"):
            applied.append(field)

    logger.debug("Command-line overrides applied", fields=applied)


def find_config_file_option(args: Sequence[str]) -> Optional[str]:
    """Value of the last --config-file=<path> in args, if any."""
    path = None
    for _, value in OptionScanner(args, (CONFIG_FILE_OPTION,)):
        if value is not None:
            path = value
    return path
