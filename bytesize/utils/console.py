import re
from logging import LogRecord
from pathlib import Path

import rich
from loguru import logger
from rich.highlighter import ReprHighlighter
from rich.logging import RichHandler
from rich.theme import Theme

from bytesize.config import BINARY_UNITS, DECIMAL_UNITS

_UNITS = '|'.join(
    re.escape(x) for x in sorted({*BINARY_UNITS, *DECIMAL_UNITS}, key=len, reverse=True)
)


class SizeHighlighter(ReprHighlighter):
    """Highlight formatted sizes (`1.50 MiB`) and the `|` field separator."""

    highlights = [  # noqa: RUF012
        *ReprHighlighter.highlights,
        rf'(?P<size>\b\d+(?:\.\d+)? ?(?:{_UNITS})\b)',
        r'(?P<sep>\|)',
    ]


class _LoguruRichHandler(RichHandler):
    # levels registered by loguru only, unknown to `logging.getLevelName`
    LOGURU_LEVELS = {5: 'TRACE', 25: 'SUCCESS'}  # noqa: RUF012

    def emit(self, record: LogRecord) -> None:
        record.levelname = self.LOGURU_LEVELS.get(record.levelno, record.levelname)
        super().emit(record)


cnsl = rich.get_console()
cnsl.push_theme(
    Theme({
        'logging.level.success': 'blue',
        'repr.size': 'bold cyan',
        'repr.sep': 'bold blue',
    })
)


def level_number(level: int | str) -> int:
    """Level number of a loguru level name (case-insensitive)."""
    if isinstance(level, int):
        return level

    try:
        return logger.level(level.upper()).no
    except ValueError as e:
        msg = f'unknown log level `{level}`'
        raise KeyError(msg) from e


def set_logger(
    level: int | str = 'INFO',
    *,
    log_file: str | Path | None = None,
    rich_tracebacks=False,
    **kwargs,
):
    """
    Route loguru records to the shared rich console.

    Parameters
    ----------
    level : int | str, optional
        Console level.
    log_file : str | Path | None, optional
        Extra sink, rotated monthly. Records at INFO and above are always kept.
    rich_tracebacks : bool, optional
        Render exceptions with rich.
    """
    level = level_number(level)
    handler = _LoguruRichHandler(
        console=cnsl,
        highlighter=SizeHighlighter(),
        markup=True,
        log_time_format='[%X]',
        rich_tracebacks=rich_tracebacks,
    )

    logger.remove()
    logger.add(handler, level=level, format='{message}', **kwargs)

    if log_file is not None:
        logger.add(
            log_file,
            level=min(level, level_number('INFO')),
            rotation='1 month',
            retention='1 year',
            encoding='UTF-8-SIG',
        )
