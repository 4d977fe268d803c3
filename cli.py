# ruff: noqa: DOC501

from decimal import Decimal, InvalidOperation
from typing import Annotated

from cyclopts import App, Group, Parameter
from loguru import logger
from rich.table import Table

from bytesize import SizeConverter, SizeError, utils
from bytesize.errors import InvalidValueError

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)

DecimalFlag = Annotated[bool, Parameter(name=['--decimal', '-D'], negative=[])]


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
):
    utils.set_logger(level=10 if debug else 20)

    app(tokens)

    if tokens:
        logger.debug('Completed {}', tokens[0])


def _number(token: str) -> int | Decimal:
    try:
        return int(token)
    except ValueError:
        pass

    try:
        return Decimal(token)
    except InvalidOperation as e:
        raise InvalidValueError(token, 'not a number') from e


def _converter(*, decimal: bool, precision: int = 2):
    try:
        return SizeConverter(binary=not decimal, precision=precision)
    except SizeError as e:
        logger.error('{}', e)
        raise SystemExit(1) from e


@app.command(name='format')
def format_(
    sizes: list[str],
    *,
    decimal: DecimalFlag = False,
    precision: int = 2,
):
    """
    바이트 수를 읽기 쉬운 크기로 변환.

    Parameters
    ----------
    sizes : list[str]
        바이트 수.
    decimal : bool, optional
        1000 단위 (KB, MB, ...) 사용. 미입력 시 1024 단위 (KiB, MiB, ...).
    precision : int, optional
        소수점 아래 자릿수.
    """
    converter = _converter(decimal=decimal, precision=precision)

    failed = False
    for size in sizes:
        try:
            text = converter.format(_number(size))
        except SizeError as e:
            logger.error('{}', e)
            failed = True
            continue

        logger.debug('{} | {}', size, text)
        utils.cnsl.print(text)

    if failed:
        raise SystemExit(1)


@app.command
def parse(texts: list[str], *, decimal: DecimalFlag = False):
    """
    크기 문자열 (e.g. "1.5 MiB")을 바이트 수로 변환.

    Parameters
    ----------
    texts : list[str]
        크기 문자열.
    decimal : bool, optional
        1000 단위 (KB, MB, ...) 사용.
    """
    converter = _converter(decimal=decimal)

    failed = False
    for text in texts:
        try:
            size = converter.parse(text)
        except SizeError as e:
            logger.error('{}', e)
            failed = True
            continue

        logger.debug('{} | {}', text, size)
        utils.cnsl.print(size)

    if failed:
        raise SystemExit(1)


@app.command
def units(*, decimal: DecimalFlag = False):
    """단위 목록 출력."""
    converter = _converter(decimal=decimal)

    table = Table('Unit', 'Bytes')
    for unit, multiplier in converter.units():
        table.add_row(unit, f'{multiplier:,}')

    utils.cnsl.print(table)


if __name__ == '__main__':
    app.meta()
