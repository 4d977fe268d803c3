from __future__ import annotations

import math
import re
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction
from numbers import Integral, Rational, Real

from bytesize.config import SizeConfig
from bytesize.errors import ConfigurationError, InvalidValueError, ParseError

# numeral without sign, then an optional gap and the unit symbol
SIZE_PATTERN = re.compile(r'^([0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*([A-Za-z]+)$')


def _exact(value) -> Fraction:
    if isinstance(value, bool) or not isinstance(value, Real | Decimal):
        raise InvalidValueError(value, 'not a number')

    if isinstance(value, Integral):
        exact = Fraction(int(value))
    elif isinstance(value, Rational):
        exact = Fraction(value.numerator, value.denominator)
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidValueError(value, 'not a finite number')

        exact = Fraction(value)
    else:
        f = float(value)
        if not math.isfinite(f):
            raise InvalidValueError(value, 'not a finite number')

        # shortest repr, so that 1.005 rounds like the literal it was typed as
        exact = Fraction(repr(f))

    if exact < 0:
        raise InvalidValueError(value, 'negative size')

    return exact


def _round_half_up(value: Fraction, digits: int) -> int:
    """Round a non-negative value, returning it scaled by `10**digits`."""
    return math.floor(value * 10**digits + Fraction(1, 2))


def _fixed(scaled: int, digits: int) -> str:
    # Decimal renders integers past the int-to-str digit limit
    text = f'{Decimal(scaled):f}'
    if not digits:
        return text

    text = text.rjust(digits + 1, '0')
    return f'{text[:-digits]}.{text[-digits:]}'


def _unit_index(exact: Fraction, config: SizeConfig) -> int:
    last = len(config.units) - 1

    i = 0
    while i < last and exact >= config.multiplier(i + 1):
        i += 1

    return i


class SizeConverter:
    """
    Convert byte counts to human-readable sizes and back.

    Parameters
    ----------
    config : SizeConfig | None, optional
        Complete configuration. Excludes every other selector.
    binary : bool | None, optional
        `True` for base 1024 and KiB, MiB, ...; `False` for base 1000 and
        KB, MB, .... Binary when no selector is given.
    base : int | None, optional
        Explicit base. Must be given together with `units`.
    units : Sequence[str] | None, optional
        Explicit unit table, index 0 being the base unit.
    precision : int | None, optional
        Digits after the decimal point. 2 when omitted.
    """

    def __init__(
        self,
        config: SizeConfig | None = None,
        *,
        binary: bool | None = None,
        base: int | None = None,
        units: Sequence[str] | None = None,
        precision: int | None = None,
    ) -> None:
        explicit = base is not None or units is not None
        digits = 2 if precision is None else precision

        if config is not None:
            if binary is not None or explicit or precision is not None:
                msg = (
                    '`config` cannot be combined with '
                    '`binary`, `base`, `units` or `precision`'
                )
                raise ConfigurationError(msg)
        elif explicit:
            if binary is not None:
                msg = '`binary` and `base`/`units` are mutually exclusive'
                raise ConfigurationError(msg)
            if base is None or units is None:
                msg = '`base` and `units` must be given together'
                raise ConfigurationError(msg)

            config = SizeConfig(base=base, units=units, precision=digits)
        elif binary is None or binary:
            config = SizeConfig.binary(precision=digits)
        else:
            config = SizeConfig.decimal(precision=digits)

        self._config = config

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._config!r})'

    @property
    def config(self) -> SizeConfig:
        return self._config

    @config.setter
    def config(self, value: SizeConfig):
        if not isinstance(value, SizeConfig):
            msg = f'expected SizeConfig, got {type(value).__name__}'
            raise ConfigurationError(msg)

        self._config = value

    def units(self) -> list[tuple[str, int]]:
        config = self._config
        return [(u, config.multiplier(i)) for i, u in enumerate(config.units)]

    @staticmethod
    def _split(exact: Fraction, config: SizeConfig) -> tuple[Fraction, str]:
        i = _unit_index(exact, config)
        return exact / config.multiplier(i), config.units[i]

    def human_readable(self, size) -> tuple[Decimal, str]:
        """Scaled (unrounded) magnitude and the unit it is expressed in."""
        config = self._config
        value, unit = self._split(_exact(size), config)
        return Decimal(value.numerator) / Decimal(value.denominator), unit

    def format(self, size) -> str:
        config = self._config
        exact = _exact(size)

        if exact == 0:
            return f'0 {config.units[0]}'

        value, unit = self._split(exact, config)
        scaled = _round_half_up(value, config.precision)

        return f'{_fixed(scaled, config.precision)} {unit}'

    def parse(self, text: str) -> int:
        config = self._config

        if not isinstance(text, str):
            raise ParseError(text, 'expected a string')

        if not (stripped := text.strip()):
            raise ParseError(text, 'empty size')

        if not (m := SIZE_PATTERN.match(stripped)):
            raise ParseError(text, 'invalid size format')

        numeral, symbol = m.groups()
        if (i := config.index(symbol)) is None:
            raise ParseError(text, f'unknown unit {symbol!r}')

        value = Fraction(Decimal(numeral))
        return _round_half_up(value * config.multiplier(i), 0)


def format_size(size, *, binary=True, precision: int = 2) -> str:
    return SizeConverter(binary=binary, precision=precision).format(size)


def parse_size(text: str, *, binary=True) -> int:
    return SizeConverter(binary=binary).parse(text)
