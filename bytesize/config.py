from __future__ import annotations

import dataclasses as dc
from collections.abc import Sequence
from typing import ClassVar

from bytesize.errors import ConfigurationError

DECIMAL_UNITS = ('B', 'KB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')
BINARY_UNITS = ('B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB', 'ZiB', 'YiB')


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dc.dataclass(frozen=True)
class SizeConfig:
    """
    Base, unit table and precision of a `SizeConverter`.

    Instances are immutable; use `replace` to derive a new configuration.
    """

    base: int = 1024
    units: Sequence[str] = BINARY_UNITS
    precision: int = 2

    _index: dict[str, int] = dc.field(init=False, repr=False, compare=False)

    BINARY: ClassVar[int] = 1024
    DECIMAL: ClassVar[int] = 1000

    def __post_init__(self):
        if not _is_int(self.precision) or self.precision < 0:
            msg = f'precision must be a non-negative integer, got {self.precision!r}'
            raise ConfigurationError(msg)

        if not _is_int(self.base) or self.base < 2:  # noqa: PLR2004
            msg = f'base must be an integer >= 2, got {self.base!r}'
            raise ConfigurationError(msg)

        if isinstance(self.units, str):
            msg = f'units must be a sequence of symbols, got {self.units!r}'
            raise ConfigurationError(msg)

        units = tuple(self.units)
        if not units:
            msg = 'unit table is empty'
            raise ConfigurationError(msg)

        index: dict[str, int] = {}
        for i, unit in enumerate(units):
            if not isinstance(unit, str) or not unit.isascii() or not unit.isalpha():
                msg = f'invalid unit symbol {unit!r}'
                raise ConfigurationError(msg)

            if (key := unit.casefold()) in index:
                msg = f'duplicate unit symbol {unit!r}'
                raise ConfigurationError(msg)

            index[key] = i

        object.__setattr__(self, 'units', units)
        object.__setattr__(self, '_index', index)

    @classmethod
    def binary(cls, precision: int = 2):
        return cls(base=cls.BINARY, units=BINARY_UNITS, precision=precision)

    @classmethod
    def decimal(cls, precision: int = 2):
        return cls(base=cls.DECIMAL, units=DECIMAL_UNITS, precision=precision)

    def replace(self, **changes) -> SizeConfig:
        fields = {f.name for f in dc.fields(self) if f.init}
        if unknown := changes.keys() - fields:
            msg = f'unknown fields {sorted(unknown)}'
            raise ConfigurationError(msg)

        return dc.replace(self, **changes)

    def index(self, symbol: str) -> int | None:
        """Case-insensitive exact lookup of a unit symbol."""
        return self._index.get(symbol.casefold())

    def multiplier(self, index: int) -> int:
        return self.base**index
