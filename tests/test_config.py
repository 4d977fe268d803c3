import pytest

from bytesize import BINARY_UNITS, DECIMAL_UNITS, ConfigurationError, SizeConfig


def test_presets():
    binary = SizeConfig.binary()
    decimal = SizeConfig.decimal(precision=0)

    assert (binary.base, binary.units, binary.precision) == (1024, BINARY_UNITS, 2)
    assert (decimal.base, decimal.units, decimal.precision) == (1000, DECIMAL_UNITS, 0)


def test_units_stored_as_tuple():
    config = SizeConfig(base=1000, units=['B', 'KB'], precision=1)
    assert config.units == ('B', 'KB')
    assert hash(config) == hash(SizeConfig(base=1000, units=('B', 'KB'), precision=1))


@pytest.mark.parametrize(
    'kwargs',
    [
        {'precision': -1},
        {'precision': 1.5},
        {'precision': True},
        {'units': ()},
        {'units': []},
        {'units': 'B'},
        {'units': ('B', 'kb', 'KB')},
        {'units': ('B', '')},
        {'units': ('B', 'K B')},
        {'units': ('B', 1)},
        {'base': 1},
        {'base': 1024.0},
        {'base': False},
    ],
)
def test_invalid(kwargs):
    with pytest.raises(ConfigurationError):
        SizeConfig(**kwargs)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError, match='precision'):
        SizeConfig(precision=-2)


def test_frozen():
    config = SizeConfig()
    with pytest.raises(AttributeError):
        config.precision = 3  # type: ignore[misc]


def test_replace():
    config = SizeConfig.decimal()
    replaced = config.replace(precision=4)

    assert replaced.precision == 4
    assert replaced.units == config.units
    assert config.precision == 2

    with pytest.raises(ConfigurationError):
        config.replace(units=())


@pytest.mark.parametrize('changes', [{'bogus': 1}, {'_index': {}}, {'Precision': 3}])
def test_replace_unknown_field(changes):
    with pytest.raises(ConfigurationError, match='unknown fields'):
        SizeConfig().replace(**changes)


@pytest.mark.parametrize(
    ('symbol', 'expected'),
    [('B', 0), ('b', 0), ('mib', 2), ('MIB', 2), ('YiB', 8), ('Mi', None), ('MB', None)],
)
def test_index(symbol, expected):
    assert SizeConfig.binary().index(symbol) == expected


def test_multiplier():
    config = SizeConfig.decimal()
    assert config.multiplier(0) == 1
    assert config.multiplier(3) == 10**9
