"""Tests for option resolution and validation."""

import pytest

from geowkt import (
    CaseTransform,
    Dialect,
    GeneratorOptions,
    GeometryExtractor,
    InvalidOptionError,
    WktGenerator,
)


def test_defaults():
    options = GeneratorOptions.from_mapping({})
    assert options.dialect is Dialect.SFS_LOOSE
    assert options.emit_identifier is False
    assert options.case_transform is CaseTransform.NONE
    assert options.float_precision == 6
    assert options.format_spec == ".6f"


def test_none_mapping_uses_defaults():
    assert GeneratorOptions.from_mapping(None) == GeneratorOptions()


@pytest.mark.parametrize(
    "value,expected",
    [
        (Dialect.SFS12, Dialect.SFS12),
        ("wkt12", Dialect.SFS12),
        ("ewkt", Dialect.EXTENDED),
        ("EXTENDED", Dialect.EXTENDED),
        ("sfs_strict", Dialect.SFS_STRICT),
        (None, Dialect.SFS_LOOSE),
    ],
)
def test_dialect_values(value, expected):
    assert GeneratorOptions.from_mapping({"dialect": value}).dialect is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("uppercase", CaseTransform.UPPER),
        ("UPPER", CaseTransform.UPPER),
        ("lower", CaseTransform.LOWER),
        ("none", CaseTransform.NONE),
        (None, CaseTransform.NONE),
    ],
)
def test_case_transform_values(value, expected):
    assert GeneratorOptions.from_mapping({"case_transform": value}).case_transform is expected


def test_invalid_dialect_raises():
    with pytest.raises(InvalidOptionError) as exc_info:
        GeneratorOptions.from_mapping({"dialect": "foo"})

    error = exc_info.value
    assert error.option == "dialect"
    assert error.value == "foo"
    assert error.expected == ["wkt11", "wkt11_strict", "wkt12", "ewkt"]
    assert "Invalid value for option dialect passed: 'foo'" in str(error)


def test_invalid_case_transform_raises():
    with pytest.raises(InvalidOptionError) as exc_info:
        GeneratorOptions.from_mapping({"case_transform": "title"})
    assert exc_info.value.option == "case_transform"


def test_invalid_option_is_value_error():
    with pytest.raises(ValueError):
        GeneratorOptions.from_mapping({"dialect": 42})


def test_generator_constructor_fails_fast():
    with pytest.raises(InvalidOptionError):
        WktGenerator(GeometryExtractor(), {"dialect": "foo"})


def test_emit_identifier_only_with_extended():
    assert GeneratorOptions.from_mapping(
        {"dialect": "ewkt", "emit_identifier": 1}
    ).emit_identifier is True
    assert GeneratorOptions.from_mapping(
        {"dialect": "wkt12", "emit_identifier": True}
    ).emit_identifier is False


@pytest.mark.parametrize("value,expected", [(15, 15), ("3", 3), (2.9, 2), (-4, 0)])
def test_float_precision_coercion(value, expected):
    options = GeneratorOptions.from_mapping({"float_precision": value})
    assert options.float_precision == expected
    assert options.format_spec == f".{expected}f"


@pytest.mark.parametrize("value", ["abc", [1], float("inf"), float("nan")])
def test_invalid_float_precision_raises(value):
    with pytest.raises(InvalidOptionError) as exc_info:
        GeneratorOptions.from_mapping({"float_precision": value})
    assert exc_info.value.option == "float_precision"


def test_constructor_none_uses_defaults():
    options = GeneratorOptions(dialect=None, case_transform=None, float_precision=None)
    assert options == GeneratorOptions()
    assert options.case_transform.apply("Point") == "Point"


def test_constructor_accepts_option_strings():
    options = GeneratorOptions(dialect="ewkt", case_transform="upper", float_precision="2")
    assert options.dialect is Dialect.EXTENDED
    assert options.case_transform is CaseTransform.UPPER
    assert options.float_precision == 2


def test_unrecognized_keys_are_ignored():
    options = GeneratorOptions.from_mapping({"format": "nonsense", "colour": "blue"})
    assert options == GeneratorOptions()


def test_options_are_immutable():
    options = GeneratorOptions()
    with pytest.raises(AttributeError):
        options.dialect = Dialect.SFS12
