"""Generator options: dialect, case transform, SRID emission and precision."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Self, TypeVar

from ..exceptions import InvalidOptionError


class Dialect(Enum):
    """Variants of the text format."""
    # SFS 1.1: no dimension markers, Z and M values written when present
    SFS_LOOSE = "wkt11"
    # SFS 1.1 with Z and M dropped from the output
    SFS_STRICT = "wkt11_strict"
    # SFS 1.2: separate Z, M or ZM token between tag and body
    SFS12 = "wkt12"
    # PostGIS EWKT: M appended to the tag when only M is present, optional SRID prefix
    EXTENDED = "ewkt"


class CaseTransform(Enum):
    """Case folding applied to the whole output string."""
    NONE = "none"
    UPPER = "uppercase"
    LOWER = "lowercase"

    def apply(self, text: str) -> str:
        if self is CaseTransform.UPPER:
            return text.upper()
        if self is CaseTransform.LOWER:
            return text.lower()
        return text


E = TypeVar("E", bound=Enum)


def _parse_enum(enum_cls: type[E], option: str, value: Any) -> E:
    """Resolve an option value to an enum member.

    Accepts the member itself, its value, or its name (case-insensitive).
    """
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if value == member.value:
            return member
    if isinstance(value, str):
        key = value.upper()
        for member in enum_cls:
            if key in (member.name, str(member.value).upper()):
                return member
    raise InvalidOptionError(option, value, [m.value for m in enum_cls])


def _parse_precision(value: Any) -> int:
    """Coerce a precision to a non-negative integer; negatives become 0."""
    try:
        return max(int(value), 0)
    except (TypeError, ValueError, OverflowError):
        raise InvalidOptionError(
            "float_precision", value, ["a non-negative integer"]
        ) from None


@dataclass(frozen=True)
class GeneratorOptions:
    """Resolved, immutable generator configuration.

    Attributes:
        dialect: Output dialect
        emit_identifier: Prefix output with ``SRID=<id>;`` (EXTENDED only)
        case_transform: Case folding applied to the final string
        float_precision: Fractional digits written for every ordinate
    """

    dialect: Dialect = Dialect.SFS_LOOSE
    emit_identifier: bool = False
    case_transform: CaseTransform = CaseTransform.NONE
    float_precision: int = 6

    def __post_init__(self) -> None:
        # None means "default" here as well as in from_mapping
        dialect = Dialect.SFS_LOOSE
        if self.dialect is not None:
            dialect = _parse_enum(Dialect, "dialect", self.dialect)
        case_transform = CaseTransform.NONE
        if self.case_transform is not None:
            case_transform = _parse_enum(CaseTransform, "case_transform", self.case_transform)
        float_precision = 6
        if self.float_precision is not None:
            float_precision = _parse_precision(self.float_precision)

        object.__setattr__(self, "dialect", dialect)
        object.__setattr__(self, "case_transform", case_transform)
        object.__setattr__(
            self,
            "emit_identifier",
            bool(self.emit_identifier) and dialect is Dialect.EXTENDED,
        )
        object.__setattr__(self, "float_precision", float_precision)

    @property
    def format_spec(self) -> str:
        """Fixed-point format spec for ordinates, e.g. ``.6f``."""
        return f".{self.float_precision}f"

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> Self:
        """Build options from a loose mapping.

        Recognized keys are ``dialect``, ``emit_identifier``,
        ``case_transform`` and ``float_precision``. Missing keys and keys
        mapped to None take their defaults; unrecognized keys are ignored.

        Args:
            options: Option names mapped to values

        Returns:
            Resolved GeneratorOptions

        Raises:
            InvalidOptionError: If dialect or case_transform is not recognized,
                or float_precision is not an integer
        """
        options = options or {}
        kwargs = {
            key: options[key]
            for key in ("dialect", "emit_identifier", "case_transform", "float_precision")
            if options.get(key) is not None
        }
        return cls(**kwargs)

