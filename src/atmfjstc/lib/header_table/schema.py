"""
Declarative descriptions of fixed-layout binary headers.

A `Schema` is an ordered sequence of groups, each an ordered sequence of `FieldSpec`s. Every group is displayed as one
header row (field names) and one value row (field values). The grouping is chosen by hand so as to give a pleasant
layout; it is not inferred from the data.
"""

from dataclasses import dataclass
from collections.abc import Sequence
from typing import Tuple, Iterable, Union, Mapping

from .bits import MAX_BIT_LENGTH, bytes_touched
from .display import DisplayType, RawDisplayType
from .errors import SchemaError


@dataclass(frozen=True)
class FieldSpec:
    name: str
    bit_length: int
    bit_offset: int
    display_type: DisplayType

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise SchemaError(f"Field name must be a string, got {type(self.name).__name__}")
        for attr in ('bit_length', 'bit_offset'):
            value = getattr(self, attr)
            if not isinstance(value, int) or isinstance(value, bool):
                raise SchemaError(f"Field '{self.name}' has non-integer {attr.replace('_', ' ')} {value!r}")
        if not (1 <= self.bit_length <= MAX_BIT_LENGTH):
            raise SchemaError(
                f"Field '{self.name}' has bit length {self.bit_length}, must be between 1 and {MAX_BIT_LENGTH}"
            )
        if self.bit_offset < 0:
            raise SchemaError(f"Field '{self.name}' has negative bit offset {self.bit_offset}")
        if not isinstance(self.display_type, DisplayType):
            raise SchemaError(f"Field '{self.name}' has invalid display type {self.display_type!r}")

    @property
    def end_bit(self) -> int:
        return self.bit_offset + self.bit_length

    def fits(self, valid_length: int) -> bool:
        """
        Checks whether this field is to be shown for a buffer of which only `valid_length` bytes were captured.

        Note that the test is ``end_bit // 8 <= valid_length``, so a field whose last bits spill into the byte right
        after the cutoff still passes. It is then shown with an empty value, since it cannot actually be read.
        """
        return self.end_bit // 8 <= valid_length


RawFieldSpec = Union[FieldSpec, Tuple[str, int, int, RawDisplayType]]


@dataclass(frozen=True)
class Schema:
    name: str
    groups: Tuple[Tuple[FieldSpec, ...], ...]

    def fields(self) -> Iterable[FieldSpec]:
        for group in self.groups:
            yield from group

    def min_length(self) -> int:
        """
        Returns the number of bytes a buffer must have for all fields to be readable.
        """
        return max((bytes_touched(field.bit_length, field.bit_offset) for field in self.fields()), default=0)


def make_schema(name: str, raw_groups: Iterable[Iterable[RawFieldSpec]]) -> Schema:
    """
    Builds a `Schema` out of a more convenient description.

    Args:
        name: A name for the schema (e.g. the protocol name)
        raw_groups: A sequence of groups, each a sequence of fields. A field can be a `FieldSpec` or a tuple of
            ``(name, bit_length, bit_offset, display_type)``, where the display type may be given as a `DisplayType`,
            its int code or its name.

    Returns:
        The schema. It is immutable and can safely be shared.

    Raises:
        SchemaError: If any of the fields is invalid.
    """
    groups = []

    for group_index, raw_group in enumerate(raw_groups):
        group = []

        for field_index, raw_field in enumerate(raw_group):
            try:
                group.append(_parse_field_spec(raw_field))
            except Exception as e:
                raise SchemaError(
                    f"Invalid field #{field_index + 1} in group #{group_index + 1} of schema '{name}'"
                ) from e

        if len(group) == 0:
            raise SchemaError(f"Group #{group_index + 1} of schema '{name}' is empty")

        groups.append(tuple(group))

    return Schema(name=name, groups=tuple(groups))


def _parse_field_spec(raw_field: RawFieldSpec) -> FieldSpec:
    if isinstance(raw_field, FieldSpec):
        return raw_field

    if isinstance(raw_field, str) or not isinstance(raw_field, Sequence):
        raise SchemaError(f"Can't parse field spec of type {type(raw_field).__name__}")
    if len(raw_field) != 4:
        raise SchemaError("Field spec must have 4 elements (name, bit length, bit offset, display type)")

    name, bit_length, bit_offset, raw_display_type = raw_field

    return FieldSpec(name, bit_length, bit_offset, DisplayType.parse(raw_display_type))


IPV4_HEADER = make_schema('ipv4', [
    [
        ('Version', 4, 0, DisplayType.DECIMAL),
        ('IHL', 4, 4, DisplayType.DECIMAL),
        ('Type of Service', 8, 8, DisplayType.BINARY),
        ('Total Length', 16, 16, DisplayType.DECIMAL),
    ],
    [
        ('Identification', 16, 32, DisplayType.DECIMAL),
        ('Flags', 3, 48, DisplayType.BINARY),
        ('Fragment Offset', 13, 51, DisplayType.DECIMAL),
        ('Time To Live', 8, 64, DisplayType.DECIMAL),
    ],
    [
        ('Protocol', 8, 72, DisplayType.DECIMAL),
        ('Header Checksum', 16, 80, DisplayType.HEX),
        ('Source Address', 32, 96, DisplayType.IPV4),
        ('Destination Address', 32, 128, DisplayType.IPV4),
    ],
])

UDP_HEADER = make_schema('udp', [
    [
        ('Source Port', 16, 0, DisplayType.DECIMAL),
        ('Destination Port', 16, 16, DisplayType.DECIMAL),
        ('Length', 16, 32, DisplayType.DECIMAL),
        ('Checksum', 16, 48, DisplayType.HEX),
    ],
])

TCP_HEADER = make_schema('tcp', [
    [
        ('Source Port', 16, 0, DisplayType.DECIMAL),
        ('Destination Port', 16, 16, DisplayType.DECIMAL),
        ('Sequence Number', 32, 32, DisplayType.DECIMAL),
    ],
    [
        ('Acknowledgment Number', 32, 64, DisplayType.DECIMAL),
        ('Data Offset', 4, 96, DisplayType.DECIMAL),
        ('Reserved', 4, 100, DisplayType.BINARY),
        ('Flags', 8, 104, DisplayType.BINARY),
    ],
    [
        ('Window', 16, 112, DisplayType.DECIMAL),
        ('Checksum', 16, 128, DisplayType.HEX),
        ('Urgent Pointer', 16, 144, DisplayType.DECIMAL),
    ],
])

SCHEMAS: Mapping[str, Schema] = {schema.name: schema for schema in (IPV4_HEADER, UDP_HEADER, TCP_HEADER)}


def get_schema(name: str) -> Schema:
    """Looks up one of the built-in schemas by (case-insensitive) name, throwing a `KeyError` if there is none"""
    try:
        return SCHEMAS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown schema '{name}' (available: {', '.join(SCHEMAS)})") from None
