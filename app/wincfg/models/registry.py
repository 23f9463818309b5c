"""Registry item models.

This module defines the raw registry row read from a CSV file and the
validated registry value specification built from it.
"""

from dataclasses import dataclass
from enum import Enum

# Separator between strings of a MultiString value in the CSV value column
MULTI_STRING_SEPARATOR = ";"

_DWORD_MAX = 0xFFFFFFFF
_QWORD_MAX = 0xFFFFFFFFFFFFFFFF


class RegistryValueType(Enum):
    """Registry value types accepted in the type column."""

    STRING = "String"
    EXPAND_STRING = "ExpandString"
    BINARY = "Binary"
    DWORD = "DWord"
    QWORD = "QWord"
    MULTI_STRING = "MultiString"

    @classmethod
    def parse(cls, text: str) -> "RegistryValueType":
        """Parse a type name, ignoring case and surrounding whitespace.

        Args:
            text: Type name from the CSV type column.

        Returns:
            Matching RegistryValueType.

        Raises:
            ValueError: If the name is not one of the supported types.
        """
        wanted = text.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        valid = ", ".join(member.value for member in cls)
        msg = f"Invalid registry value type '{text}' (expected one of: {valid})"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RegistryRow:
    """One unvalidated row of a registry CSV file.

    Attributes:
        path: Registry key path (e.g. 'HKLM:\\SOFTWARE\\Contoso').
        name: Value name.
        type: Value type name as written in the file.
        value: Value data as written in the file.
    """

    path: str
    name: str
    type: str
    value: str

    def __str__(self) -> str:
        return f"{self.path}\\{self.name}"


@dataclass(frozen=True, slots=True)
class RegistryItemSpec:
    """Validated description of a registry value to create.

    Attributes:
        path: Registry key path.
        name: Value name.
        value_type: Registry value type.
        value: Raw value data, converted on demand by data().
    """

    path: str
    name: str
    value_type: RegistryValueType
    value: str

    def __post_init__(self) -> None:
        """Validate spec data after initialization."""
        if not self.path:
            msg = "Registry path cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_row(cls, row: RegistryRow) -> "RegistryItemSpec":
        """Build a spec from a CSV row.

        Raises:
            ValueError: If the path is empty or the type is invalid.
        """
        return cls(
            path=row.path.strip(),
            name=row.name.strip(),
            value_type=RegistryValueType.parse(row.type),
            value=row.value,
        )

    def data(self) -> str | int | bytes | list[str]:
        """Convert the raw value to the payload for the value type.

        Returns:
            str for String and ExpandString, int for DWord and QWord,
            bytes for Binary and list[str] for MultiString.

        Raises:
            ValueError: If the value cannot be converted.
        """
        if self.value_type in (RegistryValueType.STRING, RegistryValueType.EXPAND_STRING):
            return self.value
        if self.value_type == RegistryValueType.DWORD:
            return _parse_int(self.value, _DWORD_MAX, "DWord")
        if self.value_type == RegistryValueType.QWORD:
            return _parse_int(self.value, _QWORD_MAX, "QWord")
        if self.value_type == RegistryValueType.BINARY:
            return _parse_binary(self.value)
        if not self.value:
            return []
        return self.value.split(MULTI_STRING_SEPARATOR)


def _parse_int(text: str, maximum: int, type_name: str) -> int:
    """Parse a decimal or 0x-prefixed hexadecimal integer within range."""
    cleaned = text.strip()
    try:
        number = int(cleaned, 16) if cleaned.lower().startswith("0x") else int(cleaned)
    except ValueError:
        msg = f"Invalid {type_name} value '{text}'"
        raise ValueError(msg) from None
    if not 0 <= number <= maximum:
        msg = f"{type_name} value {number} is out of range"
        raise ValueError(msg)
    return number


def _parse_binary(text: str) -> bytes:
    """Parse hex bytes written as '01,ff', '01 ff' or '01ff'."""
    cleaned = text.replace(",", "").replace(" ", "").strip()
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        msg = f"Invalid Binary value '{text}'"
        raise ValueError(msg) from None
