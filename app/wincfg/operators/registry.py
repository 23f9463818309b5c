"""Registry value operator implementation.

Creates or overwrites registry values described by CSV rows, and deletes
them in remove mode. Paths use PowerShell drive syntax such as
'HKLM:\\SOFTWARE\\Contoso'.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from wincfg.models.category import ItemCategory
from wincfg.models.operation import OperationOutcome
from wincfg.models.registry import RegistryItemSpec, RegistryValueType
from wincfg.operators.base import Operator

try:  # Windows-only standard library module
    import winreg
except ImportError:  # pragma: no cover - not available on Linux runners
    winreg = None  # type: ignore[assignment]

if TYPE_CHECKING:
    from wincfg.models.registry import RegistryRow

logger = logging.getLogger(__name__)

_HIVE_ALIASES: dict[str, str] = {
    "HKLM": "HKEY_LOCAL_MACHINE",
    "HKEY_LOCAL_MACHINE": "HKEY_LOCAL_MACHINE",
    "HKCU": "HKEY_CURRENT_USER",
    "HKEY_CURRENT_USER": "HKEY_CURRENT_USER",
    "HKCR": "HKEY_CLASSES_ROOT",
    "HKEY_CLASSES_ROOT": "HKEY_CLASSES_ROOT",
    "HKU": "HKEY_USERS",
    "HKEY_USERS": "HKEY_USERS",
    "HKCC": "HKEY_CURRENT_CONFIG",
    "HKEY_CURRENT_CONFIG": "HKEY_CURRENT_CONFIG",
}

_PROVIDER_PREFIX = "registry::"


def split_registry_path(path: str) -> tuple[str, str]:
    """Split a registry path into its canonical hive name and subkey.

    Accepts 'HKLM:\\Key', 'HKLM\\Key', 'HKEY_LOCAL_MACHINE\\Key' and the
    'Registry::' provider prefix. Forward slashes are treated as
    backslashes.

    Args:
        path: Registry key path.

    Returns:
        Tuple of (hive name, subkey), e.g. ('HKEY_LOCAL_MACHINE', 'SOFTWARE\\X').

    Raises:
        ValueError: If the hive is missing or unsupported.
    """
    cleaned = path.strip().replace("/", "\\")
    if cleaned.lower().startswith(_PROVIDER_PREFIX):
        cleaned = cleaned[len(_PROVIDER_PREFIX) :]

    hive_part, _, subkey = cleaned.partition("\\")
    hive_name = _HIVE_ALIASES.get(hive_part.rstrip(":").upper())
    if hive_name is None:
        msg = f"Unsupported registry hive in path '{path}'"
        raise ValueError(msg)
    return hive_name, subkey.strip("\\")


class RegistryAccessor(Protocol):
    """Minimal registry interface used by RegistryOperator."""

    def set_value(
        self,
        hive: str,
        subkey: str,
        name: str,
        value_type: RegistryValueType,
        data: str | int | bytes | list[str],
    ) -> None:  # pragma: no cover - protocol
        """Create missing keys, then create or overwrite the value."""
        ...

    def delete_value(self, hive: str, subkey: str, name: str) -> bool:  # pragma: no cover
        """Delete a value; return False if the key or value is absent."""
        ...


class WindowsRegistryAccessor:
    """Registry accessor backed by winreg."""

    def __init__(self) -> None:
        if winreg is None:
            msg = "winreg not available on this platform"
            raise RuntimeError(msg)

    @staticmethod
    def _access() -> int:
        # 64-bit view so a 32-bit interpreter is not redirected to WOW6432Node
        return winreg.KEY_SET_VALUE | winreg.KEY_WOW64_64KEY

    @staticmethod
    def _reg_type(value_type: RegistryValueType) -> int:
        return {
            RegistryValueType.STRING: winreg.REG_SZ,
            RegistryValueType.EXPAND_STRING: winreg.REG_EXPAND_SZ,
            RegistryValueType.BINARY: winreg.REG_BINARY,
            RegistryValueType.DWORD: winreg.REG_DWORD,
            RegistryValueType.QWORD: winreg.REG_QWORD,
            RegistryValueType.MULTI_STRING: winreg.REG_MULTI_SZ,
        }[value_type]

    def set_value(
        self,
        hive: str,
        subkey: str,
        name: str,
        value_type: RegistryValueType,
        data: str | int | bytes | list[str],
    ) -> None:
        # CreateKeyEx opens the key if present and creates every missing level
        with winreg.CreateKeyEx(getattr(winreg, hive), subkey, 0, self._access()) as key:
            winreg.SetValueEx(key, name, 0, self._reg_type(value_type), data)

    def delete_value(self, hive: str, subkey: str, name: str) -> bool:
        try:
            with winreg.OpenKey(getattr(winreg, hive), subkey, 0, self._access()) as key:
                winreg.DeleteValue(key, name)
        except FileNotFoundError:
            return False
        return True


class RegistryOperator(Operator):
    """Operator for registry values.

    Items are RegistryRow objects. Each row is validated when it is
    processed, so an invalid type or value fails that row only.
    """

    def __init__(self, dry_run: bool = False, accessor: RegistryAccessor | None = None) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only simulate actions without executing them.
            accessor: Registry backend. Defaults to winreg on first use.
        """
        super().__init__(dry_run)
        self._accessor = accessor

    @property
    def category(self) -> ItemCategory:
        """Return REGISTRY as the item category."""
        return ItemCategory.REGISTRY

    @property
    def accessor(self) -> RegistryAccessor:
        """Return the registry backend, creating the winreg one if needed."""
        if self._accessor is None:
            self._accessor = WindowsRegistryAccessor()
        return self._accessor

    def add(self, item: RegistryRow) -> OperationOutcome:
        """Create or overwrite the value described by a row.

        Args:
            item: Registry row (path, name, type, value).

        Returns:
            OperationOutcome for this value.

        Raises:
            ValueError: If the type, value or hive is invalid.
        """
        spec = RegistryItemSpec.from_row(item)
        data = spec.data()
        hive, subkey = split_registry_path(spec.path)

        if self.dry_run:
            logger.info(
                "Dry-run: Would set %s\\%s (%s)", spec.path, spec.name, spec.value_type.value
            )
            return OperationOutcome.ok("Dry-run: would set value")

        logger.info("Setting registry value %s\\%s", spec.path, spec.name)
        self.accessor.set_value(hive, subkey, spec.name, spec.value_type, data)
        return OperationOutcome.ok(f"Set {spec.value_type.value} value")

    def remove(self, item: RegistryRow) -> OperationOutcome:
        """Delete the value named by a row; type and value are ignored.

        Args:
            item: Registry row (path, name, type, value).

        Returns:
            OperationOutcome for this value; a no-op outcome when the key
            or value does not exist.
        """
        hive, subkey = split_registry_path(item.path)
        name = item.name.strip()

        if self.dry_run:
            logger.info("Dry-run: Would delete %s\\%s", item.path, name)
            return OperationOutcome.ok("Dry-run: would delete value")

        logger.info("Deleting registry value %s\\%s", item.path, name)
        if not self.accessor.delete_value(hive, subkey, name):
            return OperationOutcome.noop("Value not present")
        return OperationOutcome.ok("Deleted value")
