"""Hand-maintained override tables applied during classification."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OverrideTables(BaseModel):
    """Per-family override data loaded from YAML.

    Every table is keyed by family name, then by property name. Families
    absent from a table have no overrides of that kind.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    ignore: dict[str, frozenset[str]] = Field(default_factory=dict)
    enum_overrides: dict[str, frozenset[str]] = Field(default_factory=dict)
    lifetime_overrides: dict[str, frozenset[str]] = Field(default_factory=dict)
    value_extensions: dict[str, dict[str, str]] = Field(default_factory=dict)
    lifetime_value_kinds: tuple[str, ...] = ("<image>", "<image-1D>")

    def is_ignored(self, family: str, name: str) -> bool:
        return name in self.ignore.get(family, frozenset())

    def forces_enum(self, family: str, name: str) -> bool:
        return name in self.enum_overrides.get(family, frozenset())

    def forces_lifetime(self, family: str, name: str) -> bool:
        return name in self.lifetime_overrides.get(family, frozenset())

    def value_extension(self, family: str, name: str) -> str:
        return self.value_extensions.get(family, {}).get(name, "")
