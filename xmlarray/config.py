"""Conversion configuration shared by both directions."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConversionConfig(BaseModel):
    """Options for a conversion pass.

    Field names accept both the camelCase option names (``attributesKey``)
    and their snake_case equivalents (``attributes_key``). Unknown options
    are kept as extra fields and otherwise ignored.

    Attributes:
        version: XML version recorded on produced documents
        encoding: Encoding recorded on produced documents
        attributes_key: Reserved key holding an element's attributes
        cdata_key: Reserved key holding CDATA section text
        value_key: Reserved key holding element text next to attributes
        root_node_name: Explicit root tag name (serialization only)
        use_namespaces: Collect namespace declarations (deserialization only)
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    version: str = "1.0"
    encoding: str = "UTF-8"
    attributes_key: str = Field(default="@attributes", alias="attributesKey")
    cdata_key: str = Field(default="@cdata", alias="cdataKey")
    value_key: str = Field(default="@value", alias="valueKey")
    root_node_name: str | None = Field(default=None, alias="rootNodeName")
    use_namespaces: bool = Field(default=False, alias="useNamespaces")


DEFAULT_CONFIG = ConversionConfig()

_ALIASES = {
    field_info.alias: field_name
    for field_name, field_info in ConversionConfig.model_fields.items()
    if field_info.alias
}


def _normalize(options: Mapping[str, Any]) -> dict[str, Any]:
    """Key options by field name so camelCase and snake_case merge cleanly."""
    return {_ALIASES.get(key, key): value for key, value in options.items()}


def resolve_config(
    overrides: ConversionConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> ConversionConfig:
    """Merge caller options over the defaults.

    Args:
        overrides: An existing config, a mapping of options, or None
        **options: Extra options, applied on top of ``overrides``

    Returns:
        A frozen ConversionConfig

    Raises:
        TypeError: If overrides is not a config, a mapping or None
        pydantic.ValidationError: If an option has the wrong type

    Example:
        >>> resolve_config({"valueKey": "#text"}).value_key
        '#text'
    """
    if overrides is None:
        merged: dict[str, Any] = {}
    elif isinstance(overrides, ConversionConfig):
        if not options:
            return overrides
        merged = overrides.model_dump()
    elif isinstance(overrides, Mapping):
        merged = _normalize(overrides)
    else:
        raise TypeError(
            f"Expected a ConversionConfig or a mapping of options, got {type(overrides).__name__}"
        )

    merged.update(_normalize(options))
    if not merged:
        return DEFAULT_CONFIG
    return ConversionConfig(**merged)


@dataclass(frozen=True)
class ReservedKeys:
    """The reserved keys of a NodeTree, resolved once per conversion."""
    attributes: str
    value: str
    cdata: str

    @classmethod
    def from_config(cls, config: ConversionConfig) -> "ReservedKeys":
        return cls(
            attributes=config.attributes_key,
            value=config.value_key,
            cdata=config.cdata_key,
        )

    def __contains__(self, key: object) -> bool:
        return key in (self.attributes, self.value, self.cdata)
