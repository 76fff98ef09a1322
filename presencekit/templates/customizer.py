"""Customizer catalog.

The customizer describes what a presence can be customized with: the icons a
user may pick, the text fields usable in template lines, and the checkboxes
that can be enabled. The host application owns the catalog; this module only
gives it a shape and reads it.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class CustomizerContext(Protocol):
    """What validation needs from a customizer.

    Anything exposing these two collections can be validated against,
    a full Customizer is not required.
    """

    @property
    def valid_icons(self) -> frozenset[str]: ...

    @property
    def valid_field_names(self) -> frozenset[str]: ...


@dataclass(frozen=True)
class TextField:
    """A field usable as {name} in a template line."""

    name: str
    description: str = ""


@dataclass
class Customizer:
    """Catalog of icons, text fields and checkboxes for one presence."""

    icons: list[str] = field(default_factory=list)
    text_fields: list[TextField] = field(default_factory=list)
    checkboxes: list[str] = field(default_factory=list)

    @property
    def valid_icons(self) -> frozenset[str]:
        return frozenset(self.icons)

    @property
    def valid_field_names(self) -> frozenset[str]:
        return frozenset(f.name for f in self.text_fields)

    def get_field(self, name: str) -> TextField | None:
        """Get a text field by exact (case-sensitive) name."""
        for text_field in self.text_fields:
            if text_field.name == name:
                return text_field
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Customizer":
        """Build a customizer from a JSON-like mapping.

        Text fields may be given as bare names or as
        {"name": ..., "description": ...} objects:
            {
                "icons": ["rocket", "star"],
                "text_fields": ["game", {"name": "platform", "description": "PC"}],
                "checkboxes": ["show_elapsed"]
            }

        Raises:
            ValueError: If a section has the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Customizer data must be an object")

        icons = _string_list(data, "icons")
        checkboxes = _string_list(data, "checkboxes")

        entries = data.get("text_fields", [])
        if not isinstance(entries, list):
            raise ValueError("Customizer 'text_fields' must be a list")

        text_fields: list[TextField] = []
        for entry in entries:
            if isinstance(entry, str):
                text_fields.append(TextField(name=entry))
            elif isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
                text_fields.append(
                    TextField(name=entry["name"], description=str(entry.get("description", "")))
                )
            else:
                raise ValueError(f"Invalid text field entry: {entry!r}")

        return cls(icons=icons, text_fields=text_fields, checkboxes=checkboxes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "icons": list(self.icons),
            "text_fields": [{"name": f.name, "description": f.description} for f in self.text_fields],
            "checkboxes": list(self.checkboxes),
        }


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    values = data.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"Customizer '{key}' must be a list of strings")
    return list(values)


def load_customizer(path: str | Path) -> Customizer:
    """Load a customizer catalog from a JSON file.

    Raises:
        OSError: If the file can't be read.
        ValueError: If the file isn't a valid catalog.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    customizer = Customizer.from_dict(data)
    logger.info(
        "[CUSTOMIZER] Loaded %s: %d icons, %d fields, %d checkboxes",
        path,
        len(customizer.icons),
        len(customizer.text_fields),
        len(customizer.checkboxes),
    )
    return customizer
