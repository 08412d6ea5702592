"""Domain entity — pure Python business object for an owner's product."""

from dataclasses import dataclass


@dataclass
class Product:
    """Core domain entity. At most one exists per owner."""

    owner: str
    name: str
    description: str

    def update(self, name: str | None = None, description: str | None = None) -> None:
        """Merge the provided fields; fields left as None keep their value."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
