"""
Data models for GFF3 input records and target-model items.
"""

import itertools
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from flygff.models.namespaces import DEFAULT_NAMESPACE, fragment, normalize_namespace


@dataclass
class GFF3Record:
    """Represents one parsed GFF3 line."""
    seqid: str
    source: str
    type: str
    start: int
    end: int
    score: Optional[float] = None
    strand: Optional[str] = None
    phase: Optional[str] = None
    attributes: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def id(self) -> Optional[str]:
        values = self.attributes.get('ID')
        return values[0] if values else None

    @property
    def parents(self) -> List[str]:
        return list(self.attributes.get('Parent', []))

    @property
    def names(self) -> List[str]:
        return list(self.attributes.get('Name', []))

    @property
    def alias(self) -> Optional[str]:
        values = self.attributes.get('Alias')
        return values[0] if values else None

    @property
    def dbxrefs(self) -> Optional[List[str]]:
        values = self.attributes.get('Dbxref')
        return list(values) if values is not None else None


@dataclass(eq=False)
class Item:
    """
    A target-model object: a class name, attributes, single-valued references
    and multi-valued collections of other item identifiers.

    Items compare by identity; two items with the same content are still
    distinct objects in the output.
    """
    identifier: str
    class_name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    references: Dict[str, str] = field(default_factory=dict)
    collections: Dict[str, List[str]] = field(default_factory=dict)

    def class_fragment(self) -> str:
        """Return the class name without its namespace."""
        return fragment(self.class_name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def add_attribute(self, name: str, value: str) -> None:
        """Set an attribute only if it is not already present."""
        self.attributes.setdefault(name, value)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def set_reference(self, name: str, target) -> None:
        """Point a reference at another item or an item identifier."""
        self.references[name] = target.identifier if isinstance(target, Item) else target

    def get_reference(self, name: str) -> Optional[str]:
        return self.references.get(name)

    def set_collection(self, name: str, targets) -> None:
        self.collections[name] = [t.identifier if isinstance(t, Item) else t for t in targets]


class ItemFactory:
    """Creates items with sequential identifiers in one target-model namespace."""

    def __init__(self, namespace=DEFAULT_NAMESPACE, prefix="0"):
        self.namespace = normalize_namespace(namespace)
        self.prefix = prefix
        self._counter = itertools.count(1)

    def qualify(self, class_name):
        """Return the namespaced form of a bare class name."""
        return f"{self.namespace}{fragment(class_name)}"

    def make_item(self, class_name):
        identifier = f"{self.prefix}_{next(self._counter)}"
        return Item(identifier=identifier, class_name=self.qualify(class_name))
