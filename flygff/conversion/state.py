"""
State shared between record processing and the final pass of one conversion run.
"""

from flygff.conversion.organisms import OrganismRegistry


class ConversionState:
    """
    Holds everything the final pass needs from the record stream.

    Attributes:
        final_items: Gene items held back until every record has been seen
        pseudogene_ids: IDs of the parents of Pseudogene records
        organisms: Registry of organisms other than the one being loaded
    """

    def __init__(self, item_factory):
        self.final_items = []
        self.pseudogene_ids = set()
        self.organisms = OrganismRegistry(item_factory)
        self._deferred = set()

    def defer(self, item):
        """Add an item to the final items, once."""
        if item.identifier in self._deferred:
            return False
        self._deferred.add(item.identifier)
        self.final_items.append(item)
        return True

    def take_final_items(self):
        """Return the final items and empty the buffer."""
        items = self.final_items
        self.clear_final_items()
        return items

    def clear_final_items(self):
        self.final_items = []
        self._deferred = set()
