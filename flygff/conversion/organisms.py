"""
Cache of Organism items for organisms other than the one being loaded.
"""

import logging


class OrganismRegistry:
    """Creates at most one Organism item per taxon id."""

    def __init__(self, item_factory):
        self.item_factory = item_factory
        self._organisms = {}
        self._registered = {}

    def register(self, organism):
        """
        Make an Organism item created elsewhere available by its taxon id.

        Registered organisms are returned by get_or_create() but not by
        items(), since their owner emits them.
        """
        self._registered[organism.get_attribute('taxonId')] = organism

    def get_or_create(self, taxon_id):
        organism = self._registered.get(taxon_id) or self._organisms.get(taxon_id)
        if organism is None:
            organism = self.item_factory.make_item('Organism')
            organism.set_attribute('taxonId', taxon_id)
            self._organisms[taxon_id] = organism
            logging.debug(f"Created organism item {organism.identifier} for taxon {taxon_id}")
        return organism

    def items(self):
        """Return every organism created so far, in creation order."""
        return list(self._organisms.values())

    def __contains__(self, taxon_id):
        return taxon_id in self._organisms or taxon_id in self._registered

    def __len__(self):
        return len(self._organisms)
