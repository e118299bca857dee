"""
Paired SyntenicRegion items for FlyBase synteny records.
"""

import logging

# FlyBase species abbreviations accepted in the to_species attribute
ORGANISM_TAXON_IDS = {
    'dmel': '7227',
    'dpse': '7237',
}


class UnsupportedOrganismError(ValueError):
    """Raised when a synteny record names an organism we have no taxon id for."""


def taxon_id_for(abbreviation):
    try:
        return ORGANISM_TAXON_IDS[abbreviation]
    except KeyError:
        raise UnsupportedOrganismError(f"unknown organism abbreviation: {abbreviation}") from None


class SyntenicRegionBuilder:
    """Creates the target-organism side of a syntenic region pair."""

    def __init__(self, item_factory, organisms):
        self.item_factory = item_factory
        self.organisms = organisms

    def build(self, feature, record):
        """
        Create the SyntenicRegion in the target organism and link both regions.

        Both regions share the record's ID as identifier; they differ only in
        organism.

        Args:
            feature: The source SyntenicRegion item
            record: The GFF3Record it was created from

        Returns:
            The new target SyntenicRegion item

        Raises:
            UnsupportedOrganismError: if to_species is missing or not recognised
        """
        species = record.attributes.get('to_species')
        if not species:
            logging.warning(f"Syntenic region {record.id} has no to_species attribute")
            raise UnsupportedOrganismError(f"no to_species given for syntenic region {record.id}")

        target_organism = self.organisms.get_or_create(taxon_id_for(species[0]))
        feature.set_reference('targetOrganism', target_organism)

        target_region = self.item_factory.make_item('SyntenicRegion')
        target_region.set_reference('organism', target_organism)
        if record.id is not None:
            target_region.set_attribute('identifier', record.id)

        feature.set_reference('targetSyntenicRegion', target_region)
        target_region.set_reference('targetSyntenicRegion', feature)

        return target_region
