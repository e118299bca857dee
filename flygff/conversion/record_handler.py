"""
FlyBase-specific handling of GFF3 records.

Each record is turned into a feature item and zero or more extra items
(synonyms, the target side of a syntenic region). Genes are held back in the
conversion state and only emitted by the final pass, because duplicate symbols
and pseudogenes can only be resolved once the whole file has been read.
"""

import logging

from flygff.conversion.reference_map import set_parent_references
from flygff.conversion.state import ConversionState
from flygff.conversion.synonyms import (
    SynonymCollector,
    candidate_synonyms,
    classify_synonym,
    known_names,
)
from flygff.conversion.syntenic import SyntenicRegionBuilder
from flygff.models.namespaces import class_name_for_type

# Class renames applied before anything else looks at the class name
CLASS_CORRECTIONS = {
    'RegulatoryRegion': 'TFmodule',
    # from release 4.3 CDS records became proteins
    'Protein': 'Translation',
}

# Record IDs starting with this are FlyBase accessions, not display identifiers
ORGANISM_DB_PREFIX = 'FB'

# FlyBase transposable element insertion accessions
TRANSPOSON_PREFIX = 'FBti'

# Classes identified by their alias (eg. "CG3702-PA") rather than their
# FlyBase ID (eg. "FBpp0077166"), as used by Inparanoid
ALIAS_IDENTIFIER_CLASSES = ('Translation', 'MRNA')


def parse_flybase_ids(dbxrefs, prefix):
    """
    Return the FlyBase accessions with the given prefix from a list of dbxrefs.

    Args:
        dbxrefs: List of "database:accession" strings, or None
        prefix: Accession prefix, eg. "FBgn"

    Returns:
        List of accessions (without the "FlyBase:" part), in input order
    """
    accessions = []
    for dbxref in dbxrefs or []:
        if dbxref.startswith(f"FlyBase:{prefix}"):
            accessions.append(dbxref.split(':', 1)[1])
    return accessions


class RecordProcessor:
    """Applies the FlyBase conversion rules to one record at a time."""

    def __init__(self, item_factory, state=None, organism=None, data_source=None, resolve_parent=None):
        self.item_factory = item_factory
        self.state = state if state is not None else ConversionState(item_factory)
        self.organism = organism
        self.synonyms = SynonymCollector(item_factory, data_source)
        self.syntenic_regions = SyntenicRegionBuilder(item_factory, self.state.organisms)
        self.resolve_parent = resolve_parent

    def create_feature(self, record):
        """Create the initial feature item for a record."""
        feature = self.item_factory.make_item(class_name_for_type(record.type))
        if record.id is not None:
            feature.set_attribute('identifier', record.id)
        if record.names:
            feature.set_attribute('symbol', record.names[0])
        if self.organism is not None:
            feature.set_reference('organism', self.organism)
        return feature

    def _set_class(self, feature, class_name):
        logging.debug(f"Reclassifying {feature.identifier} from {feature.class_fragment()} to {class_name}")
        feature.class_name = self.item_factory.qualify(class_name)
        return class_name

    def process(self, record, feature=None):
        """
        Convert one record.

        Args:
            record: GFF3Record to convert
            feature: Feature item already created for the record (optional)

        Returns:
            Tuple of (feature item or None if it was deferred, list of extra items)

        Raises:
            UnsupportedOrganismError: for a syntenic region in an unknown organism
        """
        if feature is None:
            feature = self.create_feature(record)
        items = []

        feature.add_attribute('curated', 'true')

        class_name = feature.class_fragment()
        if class_name in CLASS_CORRECTIONS:
            class_name = self._set_class(feature, CLASS_CORRECTIONS[class_name])

        if record.id and record.id.startswith(ORGANISM_DB_PREFIX):
            feature.set_attribute('organismDbId', record.id)
            feature.remove_attribute('identifier')

        if class_name in ALIAS_IDENTIFIER_CLASSES and record.alias is not None:
            feature.set_attribute('identifier', record.alias)

        # FlyBase models a pseudogene as a gene with a pseudogene child. The
        # child becomes a Transcript here and the parent gene is reclassified
        # in the final pass.
        if class_name == 'Pseudogene':
            feature.remove_attribute('symbol')
            class_name = self._set_class(feature, 'Transcript')
            self.state.pseudogene_ids.update(record.parents)

        if class_name == 'TransposableElement':
            for organism_db_id in parse_flybase_ids(record.dbxrefs, TRANSPOSON_PREFIX):
                if not feature.has_attribute('organismDbId'):
                    feature.set_attribute('organismDbId', organism_db_id)
                items.append(self.synonyms.create_synonym(feature, 'identifier', organism_db_id))

        names = known_names(feature, items)
        candidates = candidate_synonyms(record)

        if class_name == 'SyntenicRegion':
            items.append(self.syntenic_regions.build(feature, record))

        for synonym in candidates:
            if synonym in names:
                continue
            items.append(self.synonyms.create_synonym(feature, classify_synonym(synonym), synonym))
            names.add(synonym)

        if class_name == 'Gene':
            self.state.defer(feature)
            return None, items

        parent_ids = record.parents
        if self.resolve_parent is not None:
            parent_ids = [self.resolve_parent(parent_id) for parent_id in parent_ids]
        set_parent_references(feature, class_name, parent_ids)
        return feature, items
