"""
Synonym creation and classification.
"""

# Candidate names starting with these are identifiers, anything else a symbol
IDENTIFIER_PREFIXES = ('CG', 'CR', 'FB')

# Attributes whose values seed the set of names a feature already has
NAME_ATTRIBUTES = ('identifier', 'symbol', 'organismDbId')

# Record attributes holding candidate synonyms, in the order they are considered
SYNONYM_ATTRIBUTES = ('synonym_2nd', 'synonym')


def classify_synonym(value):
    """Return 'identifier' for gene/accession style names, 'symbol' otherwise."""
    return 'identifier' if value.startswith(IDENTIFIER_PREFIXES) else 'symbol'


def known_names(feature, items=()):
    """
    Collect the names a feature is already known by.

    Args:
        feature: The feature item
        items: Other items produced for the same record; the values of any
            Synonym items among them are included

    Returns:
        Set of name strings
    """
    names = set()
    for attribute in NAME_ATTRIBUTES:
        if feature.has_attribute(attribute):
            names.add(feature.get_attribute(attribute))
    for item in items:
        if item.class_fragment() == 'Synonym':
            names.add(item.get_attribute('value'))
    return names


def candidate_synonyms(record):
    """Return the record's synonym strings, secondary synonyms first."""
    combined = []
    for attribute in SYNONYM_ATTRIBUTES:
        combined.extend(record.attributes.get(attribute, []))
    return combined


class SynonymCollector:
    """Builds Synonym items attributed to the run's data source."""

    def __init__(self, item_factory, data_source=None):
        self.item_factory = item_factory
        self.data_source = data_source

    def create_synonym(self, subject, synonym_type, value):
        synonym = self.item_factory.make_item('Synonym')
        synonym.set_attribute('type', synonym_type)
        synonym.set_attribute('value', value)
        synonym.set_reference('subject', subject)
        if self.data_source is not None:
            synonym.set_reference('source', self.data_source)
        return synonym
