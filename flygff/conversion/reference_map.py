"""
Parent reference names for FlyBase feature classes.
"""

from types import MappingProxyType

# Class name -> name of the field that receives the record's parents.
# Release 4.0 GFF3 is inconsistent with the parents of RNAs, so RNA classes
# point at their gene rather than being collected by it.
PARENT_REFERENCES = MappingProxyType({
    "Enhancer": "gene",
    "Exon": "transcripts",
    "InsertionSite": "genes",
    "Intron": "transcripts",
    "MRNA": "gene",
    "NcRNA": "gene",
    "SnRNA": "gene",
    "SnoRNA": "gene",
    "TRNA": "gene",
    "PointMutation": "genes",
    "PolyASite": "processedTranscripts",
    "SequenceVariant": "genes",
    "FivePrimeUTR": "MRNAs",
    "ThreePrimeUTR": "MRNAs",
    "CDS": "MRNAs",
})


def parent_reference(class_name):
    """Return the parent reference name for a class, or None if it has none."""
    return PARENT_REFERENCES.get(class_name)


def is_collection(reference_name):
    """Plural reference names are collections, the rest single references."""
    return reference_name.endswith('s')


def set_parent_references(feature, class_name, parent_ids):
    """
    Wire a feature to its parents using the reference map.

    Args:
        feature: Item to modify
        class_name: Current (unqualified) class name of the feature
        parent_ids: Item identifiers of the record's parents

    Returns:
        The reference name that was set, or None
    """
    reference_name = parent_reference(class_name)
    if reference_name is None or not parent_ids:
        return None

    if is_collection(reference_name):
        feature.set_collection(reference_name, parent_ids)
    else:
        feature.set_reference(reference_name, parent_ids[0])
    return reference_name
