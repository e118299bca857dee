"""
Final pass over the genes held back during record processing.
"""

import logging


def find_duplicates(items, attribute):
    """
    Find items sharing a value of an attribute.

    Every item involved in a collision is returned, not only the later ones.
    Items without the attribute are ignored.

    Args:
        items: Items to check, in input order
        attribute: Attribute name

    Returns:
        List of colliding items in the order they were first seen
    """
    first_by_value = {}
    duplicates = {}
    for item in items:
        value = item.get_attribute(attribute)
        if value is None:
            continue
        other = first_by_value.setdefault(value, item)
        if other is not item:
            duplicates.setdefault(other.identifier, other)
            duplicates.setdefault(item.identifier, item)
    return list(duplicates.values())


def rename_duplicates(items, attribute):
    """Append a numbered '-duplicate-<attribute>-<n>' suffix to each item's value."""
    for count, item in enumerate(items, 1):
        new_value = f"{item.get_attribute(attribute)}-duplicate-{attribute}-{count}"
        logging.debug(f"Renaming duplicate {attribute} of {item.identifier} to {new_value}")
        item.set_attribute(attribute, new_value)


class DeferredFinalizer:
    """Resolves duplicate names and pseudogenes among the deferred genes."""

    def __init__(self, state, item_factory):
        self.state = state
        self.item_factory = item_factory

    def finalize(self):
        """
        Return the deferred items, fixed up, followed by the other organisms.

        Genes sharing a symbol or organismDbId get a numbered suffix on that
        attribute, then genes whose organismDbId is the parent of a Pseudogene
        record become Pseudogenes. The buffer of deferred items is emptied.

        Returns:
            List of items
        """
        genes = self.state.take_final_items()

        duplicated_symbols = find_duplicates(genes, 'symbol')
        duplicated_organism_db_ids = find_duplicates(genes, 'organismDbId')
        rename_duplicates(duplicated_symbols, 'symbol')
        rename_duplicates(duplicated_organism_db_ids, 'organismDbId')

        # Uses organismDbId after renaming, so a renamed duplicate no longer
        # matches its pseudogene
        pseudogenes = 0
        for gene in genes:
            organism_db_id = gene.get_attribute('organismDbId')
            if organism_db_id is not None and organism_db_id in self.state.pseudogene_ids:
                gene.class_name = self.item_factory.qualify('Pseudogene')
                pseudogenes += 1

        logging.info(
            f"Finalized {len(genes)} genes: {len(duplicated_symbols)} duplicate symbols, "
            f"{len(duplicated_organism_db_ids)} duplicate organismDbIds, {pseudogenes} pseudogenes"
        )

        return genes + self.state.organisms.items()

    def clear_final_items(self):
        self.state.clear_final_items()
