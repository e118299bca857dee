"""
Drives a FlyBase GFF3 conversion run: records in, ordered items out.
"""

import logging
import time

from flygff.conversion.finalizer import DeferredFinalizer
from flygff.conversion.record_handler import RecordProcessor
from flygff.conversion.state import ConversionState
from flygff.models.items import ItemFactory
from flygff.models.namespaces import DEFAULT_NAMESPACE

DEFAULT_TAXON_ID = '7227'
DEFAULT_DATA_SOURCE = 'FlyBase'


class GFF3Converter:
    """
    Converts a stream of GFF3 records into target-model items.

    Call process_record() for every record in file order, then finalize()
    once. convert() does both.
    """

    def __init__(self, namespace=DEFAULT_NAMESPACE, taxon_id=DEFAULT_TAXON_ID, data_source=DEFAULT_DATA_SOURCE):
        self.item_factory = ItemFactory(namespace)
        self.state = ConversionState(self.item_factory)

        self.organism = self.item_factory.make_item('Organism')
        self.organism.set_attribute('taxonId', taxon_id)
        self.state.organisms.register(self.organism)
        self.data_source = self.item_factory.make_item('DataSource')
        self.data_source.set_attribute('name', data_source)

        self._identifiers = {}
        self.processor = RecordProcessor(
            self.item_factory,
            self.state,
            organism=self.organism,
            data_source=self.data_source,
            resolve_parent=self.resolve_parent,
        )
        self.finalizer = DeferredFinalizer(self.state, self.item_factory)

    def resolve_parent(self, parent_id):
        """Return the item identifier for a record ID, or the ID itself if unseen."""
        return self._identifiers.get(parent_id, parent_id)

    def header_items(self):
        return [self.organism, self.data_source]

    def process_record(self, record):
        """Convert one record and return the items to emit now."""
        feature = self.processor.create_feature(record)
        if record.id is not None:
            self._identifiers[record.id] = feature.identifier

        primary, extra = self.processor.process(record, feature)
        items = [primary] if primary is not None else []
        items.extend(extra)
        return items

    def finalize(self):
        return self.finalizer.finalize()

    def clear_final_items(self):
        self.finalizer.clear_final_items()

    def convert(self, records):
        """Yield every item for a record stream, finishing with the final items."""
        start_time = time.time()
        count = 0

        yield from self.header_items()
        for record in records:
            yield from self.process_record(record)
            count += 1

        logging.info(f"Processed {count} records, {len(self.state.final_items)} genes deferred")
        yield from self.finalize()

        elapsed = time.time() - start_time
        logging.info(f"Finished conversion in {elapsed:.2f}s")


def convert_records(records, **kwargs):
    """Convert records with a new converter and return the list of items."""
    return list(GFF3Converter(**kwargs).convert(records))
