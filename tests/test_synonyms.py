#!/usr/bin/env python3
"""
Tests for synonym creation and classification.
"""

import unittest
from flygff.conversion.synonyms import (
    SynonymCollector,
    candidate_synonyms,
    classify_synonym,
    known_names,
)
from flygff.models.items import GFF3Record, ItemFactory


class SynonymTests(unittest.TestCase):
    """Test cases for synonym helpers."""

    def setUp(self):
        """Set up test environment."""
        self.factory = ItemFactory()
        self.data_source = self.factory.make_item('DataSource')
        self.collector = SynonymCollector(self.factory, self.data_source)

    def test_classify_synonym(self):
        """Test identifier and symbol classification."""
        self.assertEqual(classify_synonym('CG3702'), 'identifier')
        self.assertEqual(classify_synonym('CR40182'), 'identifier')
        self.assertEqual(classify_synonym('FBgn0003719'), 'identifier')
        self.assertEqual(classify_synonym('spinster'), 'symbol')
        self.assertEqual(classify_synonym('cg3702'), 'symbol')

    def test_create_synonym(self):
        """Test that synonyms reference their subject and data source."""
        gene = self.factory.make_item('Gene')

        synonym = self.collector.create_synonym(gene, 'symbol', 'spinster')

        self.assertEqual(synonym.class_fragment(), 'Synonym')
        self.assertEqual(synonym.get_attribute('type'), 'symbol')
        self.assertEqual(synonym.get_attribute('value'), 'spinster')
        self.assertEqual(synonym.get_reference('subject'), gene.identifier)
        self.assertEqual(synonym.get_reference('source'), self.data_source.identifier)

    def test_create_synonym_without_data_source(self):
        """Test that the source reference is optional."""
        gene = self.factory.make_item('Gene')

        synonym = SynonymCollector(self.factory).create_synonym(gene, 'identifier', 'CG3702')

        self.assertNotIn('source', synonym.references)

    def test_known_names(self):
        """Test seeding from attributes and existing synonyms."""
        gene = self.factory.make_item('Gene')
        gene.set_attribute('symbol', 'spin')
        gene.set_attribute('organismDbId', 'FBgn0003719')
        existing = [
            self.collector.create_synonym(gene, 'identifier', 'FBti0001'),
            self.factory.make_item('Exon'),
        ]

        self.assertEqual(known_names(gene, existing), {'spin', 'FBgn0003719', 'FBti0001'})

    def test_candidate_order(self):
        """Test that secondary synonyms come before primary ones."""
        record = GFF3Record('2L', 'FlyBase', 'gene', 1, 10, attributes={
            'synonym': ['spinster', 'spin'],
            'synonym_2nd': ['CG3702', 'spinster'],
        })

        self.assertEqual(candidate_synonyms(record), ['CG3702', 'spinster', 'spinster', 'spin'])

    def test_no_candidates(self):
        """Test a record without synonym attributes."""
        record = GFF3Record('2L', 'FlyBase', 'gene', 1, 10)

        self.assertEqual(candidate_synonyms(record), [])


if __name__ == '__main__':
    unittest.main()
