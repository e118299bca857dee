#!/usr/bin/env python3
"""
Tests for the RDF output functionality.
"""

import os
import tempfile
import unittest
from unittest.mock import MagicMock
from rdflib import Graph, Literal, RDF

from flygff.models.items import ItemFactory
from flygff.models.namespaces import ModelNamespaces
from flygff.reporting import rdf_report


class RDFReportTests(unittest.TestCase):
    """Test cases for RDF output functionality."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.output_dir = self.temp_dir.name

        factory = ItemFactory()
        self.gene = factory.make_item('Gene')
        self.gene.set_attribute('symbol', 'zen')
        self.mrna = factory.make_item('MRNA')
        self.mrna.set_reference('gene', self.gene)
        self.exon = factory.make_item('Exon')
        self.exon.set_collection('transcripts', [self.mrna])
        self.items = [self.gene, self.mrna, self.exon]
        self.ns = ModelNamespaces()

    def tearDown(self):
        """Clean up after tests."""
        self.temp_dir.cleanup()

    def test_create_rdf_graph(self):
        """Test the triples created for items."""
        graph = rdf_report.create_rdf_graph(self.items)

        gene_uri = self.ns.item_uri(self.gene.identifier)
        mrna_uri = self.ns.item_uri(self.mrna.identifier)
        exon_uri = self.ns.item_uri(self.exon.identifier)

        self.assertIn((gene_uri, RDF.type, self.ns.model.Gene), graph)
        self.assertIn((gene_uri, self.ns.model.symbol, Literal('zen')), graph)
        self.assertIn((mrna_uri, self.ns.model.gene, gene_uri), graph)
        self.assertIn((exon_uri, self.ns.model.transcripts, mrna_uri), graph)
        self.assertEqual(len(graph), 6)

    def test_output_rdf_report(self):
        """Test writing a graph to a file and reading it back."""
        graph = rdf_report.create_rdf_graph(self.items)
        output_file = os.path.join(self.output_dir, 'items.ttl')

        rdf_report.output_rdf_report(graph, output_file, format='ttl')

        self.assertTrue(os.path.exists(output_file))
        parsed = Graph()
        parsed.parse(output_file, format='turtle')
        self.assertEqual(len(parsed), len(graph))

    def test_output_format_mapping(self):
        """Test that format aliases map to rdflib names."""
        mock_graph = MagicMock()

        rdf_report.output_rdf_report(mock_graph, 'out.nt', format='ntriples')

        mock_graph.serialize.assert_called_once_with(destination='out.nt', format='nt')


if __name__ == '__main__':
    unittest.main()
