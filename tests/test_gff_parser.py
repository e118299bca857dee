#!/usr/bin/env python3
"""
Tests for the GFF parser functionality.
"""

import os
import tempfile
import unittest
from flygff.parsers import gff_parser


class GFFParserTests(unittest.TestCase):
    """Test cases for GFF parser functionality."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.output_dir = self.temp_dir.name

        # Create test GFF file
        self.gff_file = os.path.join(self.output_dir, "test.gff3")

        with open(self.gff_file, 'w') as f:
            f.write("##gff-version 3\n")
            f.write("##sequence-region 2L 1 1000\n")
            f.write("2L\tFlyBase\tgene\t1\t500\t.\t+\t.\t"
                    "ID=FBgn0003719;Name=spin;synonym=spinster,CG3702;Dbxref=FlyBase:FBgn0003719,GB:AE003635\n")
            f.write("2L\tFlyBase\tmRNA\t1\t500\t.\t+\t.\tID=FBtr0001;Parent=FBgn0003719;Alias=CG3702-RA\n")
            f.write("2L\tFlyBase\texon\t1\t100\t.\t+\t.\tParent=FBtr0001,FBtr0002\n")
            f.write("2L\tFlyBase\tprotein\t1\t100\t12.5\t+\t0\tID=FBpp0001;Name=spin%2CPA\n")

    def tearDown(self):
        """Clean up after tests."""
        self.temp_dir.cleanup()

    def test_parse_gff3(self):
        """Test parsing a GFF3 file."""
        records = gff_parser.parse_gff3(self.gff_file)

        self.assertEqual(len(records), 4)

        gene = records[0]
        self.assertEqual(gene.type, 'gene')
        self.assertEqual(gene.seqid, '2L')
        self.assertEqual(gene.start, 1)
        self.assertEqual(gene.end, 500)
        self.assertEqual(gene.strand, '+')
        self.assertIsNone(gene.score)
        self.assertEqual(gene.id, 'FBgn0003719')
        self.assertEqual(gene.attributes['synonym'], ['spinster', 'CG3702'])
        self.assertEqual(gene.dbxrefs, ['FlyBase:FBgn0003719', 'GB:AE003635'])

        self.assertEqual(records[1].alias, 'CG3702-RA')
        self.assertEqual(records[1].parents, ['FBgn0003719'])

        exon = records[2]
        self.assertIsNone(exon.id)
        self.assertEqual(exon.parents, ['FBtr0001', 'FBtr0002'])

    def test_percent_decoding_and_score(self):
        """Test that escaped characters are decoded after splitting values."""
        protein = gff_parser.parse_gff3(self.gff_file)[3]

        self.assertEqual(protein.names, ['spin,PA'])
        self.assertEqual(protein.score, 12.5)
        self.assertEqual(protein.phase, '0')

    def test_parse_gff3_with_invalid_file(self):
        """Test parsing an invalid GFF3 file."""
        invalid_gff = os.path.join(self.output_dir, "invalid.gff3")

        with open(invalid_gff, 'w') as f:
            f.write("This is not a valid GFF3 file\n")
            f.write("2L\tFlyBase\tgene\tone\t500\t.\t+\t.\tID=g1\n")

        # This should not raise an exception, but should return no records
        records = gff_parser.parse_gff3(invalid_gff)

        self.assertEqual(records, [])

    def test_stops_at_fasta(self):
        """Test that the FASTA section is not read as features."""
        lines = [
            "##gff-version 3\n",
            "2L\tFlyBase\tgene\t1\t10\t.\t+\t.\tID=g1\n",
            "##FASTA\n",
            ">2L\n",
            "ACGT\tACGT\tACGT\tACGT\tACGT\tACGT\tACGT\tACGT\tACGT\n",
        ]

        records = list(gff_parser.iter_gff3_records(lines))

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].id, 'g1')


if __name__ == '__main__':
    unittest.main()
