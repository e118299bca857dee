#!/usr/bin/env python3
"""
flygff - FlyBase GFF3 conversion

Main command-line interface for the flygff tool.
"""

import argparse
import sys
import logging

from flygff.conversion.converter import GFF3Converter, DEFAULT_TAXON_ID, DEFAULT_DATA_SOURCE
from flygff.conversion.syntenic import UnsupportedOrganismError
from flygff.models.namespaces import DEFAULT_NAMESPACE
from flygff.parsers.gff_parser import parse_gff3
from flygff.reporting.rdf_report import create_rdf_graph, output_rdf_report
from flygff.reporting.text_report import write_items, generate_conversion_report
from flygff.utils.logging import setup_logging


def build_parser():
    parser = argparse.ArgumentParser(description='Convert a FlyBase GFF3 file into target-model items.')
    parser.add_argument('gff_file', help='Input FlyBase GFF3 file')

    # Output options
    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument('--output', '-o', help='Output file (default: stdout)')
    output_group.add_argument('--format', '-f', choices=['text', 'rdf'], default='rdf',
                              help='Output format: rdf (default) or text')
    output_group.add_argument('--rdf-format', choices=['turtle', 'n3', 'xml', 'json-ld', 'ntriples'], default='turtle',
                              help='RDF serialization format (default: turtle)')
    output_group.add_argument('--base-uri', default='http://example.org/flygff/',
                              help='Base URI for RDF item nodes (default: http://example.org/flygff/)')
    output_group.add_argument('--summary', help='Write a conversion summary to this file')

    # Conversion options
    conversion_group = parser.add_argument_group('Conversion Options')
    conversion_group.add_argument('--namespace', default=DEFAULT_NAMESPACE,
                                  help=f'Target model namespace (default: {DEFAULT_NAMESPACE})')
    conversion_group.add_argument('--taxon-id', default=DEFAULT_TAXON_ID,
                                  help=f'Taxon id of the organism being loaded (default: {DEFAULT_TAXON_ID})')
    conversion_group.add_argument('--data-source', default=DEFAULT_DATA_SOURCE,
                                  help=f'Name of the data source for synonyms (default: {DEFAULT_DATA_SOURCE})')

    # Debug and logging options
    debug_group = parser.add_argument_group('Debug Options')
    debug_group.add_argument('--debug', action='store_true', help='Enable debug output')
    debug_group.add_argument('--verbose', action='store_true', help='Enable verbose output without full debug')
    debug_group.add_argument('--quiet', action='store_true', help='Only log warnings and errors')
    debug_group.add_argument('--log-file', help='Write log to this file')

    return parser


def main(args=None):
    """Main function to run a conversion."""
    args = build_parser().parse_args(args)

    setup_logging(debug=args.debug, log_file=args.log_file, verbose=args.verbose, quiet=args.quiet)

    try:
        records = parse_gff3(args.gff_file)

        converter = GFF3Converter(namespace=args.namespace, taxon_id=args.taxon_id,
                                  data_source=args.data_source)
        items = list(converter.convert(records))

        if args.format == 'rdf':
            graph = create_rdf_graph(items, model_uri=args.namespace, base_uri=args.base_uri)
            output_rdf_report(graph, args.output, format=args.rdf_format)
        else:
            write_items(items, args.output)

        if args.summary:
            generate_conversion_report(items, args.summary)
            logging.info(f"Conversion summary written to {args.summary}")

        logging.info(f"Wrote {len(items)} items")
        return 0

    except UnsupportedOrganismError as e:
        logging.error(f"Conversion aborted: {e}")
        return 1
    except OSError as e:
        logging.error(f"Error reading or writing files: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
