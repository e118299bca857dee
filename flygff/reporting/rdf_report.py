"""
RDF output for converted items.
"""

import sys
import logging
from rdflib import Graph, Literal, RDF

from flygff.models.namespaces import DEFAULT_NAMESPACE, ModelNamespaces


def create_rdf_graph(items, model_uri=DEFAULT_NAMESPACE, base_uri="http://example.org/flygff/"):
    """
    Create an RDF graph of items.

    Each item becomes a node typed with its model class. Attributes become
    literals, references and collections become links to other item nodes.

    Args:
        items: Iterable of Item objects
        model_uri: Namespace of the target model
        base_uri: Base URI for item nodes

    Returns:
        RDF graph object
    """
    g = Graph()
    ns = ModelNamespaces(model_uri, base_uri)
    ns.bind_to_graph(g)

    count = 0
    for item in items:
        item_uri = ns.item_uri(item.identifier)
        g.add((item_uri, RDF.type, ns.class_uri(item.class_name)))

        for name, value in item.attributes.items():
            g.add((item_uri, ns.model[name], Literal(value)))

        for name, target in item.references.items():
            g.add((item_uri, ns.model[name], ns.item_uri(target)))

        for name, targets in item.collections.items():
            for target in targets:
                g.add((item_uri, ns.model[name], ns.item_uri(target)))
        count += 1

    logging.info(f"Created RDF graph with {len(g)} triples for {count} items")
    return g


def output_rdf_report(graph, output=None, format='turtle'):
    """
    Output an RDF graph in the specified format.

    Args:
        graph: RDF graph object
        output: Output file (default: stdout)
        format: RDF serialization format (default: turtle)

    Returns:
        None
    """
    # Map format names to rdflib serialization format names
    format_map = {
        'turtle': 'turtle',
        'ttl': 'turtle',
        'n3': 'n3',
        'xml': 'xml',
        'rdf': 'xml',
        'rdfxml': 'xml',
        'jsonld': 'json-ld',
        'json-ld': 'json-ld',
        'nt': 'nt',
        'ntriples': 'nt'
    }

    rdf_format = format_map.get(format.lower(), 'turtle')

    if output:
        graph.serialize(destination=output, format=rdf_format)
    else:
        output_str = graph.serialize(format=rdf_format)
        sys.stdout.write(output_str.decode('utf-8') if isinstance(output_str, bytes) else output_str)
