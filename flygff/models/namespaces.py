"""
Namespace handling for target-model class names and RDF output.
"""

from rdflib import Namespace, RDF, RDFS, XSD

DEFAULT_NAMESPACE = "http://www.flymine.org/model/genomic#"


def normalize_namespace(uri):
    """Return the namespace with a trailing '#' unless it already ends in '#' or '/'."""
    return uri if uri.endswith(('#', '/')) else f"{uri}#"


def fragment(uri):
    """Return the part of a namespaced name after the last '#' or '/'."""
    for separator in ('#', '/'):
        if separator in uri:
            uri = uri.rsplit(separator, 1)[1]
    return uri


def class_name_for_type(gff_type):
    """
    Map a GFF3 type column value to a model class name.

    Words separated by underscores are joined in CamelCase and the first
    character of every word is upper-cased, so 'mRNA' becomes 'MRNA',
    'five_prime_UTR' becomes 'FivePrimeUTR' and 'polyA_site' becomes 'PolyASite'.
    """
    return ''.join(part[:1].upper() + part[1:] for part in gff_type.split('_') if part)


class ModelNamespaces:
    """Provides the namespaces used when items are written as RDF."""

    def __init__(self, model_uri=DEFAULT_NAMESPACE, base_uri="http://example.org/flygff/"):
        # Target model classes and fields
        self.model = Namespace(normalize_namespace(model_uri))

        # Item URIs
        self.base = Namespace(base_uri)
        self.item = Namespace(f"{base_uri}item/")

        self.rdf = RDF
        self.rdfs = RDFS
        self.xsd = XSD

    def bind_to_graph(self, g):
        """Bind all namespaces to a graph."""
        g.bind("rdf", self.rdf)
        g.bind("rdfs", self.rdfs)
        g.bind("xsd", self.xsd)
        g.bind("model", self.model)
        g.bind("item", self.item)
        g.bind("base", self.base)

    def class_uri(self, class_name):
        """Return the URI for a (possibly already namespaced) class name."""
        return self.model[fragment(class_name)]

    def item_uri(self, identifier):
        return self.item[identifier]
