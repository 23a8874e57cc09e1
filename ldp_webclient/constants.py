from rdflib import Namespace
from rdflib.namespace import RDF, RDFS, XSD

FORMAT_MAP = {"application/ld+json":   "json-ld",
              "application/n-triples": "nt",
              "application/n-quads":   "nquads",
              "application/rdf+xml":   "xml",
              "application/trig":      "trig",
              "text/n3":               "n3",
              "text/rdf+n3":           "n3",
              "text/turtle":           "turtle",
              "application/x-turtle":  "turtle"
              }

NAMESPACES = {"acl":   Namespace("http://www.w3.org/ns/auth/acl#"),
              "dc":    Namespace("http://purl.org/dc/elements/1.1/"),
              "dct":   Namespace("http://purl.org/dc/terms/"),
              "foaf":  Namespace("http://xmlns.com/foaf/0.1/"),
              "ldp":   Namespace("http://www.w3.org/ns/ldp#"),
              "pim":   Namespace("http://www.w3.org/ns/pim/space#"),
              "rdf":   RDF,
              "rdfs":  RDFS,
              "solid": Namespace("http://www.w3.org/ns/solid/terms#"),
              "xsd":   XSD
              }

LDP = NAMESPACES["ldp"]

LDP_CONTAINS = str(LDP.contains)
LDP_CONTAINER = str(LDP.Container)
LDP_BASIC_CONTAINER = str(LDP.BasicContainer)
LDP_RESOURCE = str(LDP.Resource)
LDP_RDF_SOURCE = str(LDP.RDFSource)
LDP_NON_RDF_SOURCE = str(LDP.NonRDFSource)
CONTAINER_TYPES = (LDP_CONTAINER, LDP_BASIC_CONTAINER)

DEFAULT_ACCEPT = "text/turtle;q=0.8,*/*;q=0.5"
DEFAULT_MIME_TYPE = "text/turtle"
SPARQL_UPDATE = "application/sparql-update"


def vocab(prefix):
    """Return the namespace registered for a prefix, e.g. vocab('ldp')."""
    try:
        return NAMESPACES[prefix]
    except KeyError:
        raise KeyError("Unknown vocabulary prefix: {0}".format(prefix))
