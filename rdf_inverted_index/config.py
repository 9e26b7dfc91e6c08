"""
Default settings for the RDF inverted index jobs.
"""

# Closing root tag of an RDF/XML document
DEFAULT_DOC_END_MARKER = "</rdf:RDF>"

# rdflib parser format for the input documents
RDF_FORMAT = "xml"

# Hadoop counter group for per-partition stats
COUNTER_GROUP = "rdf_index"

# Reducer count hint, None leaves it to the runner
DEFAULT_NUM_REDUCERS = None

# Base IRI for relative references such as rdf:about=""
DEFAULT_BASE_URI = "http://localhost/rdf-index/document"
