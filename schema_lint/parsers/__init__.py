"""Document parsing: YAML/JSON loading and schema graph construction."""

from .yaml_parser import YamlParser, yaml_parser
from .document_loader import DocumentLoader, LoadedDocument, load_document
