from .document_loader import load_expression_document, load_tree_document
from .errors import LoaderError

__all__ = ["load_expression_document", "load_tree_document", "LoaderError"]
