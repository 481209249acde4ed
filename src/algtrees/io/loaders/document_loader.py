from __future__ import annotations

import logging
from typing import Any, Dict, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from algtrees.core.specs import ExpressionDocument, TreeDocument
from algtrees.io.loaders.errors import LoaderError

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseModel)


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise LoaderError(path, "Cannot read document", cause=exc) from exc
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LoaderError(path, f"Document root must be a mapping, got {type(data).__name__}")
    return data


def _load(path: str, model: Type[DocumentT], what: str) -> DocumentT:
    data = _read_yaml(path)
    try:
        document = model.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, f"Invalid {what} document", cause=exc) from exc
    logger.info("Loaded %s document from %s", what, path)
    return document


def load_expression_document(path: str) -> ExpressionDocument:
    """Load a YAML file of named expressions.

    Expected format:
    assignment: {x: 3, y: 5}
    default: 0
    expressions:
      expr2: {add: [x, 1]}
      expr3: {mul: [2, {add: [x, y]}]}
    """
    return _load(path, ExpressionDocument, "expression")


def load_tree_document(path: str) -> TreeDocument:
    """Load a YAML file of named trees.

    Expected format:
    trees:
      tree1: 8
      tree2: {value: 1, children: [3, 2]}
    """
    return _load(path, TreeDocument, "tree")
