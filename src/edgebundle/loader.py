"""
Input document loading.

Reads the hierarchy document once per session. JSON is the primary format;
`.yaml`/`.yml` files are accepted too. Any failure to read, parse or
validate the document is the one fatal error of a render and is returned
as `Err(DataLoadError)` rather than raised.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from .core.exceptions import DataLoadError
from .core.result import Err, Ok, Result
from .core.types import TreeNode

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_document(data: Any, source: str = "<memory>") -> Result[TreeNode, DataLoadError]:
    """Validate an already-decoded document into a `TreeNode` tree."""
    if not isinstance(data, dict):
        return Err(DataLoadError(source, "document root must be an object"))
    try:
        return Ok(TreeNode.model_validate(data))
    except ValidationError as e:
        return Err(DataLoadError(source, f"invalid hierarchy: {e.error_count()} error(s)\n{e}"))
    except RecursionError:
        return Err(DataLoadError(source, "invalid hierarchy: nesting is too deep"))


def load_document(path: Union[str, Path]) -> Result[TreeNode, DataLoadError]:
    """Read and validate the hierarchy document at `path`."""
    doc_path = Path(path)
    source = str(doc_path)

    if not doc_path.exists():
        return Err(DataLoadError(source, "file not found"))

    try:
        text = doc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(DataLoadError(source, str(e)))

    try:
        if doc_path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return Err(DataLoadError(source, f"parse error: {e}"))
    except RecursionError:
        return Err(DataLoadError(source, "parse error: nesting is too deep"))

    result = parse_document(data, source)
    if result.is_ok():
        logger.debug(f"Loaded hierarchy '{result.value.name}' from {source}")
    return result
