import datetime
import logging
import re
from typing import Dict, List, Optional, Tuple, Union

import yaml
from frontmatter import YAMLHandler
from pydantic import ValidationError

from app.exceptions import (
    FieldError,
    FrontmatterError,
    FrontmatterParseError,
    MissingFrontmatterError,
)
from app.schemas.blog import PostFrontmatter

logger = logging.getLogger(__name__)

# Flat metadata only: a scalar or a list of scalars. Absent keys are simply
# missing from the mapping (YAML null counts as absent).
FrontmatterValue = Union[str, bool, List[Union[str, bool]]]

_handler = YAMLHandler()

_BOOL_TAG = "tag:yaml.org,2002:bool"


class MetadataLoader(yaml.SafeLoader):
    """Safe loader that only reads the words true and false as booleans."""


MetadataLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
MetadataLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|false)$", re.IGNORECASE), list("tTfF")
)

_TYPE_NAMES = {
    bool: "boolean",
    str: "string",
    list: "array",
    dict: "object",
    int: "number",
    float: "number",
}


def extract(document: str, source: Optional[str] = None) -> Tuple[str, str]:
    """Split a document into its raw metadata block and markdown body."""
    text = document.lstrip("\ufeff")
    if not _handler.detect(text):
        raise MissingFrontmatterError(source)
    try:
        block, body = _handler.split(text)
    except ValueError:
        # opening delimiter without a closing one
        raise MissingFrontmatterError(source) from None
    return block, body.lstrip("\r\n")


def parse(block: str, source: Optional[str] = None) -> Dict[str, FrontmatterValue]:
    """Load the metadata block and flatten it into plain scalars and lists."""
    try:
        loaded = _handler.load(block, Loader=MetadataLoader)
    except (yaml.YAMLError, ValueError) as e:
        # impossible dates such as 2024-02-30 fail inside the constructor
        raise FrontmatterParseError(str(e), source) from e

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise FrontmatterParseError(
            f"expected key/value pairs, got {_type_name(loaded)}", source
        )

    structure: Dict[str, FrontmatterValue] = {}
    for key, value in loaded.items():
        if value is None:
            continue
        key = str(key)
        if isinstance(value, list):
            structure[key] = [
                _coerce_scalar(key, item, source) for item in value if item is not None
            ]
        else:
            structure[key] = _coerce_scalar(key, value, source)
    return structure


def validate(
    structure: Dict[str, FrontmatterValue], source: Optional[str] = None
) -> PostFrontmatter:
    """Check a parsed block against the post schema, reporting every bad field."""
    try:
        return PostFrontmatter.model_validate(structure)
    except ValidationError as e:
        errors = [
            FieldError(_field_path(err["loc"]), _reason(err)) for err in e.errors()
        ]
        raise FrontmatterError(errors, source) from None


def read_document(
    document: str, source: Optional[str] = None, require_block: bool = False
) -> Tuple[PostFrontmatter, str]:
    """
    Extract, parse and validate a whole document.

    Without ``require_block`` a document lacking the delimiters is read as
    having no metadata at all, so validation names each missing field.
    """
    try:
        block, body = extract(document, source)
    except MissingFrontmatterError:
        if require_block:
            raise
        logger.debug(f"No frontmatter block in {source}, treating as body")
        block, body = "", document

    metadata = validate(parse(block, source), source)
    return metadata, body


def _coerce_scalar(key: str, value, source: Optional[str]) -> Union[str, bool]:
    if isinstance(value, (bool, str)):
        return value
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return str(value)
    raise FrontmatterParseError(
        f"nested {_type_name(value)} is not supported for '{key}'", source
    )


def _type_name(value) -> str:
    if value is None:
        return "undefined"
    return _TYPE_NAMES.get(type(value), type(value).__name__)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc)


def _reason(err: dict) -> str:
    kind = err["type"]
    received = _type_name(err.get("input"))
    if kind == "missing":
        return "expected string, received undefined"
    if kind == "string_type":
        return f"expected string, received {received}"
    if kind == "bool_type":
        return f"expected boolean, received {received}"
    if kind == "list_type":
        return f"expected array, received {received}"
    if kind == "string_too_short":
        return "must not be empty"
    if kind == "value_error":
        return str(err["ctx"]["error"])
    return err["msg"]
