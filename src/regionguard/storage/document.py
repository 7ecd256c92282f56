"""Region document codec.

The persisted format is a flat JSON object mapping region name to required
group, pretty-printed with keys sorted so that the same mapping always
produces the same bytes.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Annotated

from pydantic import StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

# At least one non-whitespace character, matching RegionPolicyStore.add
NonEmptyStr = Annotated[str, StringConstraints(pattern=r"^[\s\S]*\S[\s\S]*$")]

_DOCUMENT = TypeAdapter(dict[NonEmptyStr, NonEmptyStr])


def parse_document(text: str) -> dict[str, str]:
    """Parse and validate a region document.

    Raises:
        ValueError: If the text is not a flat object of non-empty strings.
    """
    try:
        return _DOCUMENT.validate_json(text, strict=True)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValueError(errors) from e


def dump_document(rules: Mapping[str, str], indent: int = 2) -> str:
    """Serialize a mapping to the persisted form."""
    return json.dumps(dict(sorted(rules.items())), indent=indent, ensure_ascii=False) + "\n"
