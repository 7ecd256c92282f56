"""Region rule persistence."""

from regionguard.storage.document import dump_document, parse_document
from regionguard.storage.policy_store import RegionPolicyStore

__all__ = [
    "RegionPolicyStore",
    "parse_document",
    "dump_document",
]
