"""Front matter data for task files: metadata flag parsing and merging."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["FrontMatter", "MetadataError", "parse_metadata_flags", "merge_front_matter"]

_YAML_KEY = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")
_RESERVED_KEYS = frozenset({"<<", "&", "*"})


class MetadataError(ValueError):
    """Raised when a metadata flag cannot be parsed."""


@dataclass
class FrontMatter:
    """References and flat string metadata stored at the top of a task file."""

    references: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


def _validate_key(key: str, flag: str) -> None:
    if not key:
        raise MetadataError(f"empty metadata key in: {flag}")
    if "." in key:
        raise MetadataError(f"nested keys not supported: {key}")
    if key in _RESERVED_KEYS:
        raise MetadataError(f"reserved YAML key: {key}")
    if not _YAML_KEY.fullmatch(key):
        raise MetadataError(
            f"invalid key {key!r}: must start with letter or underscore, "
            "followed by letters, numbers, or underscores"
        )


def parse_metadata_flags(flags: Iterable[str]) -> dict[str, str]:
    """Turn ``key:value`` strings into a dict.

    The key ends at the first colon, so values may contain colons. Repeated
    keys have their values joined with commas. Only flat keys are accepted.
    """
    result: dict[str, str] = {}
    for flag in flags:
        if not flag:
            raise MetadataError("empty metadata flag")
        key, sep, value = flag.partition(":")
        if not sep:
            raise MetadataError(f"invalid metadata format: {flag} (expected key:value)")
        _validate_key(key, flag)
        if key in result:
            result[key] = f"{result[key]},{value}"
        else:
            result[key] = value
    return result


def merge_front_matter(
    existing: FrontMatter | None, new: FrontMatter | None
) -> FrontMatter:
    """Merge two front matters into a fresh one.

    References are appended without deduplication; for metadata the value
    from ``new`` wins.
    """
    merged = FrontMatter()
    for source in (existing, new):
        if source is None:
            continue
        merged.references.extend(source.references)
        merged.metadata.update(source.metadata)
    return merged