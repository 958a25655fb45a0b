# runetasks

Helpers for the front matter of markdown task lists.

A task file may start with a front matter block that holds a list of
reference documents and a flat map of metadata strings. This package turns
command-line style `key:value` flags into that metadata, and merges two
front matter blocks into one. Everything lives in the module
`runetasks.frontmatter`.

## Installation

```
pip install .
```

## The `FrontMatter` class

`FrontMatter` is a dataclass with two fields:

- `references`: a list of strings, empty by default;
- `metadata`: a dict of string keys to string values, empty by default.

## Parsing metadata flags

`parse_metadata_flags` takes an iterable of `key:value` strings and returns a
dictionary. The text is split at the first colon, so values may contain
colons, and values may be empty. Whitespace in values is kept as it is.
Repeating a key joins its values with commas.

```python
from runetasks.frontmatter import parse_metadata_flags

parse_metadata_flags(["tags:backend", "url:https://example.com:8080", "tags:critical"])
# {'tags': 'backend,critical', 'url': 'https://example.com:8080'}
```

Keys must start with a letter or underscore and hold only letters, digits and
underscores. Dotted (nested) keys, the YAML keys `<<`, `&` and `*`, empty keys,
empty flags and flags without a colon all raise `MetadataError`, a subclass of
`ValueError`.

```python
from runetasks.frontmatter import MetadataError, parse_metadata_flags

try:
    parse_metadata_flags(["config.port:8080"])
except MetadataError as exc:
    print(exc)  # nested keys not supported: config.port
```

## Merging front matter

`merge_front_matter` combines an existing `FrontMatter` with a new one.
References are appended in order, without removing duplicates. For metadata
the value from the new front matter wins. Either argument may be `None`; the
result is always a new `FrontMatter`, and neither input is changed.

```python
from runetasks.frontmatter import FrontMatter, merge_front_matter

existing = FrontMatter(references=["doc1.md"], metadata={"version": "1.0", "author": "Alice"})
new = FrontMatter(references=["doc1.md", "doc2.md"], metadata={"version": "2.0"})

merged = merge_front_matter(existing, new)
merged.references  # ['doc1.md', 'doc1.md', 'doc2.md']
merged.metadata    # {'version': '2.0', 'author': 'Alice'}
```

## What this package does not do

It works only on front matter values held in memory. It does not read or
write task files, parse or render the markdown task list or its YAML block,
and it has no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```