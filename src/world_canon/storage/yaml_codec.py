"""YAML encoding for world documents.

Documents are written with 2-space indentation, a 100 column line width,
insertion-ordered keys and no anchors or aliases. Timestamps are loaded as
plain strings so that a read/write round trip never changes a value's type.
"""

from __future__ import annotations

from typing import Any

import yaml

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _Loader(yaml.SafeLoader):
    pass


_Loader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _Dumper(yaml.SafeDumper):
    def ignore_aliases(self, data: Any) -> bool:
        return True


def loads(text: str) -> Any:
    """Parse a YAML document. Raises ``yaml.YAMLError`` on malformed input."""
    return yaml.load(text, Loader=_Loader)  # noqa: S506


def dumps(document: Any) -> str:
    """Serialize a document in the canonical world format."""
    return yaml.dump(
        document,
        Dumper=_Dumper,
        indent=2,
        width=100,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
