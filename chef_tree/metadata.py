import re
import logging

from pathlib import Path
from typing import Dict, Optional

import attr

log = logging.getLogger(__name__)

METADATA = "metadata.rb"

NAME_RE = re.compile(r"""^\s*name\s+['"](?P<name>.+?)['"]\s*$""")
VERSION_RE = re.compile(r"""^\s*version\s+['"](?P<version>.+?)['"]\s*$""")
DEPENDS_RE = re.compile(
    r"""^\s*depends\s*\(?\s*['"](?P<cookbook>.+?)['"]"""
    r"""(?:,\s*['"](?P<version>.+?)['"])?\s*\)?\s*$""")


class MetadataError(Exception):
    pass


class MetadataMissing(MetadataError):
    pass


@attr.s(slots=True, auto_attribs=True)
class Metadata:
    name: Optional[str] = None
    version: Optional[str] = None

    # cookbook -> version constraint, None means any version
    depends: Dict[str, Optional[str]] = attr.ib(factory=dict)


def parse_metadata(text: str) -> Metadata:
    """parse the declarations we understand out of a metadata.rb

    Only literal string arguments are recognized, anything else
    (computed names, ruby blocks, comments ...) is silently skipped.
    The last name/version declaration wins.
    """
    metadata = Metadata()
    for line in text.splitlines():
        match = NAME_RE.match(line)
        if match:
            metadata.name = match["name"]
        match = VERSION_RE.match(line)
        if match:
            metadata.version = match["version"]
        match = DEPENDS_RE.match(line)
        if match:
            metadata.depends[match["cookbook"]] = match["version"]
    return metadata


def has_metadata(path: Path) -> bool:
    return (path / METADATA).is_file()


def read_metadata(path: Path) -> Metadata:
    path = path / METADATA
    log.debug("Reading %s", path)
    if not path.is_file():
        raise MetadataMissing(f"could not read metadata {path}")
    metadata = parse_metadata(path.read_text(encoding="utf-8", errors="replace"))
    log.debug("Found the following metadata %s", metadata)
    return metadata
