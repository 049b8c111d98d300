import logging

from pathlib import Path
from typing import List, Optional

import attr

from .metadata import has_metadata, read_metadata

log = logging.getLogger(__name__)


@attr.s(slots=True, auto_attribs=True)
class Locator:
    # searched in order, first match wins
    paths: List[Path] = attr.ib(factory=list)

    def locate(self, cookbook: Optional[str], current: Optional[Path] = None) -> Optional[Path]:
        """find the directory holding cookbook

        A None cookbook refers to the one we are already in and
        resolves to current.
        """
        if cookbook is None:
            return current
        return self.fast(cookbook) or self.scan(cookbook) or self.missing(cookbook)

    def fast(self, cookbook: str) -> Optional[Path]:
        "the directory name matches the cookbook name"
        for path in self.paths:
            log.debug("Looking for cookbook %s in %s", cookbook, path)
            candidate = path / cookbook
            if candidate.is_dir() and has_metadata(candidate):
                log.debug("Found it")
                return candidate

    def scan(self, cookbook: str) -> Optional[Path]:
        "read every sibling metadata.rb looking for a matching name"
        log.debug("Having to use aggressive search")
        for path in self.paths:
            if not path.is_dir():
                continue
            for candidate in sorted(path.iterdir()):
                if not (candidate.is_dir() and has_metadata(candidate)):
                    continue
                log.debug("Looking for cookbook %s in %s", cookbook, candidate)
                if read_metadata(candidate).name == cookbook:
                    log.debug("Found it")
                    return candidate

    def missing(self, cookbook: str) -> None:
        log.warning("Could not find cookbook %s, assuming not local", cookbook)
