import json
import logging

from pathlib import Path
from typing import List

log = logging.getLogger(__name__)

DEFAULT = "~/.chef-tree.json"


class ConfigError(Exception):
    pass


def read_config(path: Path, basedir: Path) -> List[Path]:
    """load the cookbook search paths from a json config file

        { "cookbook_paths": [ "~/chef/cookbooks", "site-cookbooks" ] }

    Relative entries are anchored to basedir, a missing file
    leaves the search paths empty.
    """
    path = Path(path).expanduser()
    log.info("Reading config file %s", path)
    if not path.exists():
        log.warning("Could not find config file %s", path)
        return []

    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc
    log.info("Found the following config %s", config)

    if not isinstance(config, dict):
        raise ConfigError(f"invalid config file {path}: expected an object")
    paths = config.get("cookbook_paths", [])
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigError(f"invalid config file {path}: cookbook_paths must be a list of strings")
    return [ basedir / Path(p).expanduser() for p in paths ]
