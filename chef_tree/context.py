import pathlib
import functools
from pathlib import Path
from typing import List

import click
import attr

from . import config
from .util import LEVELS, setup_logging


@attr.s(slots=True, auto_attribs=True)
class Context:

    # the cookbook we start from
    path: Path

    # and its recipe
    recipe: str = "default"

    log_level: str = "error"

    # json file with the cookbook_paths
    config: Path = pathlib.Path(config.DEFAULT)

    # filled in from config
    cookbook_paths: List[Path] = attr.ib(factory=list)


def context_args(fn):
    wrappers = [
        click.option("--path", "-p", show_default=True,
                     default=pathlib.Path.cwd(),
                     type=click.Path(exists=True, file_okay=False, path_type=pathlib.Path),
                     help="Starting path"),
        click.option("--recipe", "-r", show_default=True,
                     default="default",
                     help="Starting recipe"),
        click.option("--log", "-l", "log_level", show_default=True,
                     default="error", metavar="LOG_LEVEL",
                     help=f"Log level ({'/'.join(LEVELS)})"),
        click.option("--config", "-c", show_default=True,
                     default=config.DEFAULT, metavar="FILE",
                     help="Config file"),
    ]

    for wrapper in reversed(wrappers):
        fn = wrapper(fn)

    @functools.wraps(fn)
    def _fn(ctx, *args, **kwargs):
        ctx.obj = instance(kwargs)
        return fn(ctx, **kwargs)
    return _fn


def instance(kwargs):
    kw = { key: kwargs.pop(key) for key in ("path", "recipe", "log_level", "config") }
    kw["path"] = pathlib.Path(kw["path"]).resolve()
    kw["config"] = pathlib.Path(kw["config"]).expanduser()
    setup_logging(kw["log_level"])
    return Context(**kw)
