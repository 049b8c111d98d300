import logging

import click

log = logging.getLogger(__name__)


def tree(ctx):
    "print the include_recipe tree of a cookbook"
    from ..config import ConfigError, read_config
    from ..locator import Locator
    from ..metadata import MetadataError
    from ..recipes import TreeWalker
    from ..render import Printer

    log.info("Running")
    try:
        ctx.cookbook_paths = read_config(ctx.config, ctx.path)
        walker = TreeWalker(Locator(ctx.cookbook_paths))
        printer = Printer()
        for line in walker.walk(ctx.path, ctx.recipe):
            printer(line)
    except (ConfigError, MetadataError) as exc:
        log.debug("%s", exc)
        raise click.ClickException(str(exc)) from exc
