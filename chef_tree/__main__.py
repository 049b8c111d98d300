import click
from chef_tree import context

from .commands.tree import tree


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="chef-tree")
@click.pass_context
@context.context_args
def main(ctx):
    "Print the dependency tree of a chef cookbook"
    tree(ctx.obj)


if __name__ == "__main__":
    main()
