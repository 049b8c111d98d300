import pytest


def make_cookbook(root, dirname, name=None, version=None, depends=(), recipes=None):
    """create a cookbook directory under root

    depends is a list of cookbook names or (cookbook, version) pairs,
    recipes maps a recipe name to its include_recipe references.
    """
    path = root / dirname
    (path / "recipes").mkdir(parents=True)
    lines = []
    if name:
        lines.append(f'name "{name}"')
    if version:
        lines.append(f'version "{version}"')
    for dep in depends:
        if isinstance(dep, str):
            lines.append(f'depends "{dep}"')
        else:
            lines.append(f'depends "{dep[0]}", "{dep[1]}"')
    (path / "metadata.rb").write_text("\n".join(lines) + "\n")
    for recipe, includes in (recipes or {}).items():
        (path / "recipes" / f"{recipe}.rb").write_text(
            "".join(f'include_recipe "{ref}"\n' for ref in includes))
    return path


@pytest.fixture
def cookbooks(tmp_path):
    path = tmp_path / "cookbooks"
    path.mkdir()
    return path
