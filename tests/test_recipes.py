import logging

from chef_tree import recipes


def test_parse_name():
    assert recipes.parse_name("a::b") == ("a", "b")
    assert recipes.parse_name("b") == (None, "b")
    assert recipes.parse_name("a::") == ("a", "default")


def test_parse_recipe():
    text = """
include_recipe "apt"
include_recipe 'nginx::source'
  include_recipe("local")
include_recipe "apt"
include_recipe "#{cookbook_name}::dynamic" if node["x"]
# include_recipe "commented"
package "git"
"""
    assert recipes.parse_recipe(text) == [
        "apt",
        "nginx::source",
        "local",
        "apt",
    ]


def test_read_recipe(tmp_path):
    (tmp_path / "recipes").mkdir()
    (tmp_path / "recipes" / "default.rb").write_text('include_recipe "a::b"\n')
    assert recipes.read_recipe(tmp_path, "default") == ["a::b"]


def test_read_recipe_missing(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="chef_tree"):
        assert recipes.read_recipe(tmp_path, "nope") == []
    assert ("chef_tree.recipes", logging.WARNING,
            "Could not read recipe nope, might be a variable") in caplog.record_tuples


def test_line_text():
    line = recipes.Line(1, "b", "setup", "b::setup", "2.1", "2.0", "red")
    assert line.text == "    b::setup (2.1 2.0)"

    line = recipes.Line(0, "a", "default", "a::default", "1.0", recipes.Label.START, "red")
    assert line.text == "a::default (1.0 START)"

    line = recipes.Line(2, "a", "other", "a::other", "1.0", recipes.Label.RECIPE, "red")
    assert line.text == "        a::other"

    line = recipes.Line(1, "c", "default", "c::default", None, recipes.Label.NOT_FOUND, "red")
    assert line.text == "    c::default (NOT FOUND)"


def test_read_recipe_latin1(tmp_path):
    (tmp_path / "recipes").mkdir()
    (tmp_path / "recipes" / "default.rb").write_bytes(b'# caf\xe9\ninclude_recipe "a::b"\n')
    assert recipes.read_recipe(tmp_path, "default") == ["a::b"]
