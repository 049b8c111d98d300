import re
import enum
import logging

from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional, Tuple, Union

import attr

from .locator import Locator
from .metadata import Metadata, read_metadata
from .render import ColorMap, format_line

log = logging.getLogger(__name__)

INCLUDE_RE = re.compile(r"""^\s*include_recipe\s*\(?\s*['"](?P<recipe>.+?)['"]\s*\)?\s*$""")


class Label(str, enum.Enum):
    START = "START"
    ANY = "ANY"
    NOT_FOUND = "NOT FOUND"
    CYCLE = "CYCLE"

    # recipe from the same cookbook, shown without version
    RECIPE = "recipe"


def parse_recipe(text: str) -> List[str]:
    "the include_recipe references, in order and with repetitions"
    return [ m["recipe"] for m in map(INCLUDE_RE.match, text.splitlines()) if m ]


def read_recipe(path: Path, name: str) -> List[str]:
    recipe = path / "recipes" / f"{name}.rb"
    log.debug("Reading recipe %s", recipe)
    if not recipe.is_file():
        log.warning("Could not read recipe %s, might be a variable", name)
        return []
    includes = parse_recipe(recipe.read_text(encoding="utf-8", errors="replace"))
    log.debug("Found the following included recipes %s", includes)
    return includes


def parse_name(reference: str) -> Tuple[Optional[str], str]:
    """split a recipe reference into (cookbook, recipe)

        >>> parse_name("apt::source")
        ('apt', 'source')
        >>> parse_name("source")
        (None, 'source')
    """
    cookbook, sep, recipe = reference.partition("::")
    if not sep:
        return None, reference
    return cookbook, recipe or "default"


@attr.s(slots=True, auto_attribs=True, frozen=True)
class Line:
    depth: int
    cookbook: str
    recipe: str
    name: str
    version: Optional[str]
    label: Union[Label, str]
    color: str

    @property
    def text(self) -> str:
        if self.label is Label.RECIPE:
            label = None
        elif isinstance(self.label, Label):
            label = self.label.value
        else:
            label = self.label
        return format_line(self.depth, self.name, self.version, label)


@attr.s(slots=True, auto_attribs=True, frozen=True)
class _Entry:
    depth: int
    cookbook: str
    recipe: str
    label: Union[Label, str]

    # None until the cookbook has been located
    path: Optional[Path] = None

    # (cookbook, recipe) pairs between the root and here
    ancestors: FrozenSet[Tuple[str, str]] = frozenset()


@attr.s(slots=True, auto_attribs=True)
class TreeWalker:
    locator: Locator = attr.ib(factory=Locator)
    colors: ColorMap = attr.ib(factory=ColorMap)

    def walk(self, path: Path, recipe: str = "default") -> Iterator[Line]:
        """depth first walk of the include_recipe graph rooted at path

        Lines are yielded in print order, so a MetadataError raised
        halfway leaves the lines produced so far valid. The root is
        read from path as is, it is not looked up in the search paths.
        """
        metadata = read_metadata(path)
        cookbook = metadata.name or path.name
        stack = [ _Entry(0, cookbook, recipe, Label.START, path) ]
        while stack:
            line, children = self.process(stack.pop())
            yield line
            stack.extend(reversed(children))

    def process(self, entry: _Entry) -> Tuple[Line, List[_Entry]]:
        log.info("Processing cookbook %s::%s %s at index %d", entry.cookbook, entry.recipe,
                 getattr(entry.label, "value", entry.label), entry.depth)
        color = self.colors[entry.cookbook]
        fullname = f"{entry.cookbook}::{entry.recipe}"

        key = (entry.cookbook, entry.recipe)
        if key in entry.ancestors:
            log.warning("Recipe %s includes itself, not descending", fullname)
            return Line(entry.depth, entry.cookbook, entry.recipe, fullname, None, Label.CYCLE, color), []

        path = entry.path or self.locator.locate(entry.cookbook)
        if path is None:
            log.debug("Nowhere to go")
            return Line(entry.depth, entry.cookbook, entry.recipe, fullname, None, entry.label, color), []

        metadata = read_metadata(path)
        line = Line(entry.depth, entry.cookbook, entry.recipe,
                    f"{metadata.name or entry.cookbook}::{entry.recipe}",
                    metadata.version, entry.label, color)

        ancestors = entry.ancestors | {key}
        children = []
        for included in read_recipe(path, entry.recipe):
            cookbook, recipe = parse_name(included)
            if cookbook in { None, entry.cookbook, metadata.name }:
                children.append(_Entry(entry.depth + 1, entry.cookbook, recipe, Label.RECIPE, path, ancestors))
            else:
                label = self.constraint(entry.cookbook, metadata, cookbook)
                children.append(_Entry(entry.depth + 1, cookbook, recipe, label, None, ancestors))
        return line, children

    def constraint(self, parent: str, metadata: Metadata, cookbook: str) -> Union[Label, str]:
        "the version of cookbook that parent asks for"
        if cookbook not in metadata.depends:
            log.warning("Dependency not found for %s in metadata.rb for %s", cookbook, parent)
            return Label.NOT_FOUND
        return metadata.depends[cookbook] or Label.ANY
