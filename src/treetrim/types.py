from os import PathLike
from typing import Callable, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Decision function produced by compiling ignore patterns
NamePredicate = Callable[[str], bool]

# Connector glyphs of the tree text notation
BRANCH_GLYPH = "├──"
LAST_BRANCH_GLYPH = "└──"
VERTICAL_GLYPH = "│"
CONNECTOR_GLYPHS = (BRANCH_GLYPH, LAST_BRANCH_GLYPH)
