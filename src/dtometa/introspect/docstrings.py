# topmark:header:start
#
#   project      : DtoMeta
#   file         : docstrings.py
#   file_relpath : src/dtometa/introspect/docstrings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute docstrings of Python classes.

Python keeps no runtime record of attribute docstrings, so they are recovered
from the class source: a string literal statement directly following an
annotated assignment documents that attribute::

    class Cat:
        name: str
        '''The cat's display name.

        @example "Felix"
        '''
"""

from __future__ import annotations

import ast
import inspect
import textwrap
from typing import TYPE_CHECKING

from dtometa.config.logging import get_logger

if TYPE_CHECKING:
    from dtometa.config.logging import DtoMetaLogger

logger: DtoMetaLogger = get_logger(__name__)


def attribute_docstrings(cls: type) -> dict[str, str]:
    """Return attribute name to docstring for the attributes declared on ``cls``.

    Returns an empty mapping when the source is not available (classes built
    dynamically or defined in an interactive session).
    """
    try:
        source: str = textwrap.dedent(inspect.getsource(cls))
    except (OSError, TypeError) as e:
        logger.debug("No source for %s: %s", cls.__qualname__, e)
        return {}

    try:
        tree: ast.Module = ast.parse(source)
    except SyntaxError as e:
        logger.debug("Cannot parse source of %s: %s", cls.__qualname__, e)
        return {}

    class_def: ast.ClassDef | None = next(
        (node for node in tree.body if isinstance(node, ast.ClassDef)), None
    )
    if class_def is None:
        return {}

    docs: dict[str, str] = {}
    body: list[ast.stmt] = class_def.body
    for current, following in zip(body, body[1:]):
        if not isinstance(current, ast.AnnAssign) or not isinstance(current.target, ast.Name):
            continue
        if (
            isinstance(following, ast.Expr)
            and isinstance(following.value, ast.Constant)
            and isinstance(following.value.value, str)
        ):
            docs[current.target.id] = inspect.cleandoc(following.value.value)
    return docs
