"""Positional placeholders and the per-build argument table.

Every value bound into a statement goes through :class:`Args`.  Equal values
share a placeholder so that a statement referring to the same value several
times only ships it to the server once.  Numbering is global to the statement:
the first value ever used is ``$1`` no matter where in the SQL text it ends up.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Tuple

__all__ = ["ArgumentCountError", "Args", "Placeholder", "MARKER"]

MARKER = "?"


class ArgumentCountError(ValueError):
    """Raised when a format template and its arguments disagree in length."""


class Placeholder(int):
    """A 1-based positional parameter reference, rendered as ``$N``."""

    def __str__(self) -> str:
        return f"${int(self)}"

    def __repr__(self) -> str:
        return f"Placeholder({int(self)})"


def _lookup_key(value: Any) -> Tuple[type, Hashable] | None:
    # ``1 == 1.0 == True`` in Python but the server types them differently,
    # so the type is part of the key.
    try:
        hash(value)
    except TypeError:
        return None
    return (type(value), value)


class Args:
    """Deduplicating map from bound value to placeholder."""

    def __init__(self) -> None:
        self._values: List[Any] = []
        self._index: Dict[Tuple[type, Hashable], Placeholder] = {}

    def use(self, value: Any) -> Placeholder:
        """Return the placeholder for ``value``, binding it on first use.

        Unhashable values cannot be looked up and get a fresh placeholder on
        every call.
        """

        key = _lookup_key(value)
        if key is not None:
            existing = self._index.get(key)
            if existing is not None:
                return existing

        self._values.append(value)
        placeholder = Placeholder(len(self._values))
        if key is not None:
            self._index[key] = placeholder
        return placeholder

    def values(self) -> List[Any]:
        """Return the bound values in first-use order."""

        return list(self._values)

    def format(self, template: str, *raw_args: Any) -> str:
        """Replace each ``?`` in ``template`` with the placeholder of the matching argument.

        >>> args = Args()
        >>> args.use(1)
        Placeholder(1)
        >>> args.format("?, ?", 2, 1)
        '$2, $1'
        """

        pieces = template.split(MARKER)
        marker_count = len(pieces) - 1
        if marker_count != len(raw_args):
            raise ArgumentCountError(
                f"template has {marker_count} '{MARKER}' markers but "
                f"{len(raw_args)} arguments were given: {template!r}"
            )

        out = [pieces[0]]
        for piece, value in zip(pieces[1:], raw_args):
            out.append(str(self.use(value)))
            out.append(piece)
        return "".join(out)
