from __future__ import annotations

from typing import ClassVar


class Symbol:
    """Identifier or operator name.

    Symbols are interned, so `Symbol("x") is Symbol("x")` and the default
    identity-based equality and hashing apply.
    """

    __slots__ = ("name",)
    __match_args__ = ("name",)

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        if not name:
            raise ValueError("Symbol name must be non-empty")
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
