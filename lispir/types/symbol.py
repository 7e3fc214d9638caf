from __future__ import annotations
import sys
import weakref


class Symbol:
    """A name. Symbols are interned: equal names give the same object
    for as long as any reference to that symbol is alive."""
    __slots__ = ("id", "__weakref__")

    _table: weakref.WeakValueDictionary[str, Symbol] = weakref.WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            cls._table[name] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.id == other.id)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
