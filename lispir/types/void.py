from __future__ import annotations


class VoidType:
    """The absence of a meaningful result, e.g. the value of a define."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Void"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()
