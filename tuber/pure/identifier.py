"""Identifiers shared by variables, symbols, bound parameters and named functions."""


class Identifier:
    """Immutable name. Two identifiers are equal iff their labels are."""

    __slots__ = ("label",)

    def __init__(self, label):
        if isinstance(label, Identifier):
            label = label.label
        self.label = label

    def fresh_name(self, taken):
        """Returns an uppercased version of self that is not in taken. If the plain uppercased label is taken, the
        smallest numeric suffix (0, 1, 2, ...) that is free is appended to it.
        """
        base = self.label.upper()
        name = Identifier(base)

        idx = 0
        while name in taken:
            name = Identifier(f"{base}{idx}")
            idx += 1
        return name

    @property
    def is_long(self):
        """Whether or not this label is a multi-character style identifier ([0-9A-Z_]+). Such identifiers need a
        separating space when printed next to each other.
        """
        return bool(self.label) and all(char.isdigit() or char.isupper() or char == "_" for char in self.label)

    def __eq__(self, other):
        return isinstance(other, Identifier) and other.label == self.label

    def __lt__(self, other):
        return self.label < other.label

    def __hash__(self):
        return hash(self.label)

    def __repr__(self):
        return f"Identifier('{self.label}')"

    def __str__(self):
        return self.label
