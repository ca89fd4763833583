"""
Contains Candidate class
"""

from __future__ import annotations

from rcv_tabulator.errors import InvalidArgument


class Candidate:
    """A candidate in the election. Two candidates are equal if they have the same name.

    Vote counts are not stored here, each Election keeps its own tally keyed by Candidate.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        """Constructor

        :param name: Candidate name, must be a non-blank string.
        :type name: str
        :raises InvalidArgument: Raised if name is missing or blank.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument(f"invalid candidate name: {name!r}")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def display(self, votes: int) -> str:
        """
        :param votes: Current vote count of this candidate.
        :type votes: int
        :return: Name followed by votes in parentheses, e.g. "Kathy (3)"
        :rtype: str
        """
        return f"{self._name} ({votes})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __lt__(self, other: Candidate) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return self._name < other._name

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Candidate({self._name!r})"
