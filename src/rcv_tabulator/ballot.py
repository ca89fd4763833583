"""
Contains Ballot class
"""

from __future__ import annotations
from typing import Iterable, List, Mapping, Optional

from rcv_tabulator.candidate import Candidate
from rcv_tabulator.errors import DuplicateEntry


class Ballot:
    """Wrap up the ranking list of a single ballot. Entries are ordered from most to least preferred and
    never contain the same candidate twice. Entries can only be removed after construction, as candidates
    are eliminated or win an earlier placement.
    """

    def __init__(self, ballot_id: int, entries: Iterable[Candidate] = ()) -> None:
        """Constructor. The entries are copied into a new list.

        :param ballot_id: ID number of this ballot, unique among the ballots of a tabulation.
        :type ballot_id: int
        :param entries: Candidates ranked on this ballot, most preferred first. Defaults to no entries.
        :type entries: Iterable[Candidate], optional
        :raises DuplicateEntry: Raised if a candidate appears more than once in entries.
        """
        self.id = ballot_id
        self.entries = list(entries)

        seen = set()
        for candidate in self.entries:
            if candidate in seen:
                raise DuplicateEntry(f"Ballot {ballot_id} contains duplicate entry: {candidate}")
            seen.add(candidate)

    def duplicate(self) -> Ballot:
        """Make a copy. The copy shares Candidate references but not the entries list.

        :return: New Ballot with same id and entries.
        :rtype: Ballot
        """
        copy_obj = Ballot.__new__(Ballot)
        copy_obj.id = self.id
        copy_obj.entries = [c for c in self.entries]
        return copy_obj

    def top(self) -> Optional[Candidate]:
        """
        :return: Most preferred remaining entry, or None if the ballot is empty.
        :rtype: Optional[Candidate]
        """
        return self.entries[0] if self.entries else None

    def remove(self, candidate: Candidate) -> bool:
        """Remove candidate from entries, if present.

        :param candidate: Candidate to remove.
        :type candidate: Candidate
        :return: True if candidate was present.
        :rtype: bool
        """
        if candidate in self.entries:
            self.entries.remove(candidate)
            return True
        return False

    def remove_at_or_below(self, bound: int, tally: Mapping[Candidate, int]) -> None:
        """Remove every entry whose current vote count is less than or equal to bound. Candidates missing
        from tally count as zero votes.

        :param bound: Upper bound on the votes of entries to remove.
        :type bound: int
        :param tally: Current vote count of each active candidate.
        :type tally: Mapping[Candidate, int]
        """
        self.entries = [c for c in self.entries if tally.get(c, 0) > bound]

    def is_empty(self) -> bool:
        return not self.entries

    def get_names(self) -> List[str]:
        """
        :return: Names of remaining entries, in order.
        :rtype: List[str]
        """
        return [c.name for c in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Ballot({self.id!r}, {self.get_names()!r})"
