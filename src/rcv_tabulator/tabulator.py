"""
Contains the Tabulator class, which runs sequential RCV elections to find first place, second place, etc.
"""

from __future__ import annotations
from typing import Collection, Iterable, List, Optional, Sequence, TextIO

import sys

from rcv_tabulator.ballot import Ballot
from rcv_tabulator.candidate import Candidate
from rcv_tabulator.election import Election, check_ballots
from rcv_tabulator.errors import InvalidArgument
from rcv_tabulator.package_types import Path, Rankings
from rcv_tabulator.tables import Tabulator_tables

import rcv_tabulator.parsers as parsers


class Tabulator(Tabulator_tables):
    """
    Ranked-choice vote tabulator. Holds the candidates and ballots of an election and runs one Election
    per requested placement. After each placement the winner is removed from the candidates and from
    every ballot before the next Election is run on what remains.

    The candidates and ballots held here are never modified, each call to `execute` works on duplicates.
    """

    @classmethod
    def from_rankings(cls, candidate_names: Iterable[str], rankings: Rankings) -> Tabulator:
        """Build a Tabulator from plain names. Ballots are numbered 1, 2, ... in order.

        :param candidate_names: Names of all candidates.
        :type candidate_names: Iterable[str]
        :param rankings: One list of ranked names per ballot, most preferred first.
        :type rankings: Rankings
        :rtype: Tabulator
        """
        candidate_map = parsers.build_candidates(candidate_names)
        ballots = [
            parsers.build_ballot(candidate_map, ballot_id, names) for ballot_id, names in enumerate(rankings, start=1)
        ]
        return cls(candidate_map.values(), ballots)

    @classmethod
    def parse(cls, candidate_path: Path, ballot_paths: Sequence[Path], progress: bool = False) -> Tabulator:
        """Build a Tabulator from a candidate file and one file per ballot.

        :param candidate_path: File listing all candidate names, one per line.
        :type candidate_path: Path
        :param ballot_paths: Ballot files, each an ordered list of names, one per line.
        :type ballot_paths: Sequence[Path]
        :param progress: Show a progress bar while reading ballots, defaults to False
        :type progress: bool, optional
        :raises OSError: Raised if a file cannot be read.
        :raises DuplicateCandidate: Raised if the candidate file lists a name twice.
        :raises UnknownCandidate: Raised if a ballot file names a candidate not in the candidate file.
        :raises DuplicateEntry: Raised if a ballot file ranks a candidate twice.
        :rtype: Tabulator
        """
        candidate_map = parsers.read_candidates(candidate_path)
        ballots = parsers.read_ballots(candidate_map, ballot_paths, progress=progress)
        return cls(candidate_map.values(), ballots)

    def __init__(self, candidates: Collection[Candidate], ballots: Iterable[Ballot]) -> None:
        """Constructor.

        :param candidates: Candidates participating in the election(s).
        :type candidates: Collection[Candidate]
        :param ballots: The ballots cast.
        :type ballots: Iterable[Ballot]
        :raises DuplicateBallotId: Raised if two ballots share an id.
        :raises UnknownCandidateInBallot: Raised if a ballot references a candidate not in candidates.
        """
        if candidates is None or ballots is None:
            raise InvalidArgument("candidates and ballots are required")

        self._candidates = frozenset(candidates)
        self._ballots = tuple(ballots)
        check_ballots(self._candidates, self._ballots)

        self._elections = []
        self._winners = []

    @property
    def candidates(self) -> frozenset:
        return self._candidates

    @property
    def ballots(self) -> tuple:
        return self._ballots

    def execute(self, n_places: int = 1, out: Optional[TextIO] = None) -> List[Candidate]:
        """
        Run up to `n_places` complete elections. After each election the winner is removed and the next
        election determines the following place. Stops early if an election fails to produce a winner.

        :param n_places: Number of places to compute, defaults to 1
        :type n_places: int, optional
        :param out: Stream to print round details to, defaults to sys.stdout
        :type out: Optional[TextIO], optional
        :raises InvalidArgument: Raised if n_places is less than 1.
        :return: Winners in order of place. May be shorter than `n_places`.
        :rtype: List[Candidate]
        """
        if not isinstance(n_places, int) or isinstance(n_places, bool) or n_places < 1:
            raise InvalidArgument(f"number of places must be at least 1, but saw {n_places!r}")

        out = sys.stdout if out is None else out

        candidates = set(self._candidates)
        ballots = [b.duplicate() for b in self._ballots]

        self._elections = []
        self._winners = []

        for place in range(1, n_places + 1):

            print(f"Computing winner in place {place}:\n", file=out)
            election = Election(candidates, ballots)
            self._elections.append(election)

            winner = election.execute(out)
            print(file=out)
            if winner is None:
                break

            # previous winners take no further part
            self._winners.append(winner)
            candidates.discard(winner)
            for ballot in ballots:
                ballot.remove(winner)

        return list(self._winners)

    def get_winners(self) -> List[Candidate]:
        """
        :return: Winners found by the last call to `execute`, first place first.
        :rtype: List[Candidate]
        """
        return list(self._winners)

    def n_tabulations(self) -> int:
        """
        :return: Number of elections run by the last call to `execute`.
        :rtype: int
        """
        return len(self._elections)

    def get_election(self, tabulation_num: int = 1) -> Election:
        """
        :param tabulation_num: Election number, the place it was run for. Defaults to 1
        :type tabulation_num: int, optional
        :rtype: Election
        """
        if tabulation_num < 1 or tabulation_num > len(self._elections):
            raise InvalidArgument(
                f"tabulation {tabulation_num} has not been run (tabulations: {len(self._elections)})"
            )
        return self._elections[tabulation_num - 1]
