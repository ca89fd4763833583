"""
Contains the Election class, a single winner instant runoff tabulation.
"""

from __future__ import annotations
from typing import Collection, Dict, Iterable, List, Optional, TextIO, Tuple

import sys

from rcv_tabulator.ballot import Ballot
from rcv_tabulator.candidate import Candidate
from rcv_tabulator.errors import DuplicateBallotId, DuplicateCandidate, InvalidArgument, UnknownCandidateInBallot


def check_ballots(candidates: Collection[Candidate], ballots: Iterable[Ballot]) -> None:
    """Check that ballot ids are unique and that every ballot entry is in candidates.

    :param candidates: Candidates participating in the election.
    :type candidates: Collection[Candidate]
    :param ballots: Ballots to check.
    :type ballots: Iterable[Ballot]
    :raises DuplicateBallotId: Raised if two ballots share an id.
    :raises UnknownCandidateInBallot: Raised if a ballot references a candidate not in candidates.
    """
    candidate_set = set(candidates)
    ids = set()
    for ballot in ballots:
        if ballot.id in ids:
            raise DuplicateBallotId(f"Duplicate ballot id {ballot.id}")
        ids.add(ballot.id)
        for c in ballot.entries:
            if c not in candidate_set:
                raise UnknownCandidateInBallot(f"Ballot entry {c} does not occur in candidate list")


class Election:
    """
    A single RCV election, used to determine a single winner. The constructor leaves the election in
    round 1, with the votes tallied from the top entry of every ballot. Calling `execute` runs through
    the rounds until a candidate holds a majority of the active ballots or all candidates are eliminated.

    Candidates are always kept sorted by current vote count, most votes first, with ties broken by
    alphabetical order of names. Each round, every candidate tied at the lowest count is eliminated at once.
    """

    def __init__(self, candidates: Collection[Candidate], ballots: Iterable[Ballot]) -> None:
        """Constructor. The candidates are copied and the ballots duplicated, so the collections passed
        in are never modified. Ballots that are already empty still count toward the round 1 majority and
        are dropped with the first elimination.

        :param candidates: Candidates participating in the election.
        :type candidates: Collection[Candidate]
        :param ballots: Ballots cast.
        :type ballots: Iterable[Ballot]
        :raises InvalidArgument: Raised if candidates or ballots is None.
        :raises DuplicateCandidate: Raised if a candidate is listed twice.
        :raises DuplicateBallotId: Raised if two ballots share an id.
        :raises UnknownCandidateInBallot: Raised if a ballot references a candidate not in candidates.
        """
        if candidates is None:
            raise InvalidArgument("null candidates")
        if ballots is None:
            raise InvalidArgument("null ballots")

        candidates = list(candidates)
        ballots = list(ballots)
        check_ballots(candidates, ballots)

        self.candidates: List[Candidate] = candidates
        if len(set(self.candidates)) != len(self.candidates):
            dupes = sorted({c.name for c in self.candidates if self.candidates.count(c) > 1})
            raise DuplicateCandidate(f"Duplicate candidate: {', '.join(dupes)}")

        self.ballots: List[Ballot] = [b.duplicate() for b in ballots]
        self.tally: Dict[Candidate, int] = {}

        # INIT STATE INFO
        self._initial_ballot_count = len(ballots)
        self._rounds = []
        self._candidate_outcomes = {
            c.name: {"name": c.name, "round_elected": None, "round_eliminated": None}
            for c in sorted(self.candidates)
        }
        self._finished = False
        self._winner = None

        self._compute_and_sort()
        self.round_num = 1

    def _compute_and_sort(self) -> None:
        """
        Compute the current vote totals from the top entry of each active ballot, then sort the
        candidates from highest to lowest total, breaking ties by name.
        """
        self.tally = {c: 0 for c in self.candidates}
        for ballot in self.ballots:
            top = ballot.top()
            if top is not None:
                self.tally[top] += 1
        self.candidates.sort(key=lambda c: (-self.tally[c], c.name))

    def _remove_candidates_at_or_below(self, bound: int) -> List[Candidate]:
        """
        Remove all candidates with votes less than or equal to bound from the candidate list and from
        every ballot, then drop ballots which have become empty.

        :param bound: upper bound on the votes of candidates to remove
        :return: removed candidates
        """
        removed = []
        while self.candidates and self.tally[self.candidates[-1]] <= bound:
            removed.append(self.candidates.pop())

        for ballot in self.ballots:
            ballot.remove_at_or_below(bound, self.tally)
        self.ballots = [b for b in self.ballots if not b.is_empty()]

        return removed

    def _record_round(self) -> None:
        self._rounds.append(
            {
                "candidates": [c.name for c in self.candidates],
                "tallies": [self.tally[c] for c in self.candidates],
                "ballots": len(self.ballots),
                "active_ballots": sum(1 for b in self.ballots if not b.is_empty()),
            }
        )

    def print_state(self, out: Optional[TextIO] = None) -> None:
        """Print the current round number and the vote total of each candidate.

        :param out: Stream to print to, defaults to sys.stdout
        :type out: Optional[TextIO], optional
        """
        out = sys.stdout if out is None else out
        print(f"Round {self.round_num}:", file=out)
        for c in self.candidates:
            print(c.display(self.tally[c]), file=out)

    def execute(self, out: Optional[TextIO] = None) -> Optional[Candidate]:
        """
        Run the election round by round until a winner is found or no candidates remain. Round states and
        the outcome are printed to `out`. Once finished, further calls return the same result.

        :param out: Stream to print to, defaults to sys.stdout
        :type out: Optional[TextIO], optional
        :return: The winner, or None if the election failed.
        :rtype: Optional[Candidate]
        """
        if self._finished:
            return self._winner

        out = sys.stdout if out is None else out
        while True:

            self.print_state(out)
            self._record_round()

            if not self.candidates:
                print("No active candidates.   Election failed.", file=out)
                break

            top = self.candidates[0]
            if 2 * self.tally[top] > len(self.ballots):
                print(f"\nWinner: {top.display(self.tally[top])}", file=out)
                self._candidate_outcomes[top.name]["round_elected"] = self.round_num
                self._winner = top
                break

            low_score = self.tally[self.candidates[-1]]
            for loser in self._remove_candidates_at_or_below(low_score):
                self._candidate_outcomes[loser.name]["round_eliminated"] = self.round_num

            self._compute_and_sort()
            self.round_num += 1
            print(file=out)

        self._finished = True
        return self._winner

    @property
    def winner(self) -> Optional[Candidate]:
        return self._winner

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def initial_ballot_count(self) -> int:
        """Number of ballots handed to the constructor, including any that were already empty."""
        return self._initial_ballot_count

    def n_rounds(self) -> int:
        """
        :return: Number of rounds recorded so far.
        :rtype: int
        """
        return len(self._rounds)

    def _get_round(self, round_num: int) -> Dict:
        if round_num < 1 or round_num > len(self._rounds):
            raise InvalidArgument(f"round {round_num} has not been tabulated (rounds: {len(self._rounds)})")
        return self._rounds[round_num - 1]

    def get_round_tally_tuple(self, round_num: int) -> Tuple[Tuple[str, ...], Tuple[int, ...]]:
        """
        Return the names of candidates active in the round and their vote counts, sorted in descending order
        by vote count and then by ascending order by candidate name.

        :param round_num: Round number for which to return vote counts.
        :type round_num: int
        :return: Tuple of candidate names and tuple of vote counts.
        :rtype: Tuple[Tuple[str, ...], Tuple[int, ...]]
        """
        rnd = self._get_round(round_num)
        return tuple(rnd["candidates"]), tuple(rnd["tallies"])

    def get_round_tally_dict(self, round_num: int) -> Dict[str, int]:
        """
        Return a dictionary of vote counts for every candidate in the election. Candidates no longer active
        in the round have a count of zero.

        :param round_num: Round number for which to return vote counts.
        :type round_num: int
        :rtype: Dict[str, int]
        """
        rnd = self._get_round(round_num)
        tally_dict = {name: 0 for name in self._candidate_outcomes}
        tally_dict.update(zip(rnd["candidates"], rnd["tallies"]))
        return tally_dict

    def get_round_active_ballots(self, round_num: int) -> int:
        """
        :param round_num: Round number.
        :type round_num: int
        :return: Number of active (non-empty) ballots in the round.
        :rtype: int
        """
        return self._get_round(round_num)["active_ballots"]

    def get_round_ballot_count(self, round_num: int) -> int:
        """Ballots the majority was measured against in the round. In round 1 this includes ballots that were
        already empty when the election was built.

        :param round_num: Round number.
        :type round_num: int
        :rtype: int
        """
        return self._get_round(round_num)["ballots"]

    def get_candidate_outcomes(self) -> List[Dict]:
        """
        :return: One dictionary per candidate with keys "name", "round_elected" and "round_eliminated".
        :rtype: List[Dict]
        """
        return [dict(d) for d in self._candidate_outcomes.values()]
