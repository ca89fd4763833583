"""
Functions for reading candidate and ballot text files.

Both file types hold one candidate name per line. Names are stripped and blank lines are ignored.
A ballot file lists names from most to least preferred.
"""

from typing import Dict, Iterable, List, Optional, Sequence

import pathlib

import tqdm

from rcv_tabulator.ballot import Ballot
from rcv_tabulator.candidate import Candidate
from rcv_tabulator.errors import DuplicateCandidate, UnknownCandidate
from rcv_tabulator.package_types import Path


def read_names(path: Path) -> List[str]:
    """Read the non-blank lines of a text file.

    :param path: File to read.
    :type path: Path
    :return: Stripped names, in file order.
    :rtype: List[str]
    """
    with open(path) as name_file:
        return [line.strip() for line in name_file if line.strip()]


def build_candidates(names: Iterable[str], source: Optional[Path] = None) -> Dict[str, Candidate]:
    """Create a Candidate for each name.

    :param names: Candidate names.
    :type names: Iterable[str]
    :param source: Where the names came from, used in error messages. Defaults to None
    :type source: Optional[Path], optional
    :raises DuplicateCandidate: Raised if a name appears twice.
    :return: Dictionary of name: Candidate, in input order.
    :rtype: Dict[str, Candidate]
    """
    candidate_map = {}
    for name in names:
        if name in candidate_map:
            msg = f"Duplicate candidate: {name}"
            if source is not None:
                msg += f" in {source}"
            raise DuplicateCandidate(msg)
        candidate_map[name] = Candidate(name)
    return candidate_map


def read_candidates(path: Path) -> Dict[str, Candidate]:
    """Parse a candidate file.

    :param path: Candidate file, one name per line.
    :type path: Path
    :raises DuplicateCandidate: Raised if the file lists a name twice.
    :rtype: Dict[str, Candidate]
    """
    return build_candidates(read_names(path), source=path)


def build_ballot(
    candidate_map: Dict[str, Candidate], ballot_id: int, names: Iterable[str], source: Optional[Path] = None
) -> Ballot:
    """Resolve ranked names against the candidate map and create a Ballot.

    :param candidate_map: Dictionary of name: Candidate
    :type candidate_map: Dict[str, Candidate]
    :param ballot_id: ID number to assign the ballot.
    :type ballot_id: int
    :param names: Ranked names, most preferred first.
    :type names: Iterable[str]
    :param source: Where the names came from, used in error messages. Defaults to None
    :type source: Optional[Path], optional
    :raises UnknownCandidate: Raised if a name is not in candidate_map.
    :raises DuplicateEntry: Raised if a name is ranked twice.
    :rtype: Ballot
    """
    entries = []
    for name in names:
        candidate = candidate_map.get(name)
        if candidate is None:
            where = f" ({source})" if source is not None else ""
            raise UnknownCandidate(f"Ballot {ballot_id}{where} contains name not in candidate list: {name}")
        entries.append(candidate)
    return Ballot(ballot_id, entries)


def read_ballot(candidate_map: Dict[str, Candidate], ballot_id: int, path: Path) -> Ballot:
    """Parse a single ballot file.

    :param candidate_map: Dictionary of name: Candidate
    :type candidate_map: Dict[str, Candidate]
    :param ballot_id: ID number to assign the ballot.
    :type ballot_id: int
    :param path: Ballot file, one name per line.
    :type path: Path
    :rtype: Ballot
    """
    return build_ballot(candidate_map, ballot_id, read_names(path), source=path)


def read_ballots(
    candidate_map: Dict[str, Candidate], paths: Sequence[Path], progress: bool = False
) -> List[Ballot]:
    """Parse ballot files. Ballots are numbered 1, 2, ... in the order of `paths`, so the same file can
    be passed more than once.

    :param candidate_map: Dictionary of name: Candidate
    :type candidate_map: Dict[str, Candidate]
    :param paths: Ballot files.
    :type paths: Sequence[Path]
    :param progress: Show a progress bar, defaults to False
    :type progress: bool, optional
    :rtype: List[Ballot]
    """
    pbar = tqdm.tqdm(paths, desc="reading ballots", disable=not progress, colour="GREEN")
    return [read_ballot(candidate_map, ballot_id, path) for ballot_id, path in enumerate(pbar, start=1)]


def ballot_filenames(root: Path, n_ballots: int) -> List[pathlib.Path]:
    """Ballot file names of the form root1.txt, root2.txt, ..., rootN.txt

    :param root: Root for all ballot file names.
    :type root: Path
    :param n_ballots: Number of ballots.
    :type n_ballots: int
    :rtype: List[pathlib.Path]
    """
    return [pathlib.Path(f"{root}{i}.txt") for i in range(1, n_ballots + 1)]
