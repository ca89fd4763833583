from rcv_tabulator.candidate import Candidate
from rcv_tabulator.ballot import Ballot
from rcv_tabulator.election import Election
from rcv_tabulator.tabulator import Tabulator
from rcv_tabulator.errors import (
    RCVError,
    InvalidArgument,
    DuplicateEntry,
    UnknownCandidate,
    UnknownCandidateInBallot,
    DuplicateCandidate,
    DuplicateBallotId,
)
from rcv_tabulator.parsers import ballot_filenames, read_ballots, read_candidates
from rcv_tabulator.config import read_run_config

__version__ = "0.1.0"
