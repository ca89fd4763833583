"""
Contains the exceptions raised for invalid election input.
"""


class RCVError(RuntimeError):
    """Base class for election errors not related to I/O, such as a ballot that ranks a name missing from
    the candidate list or a ballot that ranks a candidate more than once.
    """


class InvalidArgument(RCVError, ValueError):
    """A structurally invalid construction argument."""


class DuplicateEntry(RCVError):
    """A ballot ranks the same candidate more than once."""


class UnknownCandidate(RCVError):
    """A ballot names a candidate that is not in the candidate list."""


class UnknownCandidateInBallot(UnknownCandidate):
    """A Ballot handed to an Election references a Candidate outside the election's candidate set."""


class DuplicateCandidate(RCVError):
    """The candidate list contains the same name twice."""


class DuplicateBallotId(RCVError):
    """Two ballots in one tabulation share an id."""
