
import pathlib

from typing import (Dict, Sequence, Union)

# used in parser functions
Path = Union[str, pathlib.Path]

# ranked candidate names, one list per ballot, most preferred first
Rankings = Sequence[Sequence[str]]

# returned from config.read_run_config
RunConfig = Dict[str, Union[int, bool, str]]
