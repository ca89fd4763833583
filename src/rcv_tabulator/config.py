"""
Reads run configuration files.

A run config is a JSON object. Recognized options, their types and defaults are listed in the
run_config_settings.json file shipped with the package.
"""

from typing import Dict, Optional

import json
import os

from rcv_tabulator.errors import InvalidArgument
from rcv_tabulator.package_types import Path, RunConfig


# typecast functions
def _cast_str(s):
    """
    If string-in-string '"abc"', strip the quotes
    else, return str() result
    """
    if isinstance(s, str) and len(s) > 1 and ((s[0] == '"' and s[-1] == '"') or (s[0] == "'" and s[-1] == "'")):
        return s[1:-1]
    return str(s)


def _cast_int(s):
    if isinstance(s, bool):
        raise ValueError(f"expected an integer, saw {s!r}")
    if isinstance(s, int):
        return s
    return int(s)


def _cast_bool(s):
    if isinstance(s, bool):
        return s
    if isinstance(s, str) and s.strip().title() in ("True", "False"):
        return s.strip().title() == "True"
    raise ValueError(f'expected "true" or "false", saw {s!r}')


cast_dict = {
    "str": _cast_str,
    "int": _cast_int,
    "bool": _cast_bool,
}


def read_run_config_settings() -> Dict[str, Dict]:
    """
    :return: Recognized run config options, as option: {"type": ..., "default": ...}
    :rtype: Dict[str, Dict]
    """
    run_config_settings_fpath = f"{os.path.dirname(__file__)}/run_config_settings.json"
    if os.path.isfile(run_config_settings_fpath) is False:
        raise RuntimeError(
            f"(developer error) Looking for run_config_settings.json. Not a valid file path: {run_config_settings_fpath}"
        )

    with open(run_config_settings_fpath) as run_config_settings_file:
        return json.load(run_config_settings_file)


def default_run_config() -> RunConfig:
    """
    :return: Run config with every option set to its default.
    :rtype: RunConfig
    """
    return {field: settings["default"] for field, settings in read_run_config_settings().items()}


def read_run_config(run_config_fpath: Optional[Path] = None) -> RunConfig:
    """Read a run config file, cast each option to its type and fill in defaults for missing options.
    Unrecognized options are reported and ignored.

    :param run_config_fpath: Path to a JSON run config. If None, all defaults are returned. Defaults to None
    :type run_config_fpath: Optional[Path], optional
    :raises InvalidArgument: Raised if the file is missing, is not a JSON object or holds a value that
     cannot be cast to the option's type.
    :rtype: RunConfig
    """
    if run_config_fpath is None:
        return default_run_config()

    run_config_settings = read_run_config_settings()

    if os.path.isfile(run_config_fpath) is False:
        raise InvalidArgument(f"not a valid file path: {run_config_fpath}")

    with open(run_config_fpath) as run_config_file:
        try:
            user_config = json.load(run_config_file)
        except json.JSONDecodeError as e:
            raise InvalidArgument(f"{run_config_fpath} is not valid JSON: {e}") from e

    if not isinstance(user_config, dict):
        raise InvalidArgument(f"{run_config_fpath} must contain a JSON object")

    run_config = {}
    for option, value in user_config.items():

        if option not in run_config_settings:
            print(f'info -- "{option}" is an unrecognized option in {run_config_fpath}, it will be ignored.')
            continue

        option_type = run_config_settings[option]["type"]
        try:
            run_config[option] = cast_dict[option_type](value)
        except (TypeError, ValueError) as e:
            raise InvalidArgument(
                f'invalid value ({value!r}) provided in {run_config_fpath} for option "{option}". '
                f"Must be {option_type}."
            ) from e

    # add in defaults for missing options
    for field in run_config_settings:
        if field not in run_config:
            run_config.update({field: run_config_settings[field]["default"]})

    if run_config["n_places"] < 1:
        raise InvalidArgument(f'"n_places" must be at least 1, but saw {run_config["n_places"]}')

    return run_config
