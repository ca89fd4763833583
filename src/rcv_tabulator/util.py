import decimal
import math
import os
import pathlib

###############################################################
# constants

NAN = decimal.Decimal("NaN")

########################
# helper funcs


def is_nan(x):
    # checks if x is a float or Decimal NaN, other types are never NaN
    return isinstance(x, (float, decimal.Decimal)) and math.isnan(x)


def verify_dir(dir_path, make_if_missing=True, error_msg_tail="is not an existing folder"):
    """
    Check that a directory exists and if missing, either error or create it.

    :param dir_path: directory path to verify
    :param make_if_missing: if True, create directory (and parents) if missing
    :param error_msg_tail: if make_if_missing is False and directory missing,
     raise with this error message after the dir_path.
    :return: the directory path as a pathlib.Path
    """
    dir_path = pathlib.Path(dir_path)
    if os.path.isdir(dir_path) is False:
        if make_if_missing:
            dir_path.mkdir(parents=True)
        else:
            raise NotADirectoryError(f"{dir_path} {error_msg_tail}")
    return dir_path
