"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mrcv_tabulator` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``rcv_tabulator.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``rcv_tabulator.__main__`` in ``sys.modules``.
"""
import argparse
import contextlib
import os
import pathlib
import sys

import rcv_tabulator.config as config
import rcv_tabulator.parsers as parsers

from rcv_tabulator.errors import RCVError
from rcv_tabulator.tabulator import Tabulator


def _positive_int(s):
    value = int(s)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, but saw {value}")
    return value


def _non_negative_int(s):
    value = int(s)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be at least 0, but saw {value}")
    return value


def _build_parser():

    p = argparse.ArgumentParser(
        prog="rcv-tabulator",
        description="Ranked Choice Vote tabulator. RCV is also known as \"instant runoff voting\". "
        "Given a file containing the list of candidates, and a sequence of ballot files, "
        "executes the RCV algorithm to determine the winner of an election.",
    )

    p.add_argument("candidate_file", help="File listing all candidates, one name per line.")
    p.add_argument("ballot_files", nargs="*", help="Ballot files, names ordered from most to least preferred.")
    p.add_argument("-m", "--places", type=_positive_int, default=None, help="find top M winners (default: 1)")
    p.add_argument("-r", "--root", default=None, help="root of ballot filenames, use with -n")
    p.add_argument(
        "-n", "--num-ballots", type=_non_negative_int, default=0, help="ballot filenames are R1.txt, ..., RN.txt"
    )
    p.add_argument("--config", default=None, help="Path to a run_config.json file.")
    p.add_argument("--output-dir", default=None, help="Directory for tables (default: results)")
    p.add_argument("--round-by-round-table", action="store_true", default=None, help="Write round by round CSVs.")
    p.add_argument("--round-by-round-json", action="store_true", default=None, help="Write round by round JSON.")
    p.add_argument("--placement-table", action="store_true", default=None, help="Write placements.csv.")
    p.add_argument("--progress", action="store_true", default=None, help="Show a progress bar while reading ballots.")
    p.add_argument("--quiet", action="store_true", default=None, help="Do not print round by round details.")

    return p


def _merge_run_config(args):
    """Command line flags override run config file values."""
    run_config = config.read_run_config(args.config)

    overrides = {
        "n_places": args.places,
        "output_dir": args.output_dir,
        "round_by_round_table": args.round_by_round_table,
        "round_by_round_json": args.round_by_round_json,
        "placement_table": args.placement_table,
        "progress": args.progress,
        "quiet": args.quiet,
    }
    run_config.update({k: v for k, v in overrides.items() if v is not None})
    return run_config


def _write_tables(tabulator, run_config):

    output_dir = pathlib.Path(run_config["output_dir"])
    written = []

    if run_config["round_by_round_table"]:
        written += Tabulator.write_round_by_round_table(tabulator, output_dir)

    if run_config["round_by_round_json"]:
        written += Tabulator.write_round_by_round_json(tabulator, output_dir)

    if run_config["placement_table"]:
        written.append(Tabulator.write_placement_table(tabulator, output_dir))

    for fpath in written:
        print(f"info -- wrote {fpath}")


def main(argv=None):

    # argument parse and valid
    p = _build_parser()
    args = p.parse_intermixed_args(argv)

    if args.num_ballots > 0 and args.root is None:
        p.error("must specify root (-r) if using -n")

    ballot_files = list(args.ballot_files)
    if args.num_ballots > 0:
        ballot_files += parsers.ballot_filenames(args.root, args.num_ballots)

    try:
        run_config = _merge_run_config(args)
        tabulator = Tabulator.parse(args.candidate_file, ballot_files, progress=run_config["progress"])

        with contextlib.ExitStack() as stack:
            out = stack.enter_context(open(os.devnull, "w")) if run_config["quiet"] else sys.stdout
            winners = tabulator.execute(run_config["n_places"], out=out)

        if winners:
            for place, winner in enumerate(winners, start=1):
                print(f"Place {place}: {winner}")
        else:
            print("No winner.")

        _write_tables(tabulator, run_config)

    except RCVError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"I/O error: {e}", file=sys.stderr)
        return 1

    return 0
