"""
Round by round and placement tables. Tabulator inherits these methods.
"""

from typing import Dict, List, Union

import json
import pathlib

import pandas as pd

import rcv_tabulator.util as util


class Tabulator_tables:

    @staticmethod
    def write_round_by_round_table(tabulator, save_dir: Union[str, pathlib.Path]) -> List[pathlib.Path]:
        """Wrapper for `get_round_by_round_table` that writes out the table for each tabulation to path
        '{save_dir}/round_by_round_table/place{tabulation_num}.csv'

        :param tabulator: Tabulator object that has been executed.
        :type tabulator: Tabulator
        :param save_dir: Directory path to write tables to.
        :type save_dir: Union[str, pathlib.Path]
        :return: Paths written.
        :rtype: List[pathlib.Path]
        """
        save_path = util.verify_dir(pathlib.Path(save_dir) / "round_by_round_table")

        written = []
        for iTab in range(1, tabulator.n_tabulations() + 1):
            df = tabulator.get_round_by_round_table(tabulation_num=iTab)
            fpath = save_path / f"place{iTab}.csv"
            df.to_csv(fpath, index=False)
            written.append(fpath)
        return written

    @staticmethod
    def write_round_by_round_json(tabulator, save_dir: Union[str, pathlib.Path]) -> List[pathlib.Path]:
        """Wrapper for `get_round_by_round_dict` that writes out the dictionary for each tabulation to path
        '{save_dir}/round_by_round_json/place{tabulation_num}.json'

        :param tabulator: Tabulator object that has been executed.
        :type tabulator: Tabulator
        :param save_dir: Directory path to write files to.
        :type save_dir: Union[str, pathlib.Path]
        :return: Paths written.
        :rtype: List[pathlib.Path]
        """
        save_path = util.verify_dir(pathlib.Path(save_dir) / "round_by_round_json")

        written = []
        for iTab in range(1, tabulator.n_tabulations() + 1):
            json_dict = tabulator.get_round_by_round_dict(tabulation_num=iTab)
            fpath = save_path / f"place{iTab}.json"
            with open(fpath, "w") as outfile:
                json.dump(json_dict, outfile, indent=2)
            written.append(fpath)
        return written

    @staticmethod
    def write_placement_table(tabulator, save_dir: Union[str, pathlib.Path]) -> pathlib.Path:
        """Wrapper for `get_placement_table` that writes the table to '{save_dir}/placements.csv'

        :param tabulator: Tabulator object that has been executed.
        :type tabulator: Tabulator
        :param save_dir: Directory path to write the table to.
        :type save_dir: Union[str, pathlib.Path]
        :rtype: pathlib.Path
        """
        fpath = util.verify_dir(pathlib.Path(save_dir)) / "placements.csv"
        tabulator.get_placement_table().to_csv(fpath, index=False)
        return fpath

    def _ordered_candidate_names(self, tabulation_num: int = 1) -> List[str]:
        """
        Winner first, followed by losers in descending order of round eliminated.
        Ties are ordered by first round votes, then name.
        """
        election = self.get_election(tabulation_num)
        first_round_dict = election.get_round_tally_dict(1)

        reorder_dicts = []
        for d in election.get_candidate_outcomes():

            if d["round_elected"]:
                d["order"] = -1 * (1 / d["round_elected"])
            elif d["round_eliminated"]:
                d["order"] = 1 / d["round_eliminated"]
            else:
                d["order"] = 0

            reorder_dicts.append(d)

        return [
            d["name"]
            for d in sorted(
                reorder_dicts,
                key=lambda x: (x["order"], -first_round_dict[x["name"]], x["name"]),
            )
        ]

    def _round_counts(self, tabulation_num: int, round_num: int) -> Dict[str, Union[int, float]]:
        """Candidate counts for the round (NaN if not active), plus exhausted ballots under 'exhaust'."""
        election = self.get_election(tabulation_num)
        rnd_info = {name: util.NAN for name in election.get_round_tally_dict(round_num)}
        rnd_info.update(zip(*election.get_round_tally_tuple(round_num)))
        rnd_info["exhaust"] = election.initial_ballot_count - election.get_round_active_ballots(round_num)
        return rnd_info

    def get_round_by_round_table(self, tabulation_num: int = 1) -> pd.DataFrame:
        """Create a table containing round by round details for the tabulation.

        Each round has three columns: vote count, percent of the round's active ballots,
        and the change in count going into the next round.

        :param tabulation_num: tabulation number, defaults to 1
        :type tabulation_num: int, optional
        :return: round by round table
        :rtype: pd.DataFrame
        """
        election = self.get_election(tabulation_num)
        num_rounds = election.n_rounds()

        row_names = self._ordered_candidate_names(tabulation_num) + ["exhaust"]
        rounds_full = [self._round_counts(tabulation_num, i) for i in range(1, num_rounds + 1)]

        rcv_dict = {"candidate": row_names + ["colsum"]}

        # loop through rounds
        for rnd in range(1, num_rounds + 1):

            rnd_info = rounds_full[rnd - 1]
            rnd_active = election.get_round_active_ballots(rnd)

            counts = [rnd_info[name] for name in row_names]

            percents = []
            for name, count in zip(row_names, counts):
                if name == "exhaust" or util.is_nan(count) or not rnd_active:
                    percents.append(util.NAN)
                else:
                    percents.append(round(100 * count / rnd_active, 2))

            transfers = []
            for name, count in zip(row_names, counts):
                if rnd == num_rounds or util.is_nan(count):
                    transfers.append(util.NAN)
                else:
                    next_count = rounds_full[rnd][name]
                    transfers.append((0 if util.is_nan(next_count) else next_count) - count)

            rcv_dict[f"r{rnd}_count"] = counts + [sum(c for c in counts if not util.is_nan(c))]
            rcv_dict[f"r{rnd}_active_percent"] = percents + [100.0 if rnd_active else util.NAN]
            rcv_dict[f"r{rnd}_transfer"] = transfers + [
                util.NAN if rnd == num_rounds else sum(t for t in transfers if not util.is_nan(t))
            ]

        return pd.DataFrame(rcv_dict)

    def get_round_by_round_dict(self, tabulation_num: int = 1) -> Dict:
        """Create a dictionary containing round by round information that matches the nesting structure
        of the RCVIS upload format.

        :param tabulation_num: tabulation number, defaults to 1
        :type tabulation_num: int, optional
        :return: Dictionary containing round by round details
        :rtype: Dict
        """
        election = self.get_election(tabulation_num)
        n_rounds = election.n_rounds()
        outcomes = election.get_candidate_outcomes()
        rounds_full = [self._round_counts(tabulation_num, i) for i in range(1, n_rounds + 1)]

        json_dict = {
            "config": {
                "place": tabulation_num,
                "threshold": "dynamic",
                "ballots": election.initial_ballot_count,
            },
            "results": [],
        }

        for i in range(0, n_rounds):

            round_num = i + 1
            tally_dict = {cand: str(tally) for cand, tally in zip(*election.get_round_tally_tuple(round_num))}
            transfer_list = []

            # who had an outcome this round
            elected = [d for d in outcomes if d["round_elected"] == round_num]
            eliminated = [d for d in outcomes if d["round_eliminated"] == round_num]

            for d in elected:
                transfer_list.append({"elected": d["name"], "transfers": {}})

            round_transfer = {}
            if round_num < n_rounds:
                next_info = rounds_full[i + 1]
                for key, count in rounds_full[i].items():
                    if util.is_nan(count):
                        continue
                    next_count = 0 if util.is_nan(next_info[key]) else next_info[key]
                    if next_count > count:
                        round_transfer["exhausted" if key == "exhaust" else key] = str(next_count - count)

            for d in eliminated:
                # transfers can only be attributed when a single candidate is eliminated
                if len(eliminated) == 1:
                    transfer_list.append({"eliminated": d["name"], "transfers": round_transfer})
                else:
                    transfer_list.append({"eliminated": d["name"], "transfers": {}})

            json_dict["results"].append(
                {
                    "round": round_num,
                    "tally": tally_dict,
                    "tallyResults": transfer_list,
                }
            )

        return json_dict

    def get_placement_table(self) -> pd.DataFrame:
        """Create a table with one row per tabulation run: the place, the winner (None if the
        election failed), the number of rounds and the winner's final round count.

        :rtype: pd.DataFrame
        """
        rows = []
        for iTab in range(1, self.n_tabulations() + 1):
            election = self.get_election(iTab)
            final_round = election.n_rounds()
            winner = election.winner
            rows.append(
                {
                    "place": iTab,
                    "winner": winner.name if winner is not None else None,
                    "n_rounds": final_round,
                    "final_round_votes": (
                        election.get_round_tally_dict(final_round)[winner.name] if winner is not None else 0
                    ),
                    "final_round_active_ballots": election.get_round_active_ballots(final_round),
                }
            )
        return pd.DataFrame(
            rows, columns=["place", "winner", "n_rounds", "final_round_votes", "final_round_active_ballots"]
        )
