import io
import json

import pandas as pd
import pytest

from rcv_tabulator.tabulator import Tabulator

KKS = ["Keith", "Kathy", "Steve"]

scenario_c = [["Keith", "Steve", "Kathy"]] * 3 + [["Kathy", "Steve", "Keith"]] * 4 + [["Steve", "Keith", "Kathy"]] * 2
exhausting = [["A"]] * 4 + [["B"]] * 3 + [["C"]] * 2


@pytest.fixture
def tabulator_c():
    tabulator = Tabulator.from_rankings(KKS, scenario_c)
    tabulator.execute(3, out=io.StringIO())
    return tabulator


@pytest.fixture
def tabulator_exhaust():
    tabulator = Tabulator.from_rankings(["A", "B", "C"], exhausting)
    tabulator.execute(1, out=io.StringIO())
    return tabulator


def test_round_by_round_table(tabulator_c):

    df = tabulator_c.get_round_by_round_table(tabulation_num=1)

    assert df.columns.tolist() == [
        "candidate",
        "r1_count",
        "r1_active_percent",
        "r1_transfer",
        "r2_count",
        "r2_active_percent",
        "r2_transfer",
    ]

    # winner first, then candidates still standing, then eliminated candidates
    assert df["candidate"].tolist() == ["Keith", "Kathy", "Steve", "exhaust", "colsum"]

    assert df["r1_count"].tolist() == [3, 4, 2, 0, 9]
    assert df["r1_active_percent"].tolist()[:3] == [33.33, 44.44, 22.22]
    assert df["r1_active_percent"].tolist()[4] == 100.0
    assert df["r1_transfer"].tolist() == [2, 0, -2, 0, 0]

    assert df["r2_count"].tolist()[:2] == [5, 4]
    assert pd.isna(df.loc[2, "r2_count"])
    assert df["r2_count"].tolist()[3:] == [0, 9]
    assert df["r2_active_percent"].tolist()[:2] == [55.56, 44.44]
    assert df["r2_transfer"].isna().all()


def test_round_by_round_table_exhaust(tabulator_exhaust):

    df = tabulator_exhaust.get_round_by_round_table()

    assert df["candidate"].tolist() == ["A", "B", "C", "exhaust", "colsum"]
    assert df["r1_count"].tolist() == [4, 3, 2, 0, 9]
    assert df["r1_transfer"].tolist() == [0, 0, -2, 2, 0]

    assert df["r2_count"].tolist()[:2] == [4, 3]
    assert df["r2_count"].tolist()[3:] == [2, 9]

    # percentages are of the active ballots in the round
    assert df["r2_active_percent"].tolist()[:2] == [57.14, 42.86]
    assert pd.isna(df.loc[3, "r2_active_percent"])


def test_later_places_count_emptied_ballots_as_exhaust():

    tabulator = Tabulator.from_rankings(KKS, [["Keith"]] * 3 + [["Kathy"], ["Steve", "Kathy"]])
    tabulator.execute(2, out=io.StringIO())

    df = tabulator.get_round_by_round_table(tabulation_num=2)
    assert df["candidate"].tolist() == ["Kathy", "Steve", "exhaust", "colsum"]
    assert df["r1_count"].tolist() == [1, 1, 3, 5]


def test_round_by_round_dict(tabulator_exhaust):

    assert tabulator_exhaust.get_round_by_round_dict() == {
        "config": {"place": 1, "threshold": "dynamic", "ballots": 9},
        "results": [
            {
                "round": 1,
                "tally": {"A": "4", "B": "3", "C": "2"},
                "tallyResults": [{"eliminated": "C", "transfers": {"exhausted": "2"}}],
            },
            {
                "round": 2,
                "tally": {"A": "4", "B": "3"},
                "tallyResults": [{"elected": "A", "transfers": {}}],
            },
        ],
    }


def test_round_by_round_dict_batch_elimination():

    tabulator = Tabulator.from_rankings(KKS, [["Keith", "Steve", "Kathy"], ["Kathy", "Steve", "Keith"]])
    tabulator.execute(out=io.StringIO())

    results = tabulator.get_round_by_round_dict()["results"]
    assert [r["round"] for r in results] == [1, 2, 3]
    assert results[0]["tallyResults"] == [{"eliminated": "Steve", "transfers": {}}]
    assert results[1]["tallyResults"] == [
        {"eliminated": "Kathy", "transfers": {}},
        {"eliminated": "Keith", "transfers": {}},
    ]
    assert results[2] == {"round": 3, "tally": {}, "tallyResults": []}


def test_placement_table(tabulator_c):

    df = tabulator_c.get_placement_table()

    assert df.to_dict("records") == [
        {"place": 1, "winner": "Keith", "n_rounds": 2, "final_round_votes": 5, "final_round_active_ballots": 9},
        {"place": 2, "winner": "Steve", "n_rounds": 1, "final_round_votes": 5, "final_round_active_ballots": 9},
        {"place": 3, "winner": "Kathy", "n_rounds": 1, "final_round_votes": 9, "final_round_active_ballots": 9},
    ]


def test_placement_table_failed_election():

    tabulator = Tabulator.from_rankings(KKS, [["Keith", "Steve", "Kathy"], ["Kathy", "Steve", "Keith"]])
    tabulator.execute(2, out=io.StringIO())

    records = tabulator.get_placement_table().to_dict("records")
    assert len(records) == 1
    assert records[0]["winner"] is None
    assert records[0]["n_rounds"] == 3
    assert records[0]["final_round_active_ballots"] == 0


def test_write_tables(tabulator_c, tmp_path):

    written = Tabulator.write_round_by_round_table(tabulator_c, tmp_path)
    assert [p.name for p in written] == ["place1.csv", "place2.csv", "place3.csv"]

    df = pd.read_csv(tmp_path / "round_by_round_table" / "place1.csv")
    assert df["candidate"].tolist() == ["Keith", "Kathy", "Steve", "exhaust", "colsum"]

    written = Tabulator.write_round_by_round_json(tabulator_c, tmp_path)
    assert [p.name for p in written] == ["place1.json", "place2.json", "place3.json"]
    with open(tmp_path / "round_by_round_json" / "place3.json") as f:
        assert json.load(f)["results"][0]["tally"] == {"Kathy": "9"}

    fpath = Tabulator.write_placement_table(tabulator_c, tmp_path / "nested")
    assert fpath == tmp_path / "nested" / "placements.csv"
    assert pd.read_csv(fpath)["winner"].tolist() == ["Keith", "Steve", "Kathy"]
