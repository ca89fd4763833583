import glob


def pytest_generate_tests(metafunc):
    if "contest_path" in metafunc.fixturenames:

        test_contest_set = sorted(
            glob.glob(f"{metafunc.config.rootpath}/tests/tabulation_test/**/*.json", recursive=True)
        )

        metafunc.parametrize("contest_path", test_contest_set)
