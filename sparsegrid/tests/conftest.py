import atexit
from pathlib import Path

import pytest

import sparsegrid as sg


def pytest_configure(config):
    record = config.getoption("--record", False)
    runslow = config.getoption("--runslow", False)
    config.runslow = bool(runslow)
    config.addinivalue_line("markers", "slow: Skipped unless --runslow passed")
    print(f"Running tests with record={bool(record)}, runslow={bool(runslow)}")
    if record:
        rec = sg.Recorder()
        rec.start()

        def save_records():
            with Path("record.txt").open("w") as f:  # pragma: no cover
                f.write("\n".join(rec.data))

        atexit.register(save_records)


def pytest_runtest_setup(item):
    if "slow" in item.keywords and not item.config.runslow:
        pytest.skip("need --runslow option to run")


@pytest.fixture(autouse=True)
def reset_config():
    with sg.config.set({"formatting.cell_width": 8, "recorder.max_rows": 20}):
        yield


def sequential(nrows, ncols, *, name=None):
    """Matrix filled row-major with 1, 2, 3, ..."""
    values = list(range(1, nrows * ncols + 1))
    rows = [values[i * ncols : (i + 1) * ncols] for i in range(nrows)]
    return sg.Matrix.from_dense(rows, nrows, ncols, name=name)
