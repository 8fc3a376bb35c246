def pytest_addoption(parser):
    parser.addoption("--runslow", default=None, action="store_true", help="run slow tests")
    parser.addoption(
        "--record",
        dest="record",
        default=None,
        action="store_true",
        help="Record Matrix operations and save to 'record.txt'",
    )
