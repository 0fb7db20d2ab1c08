"""Configures pytest further."""
import json
import pathlib

import pytest

from pkutils import utils


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session")
def vectors() -> dict:
    """Known-good parameter sets, with every decimal string parsed to an int."""
    with open(pathlib.Path(__file__).parent / "tests" / "data" / "vectors.json", "r", encoding="utf-8") as f:
        raw = json.load(f)
    return {
        k: {name: utils.bignum(val) for name, val in v.items()} if isinstance(v, dict) else utils.bignum(v)
        for k, v in raw.items()
    }
