"""Unit test configuration.

Bundled rule tables are parsed once per session; they are immutable so
sharing them between tests is safe.
"""

import pytest

from rules.parser import load_keyword_table, load_substitution_rules


@pytest.fixture(scope="session")
def keyword_table():
    return load_keyword_table()


@pytest.fixture(scope="session")
def substitution_rules():
    return load_substitution_rules()
