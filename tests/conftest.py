import pytest

SAMPLE_ARCHIVE = """1-d, Annual Maximum, WaterYear=1 (January - December), Units in Inches
60-0011, CLEAR CK AT BAY AREA BLVD               , TX,  29.4977,  -95.1599, 2
06/11/1987    6.31
09/02/1988    5.46

60-0019, TURKEY CK AT FM 1959                    , TX,  29.5845,  -95.1869, 28
06/11/1987    3.99
09/02/1988    3.71
"""


class FakeTrino:
    """Records SQL instead of talking to a Trino server."""

    def __init__(self):
        self.statements = []

    def execute(self, sql):
        self.statements.append(" ".join(sql.split()))
        return []


@pytest.fixture
def sample_archive():
    return SAMPLE_ARCHIVE


@pytest.fixture
def fake_trino():
    return FakeTrino()
