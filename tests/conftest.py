import pytest

from theater.models.catalog import PlayCatalog
from theater.models.invoice import Invoice, Performance
from theater.models.play import Play


@pytest.fixture
def plays() -> PlayCatalog:
    """Sample play catalog for testing."""
    return PlayCatalog(
        plays={
            "hamlet": Play(name="Hamlet", type="tragedy"),
            "as-like": Play(name="As You Like It", type="comedy"),
            "othello": Play(name="Othello", type="tragedy"),
        }
    )


@pytest.fixture
def big_co_invoice() -> Invoice:
    """Invoice with one tragedy and one comedy."""
    return Invoice.of(
        "BigCo",
        [
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
        ],
    )


@pytest.fixture
def sample_plays_json() -> str:
    """Sample plays.json contents."""
    return """{
  "hamlet": {"name": "Hamlet", "type": "tragedy"},
  "as-like": {"name": "As You Like It", "type": "comedy"},
  "othello": {"name": "Othello", "type": "tragedy"}
}"""


@pytest.fixture
def sample_invoices_json() -> str:
    """Sample invoices.json contents."""
    return """[
  {
    "customer": "BigCo",
    "performances": [
      {"playID": "hamlet", "audience": 55},
      {"playID": "as-like", "audience": 35},
      {"playID": "othello", "audience": 40}
    ]
  }
]"""
