import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_payload() -> dict:
    return {
        "data": [
            {
                "id": "1",
                "type": "projection",
                "attributes": {"line_score": 24.5},
                "relationships": {
                    "new_player": {"data": {"id": "p1"}},
                    "stat_type": {"data": {"id": "s1"}},
                },
            }
        ],
        "included": [
            {"id": "p1", "type": "new_player", "attributes": {"name": "J. Doe"}},
            {"id": "s1", "type": "stat_type", "attributes": {"name": "Passing Yards"}},
        ],
    }
