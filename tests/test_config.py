"""
Tests for settings loading
"""

from patientgraph.config import Settings


def test_defaults():
    config = Settings(_env_file=None)

    assert config.api_port == 8080
    assert config.graphiql is True
    assert config.database_url.startswith("postgresql://")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PATIENTGRAPH_DATABASE_URL", "postgresql://u:p@db:5432/clinic")
    monkeypatch.setenv("PATIENTGRAPH_API_PORT", "9090")
    monkeypatch.setenv("PATIENTGRAPH_GRAPHIQL", "false")

    config = Settings(_env_file=None)

    assert config.database_url == "postgresql://u:p@db:5432/clinic"
    assert config.api_port == 9090
    assert config.graphiql is False
