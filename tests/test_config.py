from src.trip_optimizer.config import Settings
from src.trip_optimizer.services.routing.solver import SolverOptions


def test_settings_defaults():
    config = Settings(_env_file=None)

    assert config.exact_solver_max_stops == 8
    assert config.nearest_neighbor_starts == 5
    assert config.two_opt_tolerance == 1e-4
    assert config.api_prefix == "/api"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TRIP_NEAREST_NEIGHBOR_STARTS", "3")
    monkeypatch.setenv("TRIP_EXACT_SOLVER_MAX_STOPS", "6")

    config = Settings(_env_file=None)

    assert config.nearest_neighbor_starts == 3
    assert config.exact_solver_max_stops == 6


def test_allowed_origins_parsing():
    assert Settings(_env_file=None, frontend_allowed_origins="http://a, http://b").frontend_allowed_origins == (
        "http://a",
        "http://b",
    )
    assert Settings(_env_file=None, frontend_allowed_origins='["http://c"]').frontend_allowed_origins == ("http://c",)
    assert Settings(_env_file=None, frontend_allowed_origins=["http://d"]).frontend_allowed_origins == ("http://d",)


def test_solver_options_default_from_settings(monkeypatch):
    from src.trip_optimizer.services.routing import solver as solver_module

    monkeypatch.setattr(solver_module.settings, "exact_solver_max_stops", 4)

    assert SolverOptions().exact_solver_max_stops == 4
