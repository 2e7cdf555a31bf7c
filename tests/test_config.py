"""Tests for settings loading."""

from corrgame.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.default_sample_size == 50
        assert (settings.min_sample_size, settings.max_sample_size) == (10, 1000)
        assert settings.default_target_r == 0.5
        assert settings.target_r_limit == 0.95
        assert settings.target_jitter == 0.09
        assert settings.generation_rho_limit == 0.98
        assert settings.default_tolerance == 0.1
        assert settings.seed is None

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("CORRGAME_TOLERANCE", "0.2")
        monkeypatch.setenv("CORRGAME_SEED", "7")

        settings = Settings()

        assert settings.default_tolerance == 0.2
        assert settings.seed == 7

    def test_bounds_are_normalized(self) -> None:
        settings = Settings(min_sample_size=500, max_sample_size=20, default_tolerance=-0.3)

        assert (settings.min_sample_size, settings.max_sample_size) == (20, 500)
        assert settings.default_tolerance == 0.3
