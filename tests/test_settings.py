import logging
from pathlib import Path

from promatch.config import Settings


def test_defaults_without_environment():
    settings = Settings.from_env({})
    assert settings.session_dir == Path("sessions")
    assert settings.upload_dir == Path("uploads")
    assert settings.roster_path is None
    assert settings.top_k == 5
    assert settings.port == 3000
    assert settings.cors_origins == ("*",)


def test_environment_overrides(tmp_path: Path):
    env = {
        "PROMATCH_SESSION_DIR": str(tmp_path / "s"),
        "PROMATCH_UPLOAD_DIR": str(tmp_path / "u"),
        "PROMATCH_ROSTER_PATH": str(tmp_path / "pros.json"),
        "PROMATCH_TOP_K": "3",
        "PROMATCH_CORS_ORIGINS": "http://localhost:5173, https://app.example.com",
        "PORT": "8080",
    }
    settings = Settings.from_env(env)
    assert settings.session_dir == tmp_path / "s"
    assert settings.upload_dir == tmp_path / "u"
    assert settings.roster_path == tmp_path / "pros.json"
    assert settings.top_k == 3
    assert settings.port == 8080
    assert settings.cors_origins == ("http://localhost:5173", "https://app.example.com")


def test_invalid_ints_fall_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        settings = Settings.from_env({"PROMATCH_TOP_K": "many", "PORT": "http"})
    assert settings.top_k == 5
    assert settings.port == 3000
    assert "PROMATCH_TOP_K" in caplog.text


def test_top_k_has_a_floor_of_one():
    assert Settings.from_env({"PROMATCH_TOP_K": "0"}).top_k == 1
