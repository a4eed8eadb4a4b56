import pytest
from pydantic import ValidationError

from core.config import AppSettings, _parse_env_lines, write_user_env_vars


def test_settings_normalise_values():
    settings = AppSettings(
        _env_file=None,
        api_base_url="https://api.example.com/",
        default_sort="rating",
        log_level="debug",
    )
    assert settings.api_base_url == "https://api.example.com"
    assert settings.default_sort == "rating,asc"
    assert settings.log_level == "DEBUG"


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("COURSEDECK_DEFAULT_PAGE_SIZE", "24")
    monkeypatch.setenv("COURSEDECK_AUTH_TOKEN", "tok")
    settings = AppSettings(_env_file=None)
    assert settings.default_page_size == 24
    assert settings.auth_token == "tok"


@pytest.mark.parametrize("values", [{"default_page_size": 11}, {"default_sort": "price,asc"}, {"http_timeout_seconds": 0}])
def test_settings_reject_invalid(values):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **values)


def test_write_user_env_vars_merges(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nCOURSEDECK_API_BASE_URL='http://old'\n", encoding="utf-8")

    write_user_env_vars({"COURSEDECK_AUTH_TOKEN": "abc", "IGNORED": None}, env_path=env_path)

    data = _parse_env_lines(env_path.read_text(encoding="utf-8"))
    assert data == {"COURSEDECK_API_BASE_URL": "http://old", "COURSEDECK_AUTH_TOKEN": "abc"}
