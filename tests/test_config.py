from repo_manager.core.config import Config


def test_defaults_when_file_missing(tmp_path):
    config = Config.load(str(tmp_path / "missing.yaml"))

    assert config.app.port == 8081
    assert config.app.api_prefix == "/api"
    assert config.github.token_env == "GITHUB_TOKEN"


def test_load_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "app:\n"
        "  port: 9000\n"
        "  cors_origins: ['http://example.test']\n"
        "github:\n"
        "  token_env: GITHUB_PAT\n"
        "  timeout: 5\n"
    )

    config = Config.load(str(path))

    assert config.app.port == 9000
    assert config.app.cors_origins == ["http://example.test"]
    assert config.app.host == "0.0.0.0"
    assert config.github.token_env == "GITHUB_PAT"
    assert config.github.timeout == 5
    assert config.github.api_url == "https://api.github.com"


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("app:\n  api_prefix: /v1\n")
    monkeypatch.setenv("CONFIG_PATH", str(path))

    assert Config.load().app.api_prefix == "/v1"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert Config.load(str(path)) == Config()
