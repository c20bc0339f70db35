from app.core.config import Settings


class TestSettings:
    def test_port_defaults_to_5000(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)

        assert Settings(_env_file=None).PORT == 5000

    def test_port_is_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8123")

        assert Settings(_env_file=None).PORT == 8123

    def test_required_values_come_from_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "from-env")

        settings = Settings(_env_file=None)

        assert settings.JWT_SECRET == "from-env"
        assert settings.JWT_EXPIRE_DAYS == 7
