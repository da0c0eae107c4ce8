from shootdesk.config import Settings, load_reference_excerpt, load_settings


def test_reference_excerpt_is_truncated(tmp_path):
    doc = tmp_path / "Studio_Full_Instructions.txt"
    doc.write_text("a" * 6500, encoding="utf-8")
    assert load_reference_excerpt(str(doc)) == "a" * 6000


def test_missing_reference_document_is_empty(tmp_path):
    assert load_reference_excerpt(str(tmp_path / "missing.txt")) == ""


def test_load_settings_from_environment(monkeypatch, tmp_path):
    doc = tmp_path / "doc.txt"
    doc.write_text("Rules", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("IMAGE_PROVIDER_URL", "https://proxy.test/v1/")
    monkeypatch.setenv("PROVIDER_TIMEOUT", "30")
    monkeypatch.setenv("DEBUG_IMAGE", "true")
    monkeypatch.setenv("STUDIO_DOC_PATH", str(doc))
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://studio.test")

    settings = load_settings()
    assert settings.has_credentials
    assert settings.provider_url == "https://proxy.test/v1"
    assert settings.provider_timeout == 30.0
    assert settings.debug_image is True
    assert settings.reference_excerpt == "Rules"
    assert settings.cors_origins == ["http://localhost:3000", "https://studio.test"]


def test_load_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("OPENAI_API_KEY", "PROVIDER_TIMEOUT", "DEBUG_IMAGE", "STUDIO_DOC_PATH"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert not settings.has_credentials
    assert settings.provider_timeout is None
    assert settings.debug_image is False
    assert settings.reference_excerpt == ""


def test_invalid_timeout_is_ignored(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROVIDER_TIMEOUT", "soon")
    assert load_settings().provider_timeout is None


def test_settings_defaults():
    settings = Settings()
    assert settings.cors_origins == ["*"]
    assert settings.image_model == "gpt-image-1"
