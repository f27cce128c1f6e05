from pathlib import Path
from code_reviewer.config import Settings
from code_reviewer.constants import DEFAULT_MODEL, DEFAULT_SAFETY_SETTINGS, DEFAULT_SYSTEM_INSTRUCTION_PATH

def test_defaults(monkeypatch):
    for name in ("GEMINI_MODEL", "TEMPERATURE", "MAX_OUTPUT_TOKENS", "SAFETY_SETTINGS", "SYSTEM_INSTRUCTION_PATH"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.GEMINI_MODEL == DEFAULT_MODEL
    assert settings.TEMPERATURE == 0.7
    assert settings.MAX_OUTPUT_TOKENS == 2048
    assert settings.SAFETY_SETTINGS == DEFAULT_SAFETY_SETTINGS
    assert settings.SYSTEM_INSTRUCTION_PATH == DEFAULT_SYSTEM_INSTRUCTION_PATH

def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-test")
    monkeypatch.setenv("MAX_OUTPUT_TOKENS", "512")
    monkeypatch.setenv("SAFETY_SETTINGS", '{"HARM_CATEGORY_DANGEROUS_CONTENT": "BLOCK_ONLY_HIGH"}')
    monkeypatch.setenv("SYSTEM_INSTRUCTION_PATH", str(tmp_path / "persona.md"))

    settings = Settings(_env_file=None)

    assert settings.GEMINI_API_KEY == "env-key"
    assert settings.GEMINI_MODEL == "gemini-test"
    assert settings.MAX_OUTPUT_TOKENS == 512
    assert settings.SAFETY_SETTINGS == {"HARM_CATEGORY_DANGEROUS_CONTENT": "BLOCK_ONLY_HIGH"}
    assert settings.SYSTEM_INSTRUCTION_PATH == Path(tmp_path / "persona.md")

def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("GEMINI_API_KEY=file-key\nPORT=8080\n")

    settings = Settings(_env_file=env_file)

    assert settings.GEMINI_API_KEY == "file-key"
    assert settings.PORT == 8080
