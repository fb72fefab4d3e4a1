"""Tests for settings loading."""

from pathlib import Path

from qa_engine.config.settings import Settings, load_settings, read_properties


def test_defaults_are_empty_paths():
    settings = Settings()
    assert settings.document_path == ""
    assert settings.corpus_path == ""
    assert settings.passage_retriever == "sentence"


def test_read_properties(tmp_dir):
    path = Path(tmp_dir) / "Application.properties"
    path.write_text(
        "# run configuration\n"
        "DOCUMENT_PATH=/data/docs\n"
        "export CORPUS_PATH=/data/train.txt\n"
        "\n"
        "CLASSIFIER_PATH=/data/model.json  # persisted model\n",
        encoding="utf-8",
    )
    values = read_properties(path)
    assert values == {
        "DOCUMENT_PATH": "/data/docs",
        "CORPUS_PATH": "/data/train.txt",
        "CLASSIFIER_PATH": "/data/model.json",
    }


def test_quoted_values_are_unquoted(tmp_dir):
    path = Path(tmp_dir) / "quoted.properties"
    path.write_text(
        "DOCUMENT_PATH=\"data/docs\"\n"
        "CORPUS_PATH='data/my questions.txt'\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.document_path == "data/docs"
    assert settings.corpus_path == "data/my questions.txt"


def test_load_settings_from_properties(tmp_dir):
    path = Path(tmp_dir) / "run.properties"
    path.write_text(
        "DOCUMENT_PATH=/data/docs\nMAX_CANDIDATES=3\nUNRELATED_KEY=ignored\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.document_path == "/data/docs"
    assert settings.max_candidates == 3


def test_load_settings_missing_file_degrades_to_defaults(tmp_dir):
    settings = load_settings(Path(tmp_dir) / "missing.properties")
    assert settings.document_path == ""
    assert settings.classifier_path == Settings().classifier_path


def test_load_settings_invalid_value_degrades_to_defaults(tmp_dir):
    path = Path(tmp_dir) / "bad.properties"
    path.write_text("MAX_CANDIDATES=lots\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings.max_candidates == Settings().max_candidates


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("QA_DOCUMENT_PATH", "/env/docs")
    assert Settings().document_path == "/env/docs"
