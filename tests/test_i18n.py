from core.editor.interface.constants import LANG_PACK
from core.editor.interface.i18n import FALLBACK_LANG, effective_lang, messages, translate

def test_tests_run_in_english(monkeypatch):
    monkeypatch.delenv("TUIDO_LANG", raising=False)
    assert effective_lang("ru") == "en"
    assert translate("TODO_ADDED") == "TODO added"

def test_env_override_selects_language(monkeypatch):
    monkeypatch.setenv("TUIDO_LANG", "ru")
    assert translate("TODO_ADDED") == "Задача добавлена"
    assert translate("PASTED", count=3) == "Вставлено задач: 3"

def test_missing_translation_falls_back_to_english(monkeypatch):
    monkeypatch.setenv("TUIDO_LANG", "ru")
    assert translate("SHELL_USAGE") == "Usage: :!<command>"

def test_unknown_key_returns_key():
    assert translate("NO_SUCH_KEY") == "NO_SUCH_KEY"

def test_missing_format_argument_returns_template():
    assert translate("PASTED") == "Pasted {count} todos"

def test_every_language_serves_every_english_key():
    english = set(LANG_PACK[FALLBACK_LANG])
    for lang in LANG_PACK:
        table = messages(lang)
        assert all(key in table for key in english), lang

def test_unknown_language_uses_english_table():
    assert messages("xx") is LANG_PACK[FALLBACK_LANG]
