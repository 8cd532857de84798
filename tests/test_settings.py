import json

from refshelf.config.settings import AppSettings
from refshelf.core.version import Version


def test_defaults(tmp_path):
    settings = AppSettings.load(str(tmp_path / "missing.json"))
    assert settings.version_check_enabled is True
    assert settings.ignored_version == ""
    assert settings.get_ignored_version() is None


def test_round_trip(tmp_path):
    path = str(tmp_path / "settings.json")
    AppSettings(data_dir=str(tmp_path), version_check_enabled=False,
                ignored_version="5.2--beta").save(path)
    loaded = AppSettings.load(path)
    assert loaded.version_check_enabled is False
    assert loaded.get_ignored_version() == Version.parse("5.2--beta")


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"ignored_version": "5.1", "listen_port": 6881}),
                    encoding='utf-8')
    assert AppSettings.load(str(path)).ignored_version == "5.1"


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding='utf-8')
    assert AppSettings.load(str(path)).version_check_enabled is True


def test_set_ignored_version_persists(tmp_path):
    settings = AppSettings(data_dir=str(tmp_path))
    settings.set_ignored_version(Version.parse("5.1"))
    data = json.loads((tmp_path / "settings.json").read_text(encoding='utf-8'))
    assert data["ignored_version"] == "5.1"


def test_unparsable_ignored_version_reads_as_none(tmp_path):
    settings = AppSettings(data_dir=str(tmp_path), ignored_version="latest")
    assert settings.get_ignored_version() is None


def test_non_ascii_digits_read_as_none(tmp_path):
    settings = AppSettings(data_dir=str(tmp_path), ignored_version="٥.1")
    assert settings.get_ignored_version() is None
