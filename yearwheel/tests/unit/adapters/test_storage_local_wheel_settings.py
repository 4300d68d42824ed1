import json

import pytest

from yearwheel.adapters.storage_local import StorageLocal
from yearwheel.viewmodels.settings_vm import WheelSettingsVM


def test_user_settings_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    payload = {
        "user_id": "u1",
        "organization_id": "org1",
        "layer_order": ["layer-org", "layer-holidays-no"],
        "layer_visibility": {"layer-groups": False},
        "theme": "dark",
        "locale": "nn",
    }

    storage.save_user_settings("u1", payload)

    assert storage.load_user_settings("u1") == payload
    assert (tmp_path / "user_settings_u1.json").exists()


def test_missing_file_and_delete(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path / "nested"))

    assert storage.load_user_settings("u2") is None
    storage.delete_user_settings("u2")

    vm = WheelSettingsVM()
    storage.save_user_settings("u2", vm.to_dict())
    with (tmp_path / "nested" / "user_settings_u2.json").open("r", encoding="utf-8") as fh:
        assert json.load(fh) == vm.to_dict()

    storage.delete_user_settings("u2")
    assert storage.load_user_settings("u2") is None


def test_user_ids_are_sanitized(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    storage.save_user_settings("../evil/user name", {"theme": "light"})

    assert (tmp_path / "user_settings_.._evil_user_name.json").exists()
    assert storage.load_user_settings("../evil/user name") == {"theme": "light"}


def test_non_object_file_is_rejected(tmp_path):
    (tmp_path / "user_settings_u3.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        StorageLocal(root_dir=str(tmp_path)).load_user_settings("u3")
