import threading
from datetime import datetime

import pytest

from macswitch.models import MachineProfile
from macswitch.storage.profiles import DEFAULT_USER_ID, InMemoryProfileStore, StoredProfile


@pytest.fixture
def store():
    return InMemoryProfileStore()


class TestInMemoryProfileStore:
    def test_get_unknown(self, store):
        assert store.get("nobody") is None

    def test_save_and_get(self, store, windows_profile):
        saved = store.save("u-1", windows_profile, ["Git", "Slack"])
        assert store.get("u-1") is saved
        assert saved.applications == ("Git", "Slack")
        assert isinstance(saved.saved_at, datetime)
        assert saved.saved_at.tzinfo is not None

    def test_replace_overwrites(self, store, windows_profile):
        store.save("u-1", windows_profile, ["Git"])
        newer = MachineProfile(processor="Intel Core i5-1235U")
        store.save("u-1", newer)
        record = store.get("u-1")
        assert record.machine == newer
        assert record.applications == ()
        assert len(store) == 1

    def test_empty_user_id_rejected(self, store, windows_profile):
        with pytest.raises(ValueError):
            store.save("", windows_profile)

    def test_delete(self, store, windows_profile):
        store.save("u-1", windows_profile)
        assert store.delete("u-1") is True
        assert store.delete("u-1") is False
        assert store.get("u-1") is None

    def test_all(self, store, windows_profile):
        store.save("a", windows_profile)
        store.save("b", windows_profile)
        assert sorted(r.user_id for r in store.all()) == ["a", "b"]

    def test_concurrent_writers(self, store, windows_profile):
        def write(i):
            for _ in range(50):
                store.save(f"user-{i % 4}", windows_profile, [str(i)])

        threads = [threading.Thread(target=write, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store) == 4
        for record in store.all():
            # each stored record is one writer's complete record
            assert len(record.applications) == 1
            assert int(record.applications[0]) % 4 == int(record.user_id.split("-")[1])


class TestStoredProfile:
    def test_to_dict(self, windows_profile):
        record = StoredProfile("u-1", windows_profile, ("Git",))
        data = record.to_dict()
        assert data["user_id"] == "u-1"
        assert data["machine"]["processor"] == "Intel Core i7-12700H"
        assert data["machine"]["disks"][0]["size_gb"] == "512 GB"
        assert data["applications"] == ["Git"]
        assert data["saved_at"].endswith("+00:00")


class TestImportProfile:
    def test_keyed_by_user_id(self, store):
        record = store.import_profile({
            "UserId": " u-7 ",
            "MachineInfo": {"Processor": "Intel Core i5-1235U", "TotalMemoryGB": "8 GB"},
            "InstalledApplications": ["Slack", {"Name": "Zoom"}],
        })
        assert record.user_id == "u-7"
        assert store.get("u-7") is record
        assert record.machine.processor == "Intel Core i5-1235U"
        assert record.applications == ("Slack", "Zoom")

    def test_explicit_user_wins(self, store):
        record = store.import_profile({"UserId": "u-7", "processor": "x"}, user_id="alice")
        assert record.user_id == "alice"
        assert store.get("u-7") is None

    def test_missing_user_id(self, store):
        record = store.import_profile({"processor": "AMD Ryzen 5 5500U"})
        assert record.user_id == DEFAULT_USER_ID == "local"

    def test_reimport_replaces(self, store):
        store.import_profile({"UserId": "u-1", "processor": "old"})
        store.import_profile({"UserId": "u-1", "processor": "new"})
        assert len(store) == 1
        assert store.get("u-1").machine.processor == "new"
