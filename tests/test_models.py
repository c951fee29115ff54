from datetime import date

import pytest

from macswitch.errors import CatalogUnavailableError, MacSwitchError, NoMatchesError
from macswitch.models import CostAssumptions, DiskInfo, MacSpec, MachineProfile


class TestMachineProfile:
    def test_from_collector_keys(self):
        profile = MachineProfile.from_dict({
            "ComputerName": "DESKTOP-1",
            "OSName": "Microsoft Windows 11 Pro",
            "Processor": " Intel Core i7-1165G7 ",
            "PhysicalCores": 4,
            "LogicalCores": "8",
            "TotalMemoryGB": "16 GB",
            "Disks": [{"Name": "C:", "FileSystem": "NTFS", "SizeGB": "512 GB", "FreeGB": "100 GB"}],
        })
        assert profile.computer_name == "DESKTOP-1"
        assert profile.os_name == "Microsoft Windows 11 Pro"
        assert profile.processor == "Intel Core i7-1165G7"
        assert (profile.physical_cores, profile.logical_cores) == (4, 8)
        assert profile.disks == (DiskInfo("C:", "NTFS", "512 GB", "100 GB"),)

    def test_missing_fields(self):
        profile = MachineProfile.from_dict({})
        assert profile.processor == ""
        assert profile.physical_cores == 0
        assert profile.disks == ()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            MachineProfile().processor = "x"


class TestMacSpec:
    def test_signature_and_price(self):
        mac = MacSpec(model="MacBook Air 13", ram_gb=16, storage_gb=512, msrp_aed=5199)
        assert mac.signature == ("MacBook Air 13", 16, 512)
        assert mac.is_priced

    def test_to_dict_dates(self):
        mac = MacSpec(model="MacBook Air 13", launch_date=date(2024, 3, 8))
        assert mac.to_dict()["launch_date"] == "2024-03-08"
        assert MacSpec(model="x").to_dict()["launch_date"] is None


class TestCostAssumptions:
    def test_defaults(self):
        a = CostAssumptions()
        assert a.region == "UAE"
        assert a.power_cost_aed_per_kwh == 0.30
        assert a.mac_resale_value_pct == 0.50
        assert a.hours_per_year == 1920

    def test_from_mapping(self):
        a = CostAssumptions.from_mapping({"WORKDAYS_PER_YEAR": "220", "region": "", "x": 1})
        assert a.workdays_per_year == 220.0
        assert a.region == "UAE"
        assert a.hours_per_year == 1760

    def test_replace_returns_copy(self):
        a = CostAssumptions()
        b = a.replace(windows_licensing_aed=400)
        assert b.windows_licensing_aed == 400
        assert a.windows_licensing_aed == 0


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(NoMatchesError, MacSwitchError)
        assert issubclass(CatalogUnavailableError, MacSwitchError)

    def test_messages(self):
        assert str(NoMatchesError()) == "No matching Mac found"
        assert str(CatalogUnavailableError("data/macbooks.csv")) == (
            "Mac catalog is empty or missing at data/macbooks.csv"
        )
        assert str(CatalogUnavailableError()) == "Mac catalog is empty or missing"
