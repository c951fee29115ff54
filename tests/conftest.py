"""Shared fixtures for the macswitch test suite."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src/ is on the path so "import macswitch" works when running from repo root.
src_path = str(Path(__file__).resolve().parents[1] / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from macswitch.models import CostAssumptions, DiskInfo, MacSpec, MachineProfile  # noqa: E402


AIR_PORTS = "2x Thunderbolt / USB 4; MagSafe 3"
PRO_PORTS = "3x Thunderbolt 4; HDMI; SDXC; MagSafe 3"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def windows_profile():
    """A 12th-gen i7 laptop with 16 GB RAM and a 512 GB disk."""
    return MachineProfile(
        computer_name="DESKTOP-TEST",
        manufacturer="Dell Inc.",
        model="XPS 15",
        os_name="Microsoft Windows 11 Pro",
        os_version="10.0.22631",
        build_number="22631",
        processor="Intel Core i7-12700H",
        physical_cores=8,
        logical_cores=16,
        total_memory_gb="16 GB",
        disks=(DiskInfo(name="C:", file_system="NTFS", size_gb="512 GB", free_gb="200 GB"),),
    )


@pytest.fixture
def air_m2_base():
    return MacSpec(
        model="MacBook Air 13", chip="M2", cores_cpu=8, cores_gpu=8, ram_gb=8, storage_gb=256,
        display_inches=13.6, display_nits=500, refresh_hz=60, weight_kg=1.24, ports=AIR_PORTS,
        msrp_aed=3999, launch_date=date(2022, 7, 15), battery_wh=52.6, wifi="Wi-Fi 6",
    )


@pytest.fixture
def air_m2_upgraded():
    return MacSpec(
        model="MacBook Air 13", chip="M2", cores_cpu=8, cores_gpu=10, ram_gb=16, storage_gb=512,
        display_inches=13.6, display_nits=500, refresh_hz=60, weight_kg=1.24, ports=AIR_PORTS,
        msrp_aed=5199, launch_date=date(2022, 7, 15), battery_wh=52.6, wifi="Wi-Fi 6",
    )


@pytest.fixture
def pro_m3_pro():
    return MacSpec(
        model="MacBook Pro 14", chip="M3 Pro", cores_cpu=11, cores_gpu=14, ram_gb=18, storage_gb=512,
        display_inches=14.2, display_nits=1000, refresh_hz=120, weight_kg=1.61, ports=PRO_PORTS,
        msrp_aed=8499, launch_date=date(2023, 11, 7), battery_wh=72.4, wifi="Wi-Fi 6E",
    )


@pytest.fixture
def pro_m3_max():
    return MacSpec(
        model="MacBook Pro 16", chip="M3 Max", cores_cpu=16, cores_gpu=40, ram_gb=48, storage_gb=1024,
        display_inches=16.2, display_nits=1000, refresh_hz=120, weight_kg=2.16, ports=PRO_PORTS,
        msrp_aed=15999, launch_date=date(2023, 11, 7), battery_wh=100.0, wifi="Wi-Fi 6E",
    )


@pytest.fixture
def sample_catalog(air_m2_base, air_m2_upgraded, pro_m3_pro, pro_m3_max):
    """Catalog order deliberately differs from the expected ranking."""
    return [pro_m3_max, pro_m3_pro, air_m2_upgraded, air_m2_base]


@pytest.fixture
def default_assumptions():
    return CostAssumptions()


@pytest.fixture
def developer_apps():
    return [
        "Microsoft Visual Studio Code",
        "Git",
        "Docker Desktop",
        "Microsoft .NET Framework 4.8 Targeting Pack",
    ]


@pytest.fixture
def catalog_csv(tmp_path):
    path = tmp_path / "macbooks.csv"
    path.write_text(
        "model,chip,cores_cpu,cores_gpu,ram_gb,storage_gb,display_inches,display_nits,"
        "refresh_hz,weight_kg,ports,msrp_aed,launch_date,battery_wh,wifi\n"
        f"MacBook Air 13,M2,8,8,8,256,13.6,500,60,1.24,{AIR_PORTS},3999,2022-07-15,52.6,Wi-Fi 6\n"
        f"MacBook Air 13,M2,8,10,16,512,13.6,500,60,1.24,{AIR_PORTS},5199,2022-07-15,52.6,Wi-Fi 6\n"
        f"MacBook Pro 14,M3 Pro,11,14,18,512,14.2,1000,120,1.61,{PRO_PORTS},8499,2023-11-07,72.4,Wi-Fi 6E\n"
        f"MacBook Pro 16,M3 Max,16,40,48,1024,16.2,1000,120,2.16,{PRO_PORTS},15999,2023-11-07,100,Wi-Fi 6E\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def profile_json(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(
        """{
  "UserId": "u-1",
  "MachineInfo": {
    "ComputerName": "DESKTOP-TEST",
    "Processor": "Intel Core i7-12700H",
    "PhysicalCores": 8,
    "LogicalCores": 16,
    "TotalMemoryGB": "16 GB",
    "Disks": [{"Name": "C:", "FileSystem": "NTFS", "SizeGB": "512 GB", "FreeGB": "200 GB"}]
  },
  "InstalledApplications": ["Microsoft Visual Studio Code", "Git", "Slack"]
}""",
        encoding="utf-8",
    )
    return path
