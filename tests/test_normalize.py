import numpy as np
import pytest

from macswitch.models import DiskInfo, MachineProfile, PersonaWeights
from macswitch.processing.normalize import (
    clamp,
    cpu_score_mac,
    cpu_score_windows,
    mac_vector,
    norm_ram,
    norm_ram_mac,
    norm_storage,
    norm_storage_mac,
    parse_gb,
    windows_ram_gb,
    windows_storage_gb,
    windows_vector,
)


# =====================================================================
# CPU scores
# =====================================================================

class TestWindowsCpuScore:
    def test_i7_with_attached_suffix_gets_no_generation_bonus(self):
        # "12700h" is not a standalone number
        assert cpu_score_windows("Intel Core i7-12700H", 8) == pytest.approx(0.85)

    def test_standalone_recent_generation_number(self):
        assert cpu_score_windows("Intel Core i5 12400", 6) == pytest.approx(0.72)

    def test_ryzen_family(self):
        assert cpu_score_windows("AMD Ryzen 7 7840HS", 8) == pytest.approx(0.85)

    def test_unknown_family_uses_default(self):
        assert cpu_score_windows("Intel Pentium Silver", 2) == pytest.approx(0.60)

    def test_missing_processor(self):
        assert cpu_score_windows(None) == pytest.approx(0.60)

    def test_high_end_clamped(self):
        assert cpu_score_windows("Intel Core i9 13900", 24) == 1.0

    def test_core_brackets(self):
        assert cpu_score_windows("i3", 4) == pytest.approx(0.50)
        assert cpu_score_windows("i3", 6) == pytest.approx(0.52)
        assert cpu_score_windows("i3", 8) == pytest.approx(0.55)
        assert cpu_score_windows("i3", 12) == pytest.approx(0.58)


class TestMacCpuScore:
    def test_m1_eight_cores(self):
        assert cpu_score_mac("Apple M1", 8) == pytest.approx(0.891)

    def test_m1_four_cores(self):
        assert cpu_score_mac("M1", 4) == pytest.approx(0.8775)

    def test_unknown_chip(self):
        assert cpu_score_mac("Intel", 0) == pytest.approx(0.945)

    def test_clamped_to_one(self):
        assert cpu_score_mac("M2", 0) == 1.0
        assert cpu_score_mac("M3 Max", 16) == 1.0

    def test_missing_chip(self):
        assert cpu_score_mac(None, 0) == pytest.approx(0.945)


# =====================================================================
# RAM / storage scales
# =====================================================================

class TestScales:
    @pytest.mark.parametrize("gb, expected", [
        (4, 0.0), (8, 0.0), (36, 0.5), (64, 1.0), (128, 1.0),
    ])
    def test_ram(self, gb, expected):
        assert norm_ram(gb) == pytest.approx(expected)

    @pytest.mark.parametrize("gb, expected", [
        (128, 0.0), (256, 0.0), (1152, 0.5), (2048, 1.0), (4096, 1.0),
    ])
    def test_storage(self, gb, expected):
        assert norm_storage(gb) == pytest.approx(expected)

    def test_mac_ram_uses_unified_memory_multiplier(self):
        assert norm_ram_mac(16) == pytest.approx(12 / 56)

    def test_mac_storage_uses_ssd_multiplier(self):
        assert norm_storage_mac(512) == pytest.approx((563.2 - 256) / 1792)

    def test_clamp(self):
        assert clamp(-0.5) == 0.0
        assert clamp(1.5) == 1.0
        assert clamp(5, 0, 10) == 5


# =====================================================================
# Profile parsing
# =====================================================================

class TestParseGb:
    def test_value_with_unit(self):
        assert parse_gb("16 GB") == 16.0

    def test_decimal(self):
        assert parse_gb("15.7 GB") == 15.7

    @pytest.mark.parametrize("text", [None, "", "   ", "abc GB", "nan GB", "inf GB"])
    def test_unparseable_returns_default(self, text):
        assert parse_gb(text, 8) == 8


class TestProfileCapacities:
    def test_largest_disk_wins(self):
        profile = MachineProfile(disks=(
            DiskInfo(name="C:", size_gb="256 GB"),
            DiskInfo(name="D:", size_gb="1024 GB"),
            DiskInfo(name="E:", size_gb="bad"),
        ))
        assert windows_storage_gb(profile) == 1024

    def test_no_parseable_disk_defaults(self):
        profile = MachineProfile(disks=(DiskInfo(name="C:", size_gb="n/a"),))
        assert windows_storage_gb(profile) == 256
        assert windows_storage_gb(MachineProfile()) == 256
        assert windows_storage_gb(MachineProfile(), default=512) == 512

    def test_missing_memory_defaults_to_8(self):
        assert windows_ram_gb(MachineProfile()) == 8
        assert windows_ram_gb(MachineProfile(total_memory_gb="32 GB")) == 32

    def test_fractional_gb_rounded(self):
        assert windows_ram_gb(MachineProfile(total_memory_gb="15.75 GB")) == 16
        assert windows_ram_gb(MachineProfile(total_memory_gb="7.8 GB")) == 8
        profile = MachineProfile(disks=(
            DiskInfo(name="C:", size_gb="476.3 GB"),
            DiskInfo(name="D:", size_gb="0.4 GB"),
        ))
        assert windows_storage_gb(profile) == 476

    def test_sub_gb_disks_ignored(self):
        profile = MachineProfile(disks=(DiskInfo(name="E:", size_gb="0.3 GB"),))
        assert windows_storage_gb(profile) == 256


# =====================================================================
# Vectors
# =====================================================================

class TestVectors:
    def test_windows_vector(self, windows_profile):
        vec = windows_vector(windows_profile)
        assert vec.shape == (3,)
        np.testing.assert_allclose(vec, [0.85, 8 / 56, 256 / 1792])

    def test_windows_vector_weighted(self, windows_profile):
        weights = PersonaWeights(cpu=2.0, ram=1.0, storage=0.5)
        vec = windows_vector(windows_profile, weights)
        np.testing.assert_allclose(vec, [1.7, 8 / 56, 128 / 1792])

    def test_mac_vector(self, air_m2_upgraded):
        vec = mac_vector(air_m2_upgraded)
        np.testing.assert_allclose(vec, [1.0, 12 / 56, 307.2 / 1792])

    def test_components_in_unit_range(self, sample_catalog):
        for mac in sample_catalog:
            vec = mac_vector(mac)
            assert ((vec >= 0) & (vec <= 1)).all()
