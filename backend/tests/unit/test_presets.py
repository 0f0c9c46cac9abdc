"""Unit tests for the printer and filament preset catalogue."""

from backend.app.utils.presets import (
    DEFAULT_DENSITY,
    FILAMENT_PRESETS,
    PRINTER_PRESETS,
    get_filament_presets,
    get_material_density,
    get_printer_preset,
    hours_to_months,
    months_to_hours,
)


class TestPresets:
    def test_material_density(self):
        assert get_material_density("PETG") == 1.27
        assert get_material_density("Unobtainium") == DEFAULT_DENSITY

    def test_printer_lookup(self):
        preset = get_printer_preset("Bambu Lab", "P1S")
        assert preset is not None
        assert preset.power_watts == 350
        assert preset.depreciation_hours == 8000
        assert get_printer_preset("Bambu Lab", "Z9") is None

    def test_filament_filter(self):
        petg = get_filament_presets(material="PETG")
        assert petg
        assert all(f.material == "PETG" for f in petg)
        assert get_filament_presets() == list(FILAMENT_PRESETS)
        assert get_filament_presets(brand="Prusament", material="ASA")[0].spool_weight_grams == 850

    def test_presets_have_positive_spool_weight(self):
        assert all(f.spool_weight_grams > 0 for f in FILAMENT_PRESETS)
        assert all(p.depreciation_hours > 0 for p in PRINTER_PRESETS)

    def test_month_hour_conversion(self):
        assert months_to_hours(36) == 8640
        assert hours_to_months(8640) == 36
        assert hours_to_months(5000) == 21
        assert months_to_hours(1, hours_per_day=24) == 720
