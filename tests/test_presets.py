from postercrop.imaging.presets import PRESETS, PRINT_JPEG, RESIZE_WEBP, save_kwargs
from postercrop.models.enums import ExportFormat

def test_preset_qualities():
    assert PRESETS["print"].format is ExportFormat.JPEG and PRESETS["print"].quality == 95
    assert PRESETS["thumbnail"].format is ExportFormat.WEBP and PRESETS["thumbnail"].quality == 90
    assert PRESETS["resize"].format is ExportFormat.WEBP and PRESETS["resize"].quality == 85

def test_only_print_carries_dpi():
    assert save_kwargs(PRINT_JPEG) == {"format": "JPEG", "quality": 95, "dpi": (300, 300)}
    assert "dpi" not in save_kwargs(RESIZE_WEBP)
