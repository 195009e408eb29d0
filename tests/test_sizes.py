from postercrop.imaging.sizes import A1, A2, PPCM, REFERENCE_FRAME, WEB_THUMBNAIL, target_pixels

def test_a1_total_and_pixels():
    assert (A1.total_width_cm, A1.total_height_cm) == (60.0, 84.7)
    assert A1.pixel_size().as_tuple() == (7087, 10004)

def test_a2_total_and_pixels():
    assert (A2.total_width_cm, A2.total_height_cm) == (42.6, 60.0)
    # ceil(42.6 * 118.1102) = ceil(5031.49) and ceil(60 * 118.1102) = ceil(7086.61)
    assert A2.pixel_size().as_tuple() == (5032, 7087)

def test_pixels_never_undershoot_page():
    for spec in (A1, A2):
        px = spec.pixel_size()
        assert px.width / PPCM >= spec.total_width_cm
        assert px.height / PPCM >= spec.total_height_cm
        assert (px.width - 1) / PPCM < spec.total_width_cm

def test_target_pixels_ceils():
    assert target_pixels(1.0, 0.01) == (119, 2)

def test_describe_matches_print_labels():
    assert A1.describe() == "60 x 84.7 cm (incl. 3mm bleed)"
    assert A2.describe() == "42.6 x 60 cm (incl. 3mm bleed)"

def test_reference_frame_is_a1_and_thumbnail_is_fixed():
    assert REFERENCE_FRAME is A1
    assert WEB_THUMBNAIL.as_tuple() == (912, 1296)
