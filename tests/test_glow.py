import pytest

from glasstty.glow import BLUR_RADIUS, DEFAULT_GAMMA, Color, Glow, make_kernel

BRIGHT = Color(r=0x47, g=0xFF, b=0x9F, a=0xFF)
DIM = Color(r=0x0C, g=0xCC, b=0x68, a=0xFF)
SIZE = 2 * BLUR_RADIUS + 1


def lit_raster(width, height, x, y):
    raster = [Color()] * (width * height)
    raster[y * width + x] = Color.from_word(0xFF)
    return raster


def test_kernel_shape_and_symmetry():
    kernel = make_kernel(1.5)
    assert len(kernel) == SIZE
    assert all(len(row) == SIZE for row in kernel)
    for i in range(SIZE):
        for j in range(SIZE):
            assert kernel[i][j] == pytest.approx(kernel[j][i])
            assert kernel[i][j] == pytest.approx(kernel[SIZE - 1 - i][j])


def test_kernel_peak_at_centre():
    kernel = make_kernel(1.3)
    centre = kernel[BLUR_RADIUS][BLUR_RADIUS]
    assert centre == max(max(row) for row in kernel)


def test_wider_kernel_has_lower_peak():
    assert make_kernel(2.0)[BLUR_RADIUS][BLUR_RADIUS] < make_kernel(1.0)[BLUR_RADIUS][BLUR_RADIUS]


def test_color_from_word_low_byte_is_alpha():
    assert Color.from_word(0xFF) == Color(0, 0, 0, 255)
    assert Color.from_word(0xFFFFFFFF) == Color(255, 255, 255, 255)


@pytest.mark.parametrize("word", [0, 0xFF, 0x12345678, 0xFFFFFFFF])
def test_color_word_round_trip(word):
    assert Color.from_word(word).to_word() == word


def test_default_gamma():
    assert Glow(1.5, BRIGHT, DIM).gamma == DEFAULT_GAMMA


def test_blank_raster_is_black():
    glow = Glow(1.5, BRIGHT, DIM)
    raster = [Color()] * (12 * 10)
    assert glow.pixel(raster, 12, 10, 5, 5) == Color(0, 0, 0, 255)


def test_lit_pixel_is_bright():
    glow = Glow(1.5, BRIGHT, DIM)
    raster = lit_raster(12, 12, 6, 6)
    assert glow.pixel(raster, 12, 12, 6, 6) == BRIGHT


def test_neighbour_glows_dimmer():
    glow = Glow(1.5, BRIGHT, DIM)
    raster = lit_raster(12, 12, 6, 6)
    c = glow.pixel(raster, 12, 12, 7, 6)
    assert c.a == 255
    assert 0 < c.g <= DIM.g
    assert c.r <= DIM.r and c.b <= DIM.b


def test_pixel_beyond_radius_is_dark():
    glow = Glow(1.5, BRIGHT, DIM)
    width = 2 * BLUR_RADIUS + 4
    raster = lit_raster(width, 3, 0, 1)
    assert glow.pixel(raster, width, 3, width - 1, 1) == Color(0, 0, 0, 255)


def test_blur_is_opaque_and_symmetric():
    glow = Glow(1.5, BRIGHT, DIM)
    width = height = 11
    out = glow.blur(lit_raster(width, height, 5, 5), width, height)
    assert len(out) == width * height
    assert all(c.a == 255 for c in out)
    assert out[5 * width + 5] == BRIGHT
    for y in range(height):
        row = out[y * width:(y + 1) * width]
        assert row == row[::-1]


def test_blur_rejects_wrong_size():
    glow = Glow(1.5, BRIGHT, DIM)
    with pytest.raises(ValueError):
        glow.blur([Color()] * 5, 3, 3)