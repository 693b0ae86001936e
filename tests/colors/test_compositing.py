from chromacontrast import Color, overlay
from chromacontrast.samples import samples_overlay


def test_overlay_samples():
    for (fg, bg), expected in samples_overlay.items():
        assert Color(fg).overlay_on(Color(bg)).rgba == expected


def test_overlay_opaque_foreground_is_clone():
    fg = Color((53, 66, 240, 1))
    for bg in [Color((255, 255, 255)), Color((0, 0, 0, 0)), Color((9, 9, 9, 0.5))]:
        result = overlay(fg, bg)
        assert result == fg
        assert result is not fg


def test_overlay_onto_white(translucent_blue, white):
    assert translucent_blue.overlay_on(white).rgba == (215, 217, 252, 1)


def test_overlay_does_not_mutate_inputs(translucent_blue, white):
    before = (translucent_blue.rgba, white.rgba)
    translucent_blue.overlay_on(white)
    assert (translucent_blue.rgba, white.rgba) == before


def test_overlay_onto_transparent_keeps_alpha():
    fg = Color((200, 100, 50, 0.4))
    result = fg.overlay_on(Color("transparent"))
    assert result.alpha == 0.4
    assert result.rgb == (80, 40, 20)


def test_overlay_transparent_foreground_shows_background(black):
    bg = Color((10, 20, 30))
    assert Color("transparent").overlay_on(bg) == bg
    assert Color("transparent").overlay_on(black) == black
