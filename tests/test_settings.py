"""
Tests for building settings and serializing them into the image path.
"""

import logging

import pytest
from pydantic import ValidationError

from thumbor_url.api.settings import Settings, SettingsBuilder
from thumbor_url.domain.types.filter import Blur, Brightness, Contrast, Grayscale
from thumbor_url.domain.types.geometry import Point, Rect
from thumbor_url.domain.types.options import FitIn, HAlign, ResponseMode, Trim, VAlign
from thumbor_url.ops.canonical import format_filters

IMAGE = "path/to/my/image.jpg"

FULL_PATH = (
    "debug/trim:bottom-right/10x20:110x120/adaptive-fit-in/300x200/left/bottom/smart/"
    "filters:brightness(10):contrast(20)/path/to/my/image.jpg"
)


@pytest.fixture
def full_builder(unsafe_server):
    # options deliberately set out of URL order
    return (
        unsafe_server.settings_builder()
        .filters([Brightness(10), Contrast(20)])
        .smart()
        .v_align(VAlign.BOTTOM)
        .h_align(HAlign.LEFT)
        .resize((300, 200))
        .fit_in(FitIn.ADAPTIVE)
        .crop(((10, 20), (110, 120)))
        .trim(Trim.BOTTOM_RIGHT)
        .response(ResponseMode.DEBUG)
    )


def test_empty_settings(unsafe_server):
    settings = unsafe_server.settings_builder().build()
    assert settings.canonical_path(IMAGE) == IMAGE
    assert settings.to_path(IMAGE) == "/unsafe/path/to/my/image.jpg"
    assert settings.to_url(IMAGE) == "http://localhost:8888/unsafe/path/to/my/image.jpg"


def test_to_url_logs_built_url(unsafe_server, caplog):
    caplog.set_level(logging.DEBUG, logger="thumbor_url.api.settings")
    url = unsafe_server.settings_builder().build().to_url(IMAGE)

    record = caplog.records[-1]
    assert record.msg == "Built URL %s"
    assert record.args == (url,)
    assert record.getMessage() == f"Built URL {url}"


def test_defaults(unsafe_server):
    settings = SettingsBuilder(unsafe_server).build()
    assert settings.smart is False
    assert settings.filters == ()
    assert settings.resize is None
    assert settings.server is unsafe_server


def test_segments_follow_fixed_order(full_builder):
    assert full_builder.build().canonical_path(IMAGE) == FULL_PATH


def test_encoding_is_deterministic(full_builder):
    settings = full_builder.build()
    assert settings.canonical_path(IMAGE) == settings.canonical_path(IMAGE)
    assert full_builder.build().to_url(IMAGE) == settings.to_url(IMAGE)


@pytest.mark.parametrize(
    "unset",
    ["response", "trim", "crop", "fit_in", "resize", "h_align", "v_align"],
)
def test_unset_option_keeps_order_of_the_others(full_builder, unset):
    full_segments = FULL_PATH.split("/")
    settings = getattr(full_builder, unset)(None).build()
    segments = settings.canonical_path(IMAGE).split("/")

    assert len(segments) == len(full_segments) - 1
    assert [s for s in full_segments if s in segments] == segments


def test_unset_smart_and_filters(full_builder):
    path = full_builder.smart(False).filters([]).build().canonical_path(IMAGE)
    assert path == "debug/trim:bottom-right/10x20:110x120/adaptive-fit-in/300x200/left/bottom/" + IMAGE

    settings = full_builder.smart(None).filters(None).build()
    assert settings.smart is False
    assert settings.filters == ()
    assert settings.canonical_path(IMAGE) == path


def test_empty_filter_list_is_omitted(unsafe_server):
    path = unsafe_server.settings_builder().filters([]).build().canonical_path(IMAGE)
    assert "filters" not in path
    assert format_filters([]) == ""


def test_filters_keep_insertion_order(unsafe_server):
    settings = (
        unsafe_server.settings_builder()
        .filters([Grayscale(), Blur(3), Brightness(10)])
        .build()
    )
    assert settings.canonical_path(IMAGE) == f"filters:grayscale():blur(3):brightness(10)/{IMAGE}"


def test_setters_keep_last_value(unsafe_server):
    settings = (
        unsafe_server.settings_builder()
        .resize((1, 1))
        .resize((2, 2))
        .h_align(HAlign.LEFT)
        .h_align(HAlign.RIGHT)
        .filters([Brightness(10)])
        .filters([Contrast(20)])
        .build()
    )
    assert settings.canonical_path(IMAGE) == f"2x2/right/filters:contrast(20)/{IMAGE}"


@pytest.mark.parametrize(
    "mode, token",
    [
        (FitIn.DEFAULT, "fit-in"),
        (FitIn.ADAPTIVE, "adaptive-fit-in"),
        (FitIn.FULL, "full-fit-in"),
        (FitIn.ADAPTIVE_FULL, "adaptive-full-fit-in"),
    ],
)
def test_fit_in_tokens(unsafe_server, mode, token):
    settings = unsafe_server.settings_builder().fit_in(mode).build()
    assert settings.canonical_path(IMAGE) == f"{token}/{IMAGE}"


def test_option_tokens(unsafe_server):
    builder = unsafe_server.settings_builder()
    assert builder.fit_in().build().canonical_path(IMAGE) == f"fit-in/{IMAGE}"
    assert builder.trim().build().canonical_path(IMAGE) == f"trim:top-left/fit-in/{IMAGE}"
    settings = builder.response(ResponseMode.METADATA).v_align(VAlign.MIDDLE).build()
    assert settings.canonical_path(IMAGE) == f"meta/trim:top-left/fit-in/middle/{IMAGE}"


def test_resize_values(unsafe_server):
    builder = unsafe_server.settings_builder()
    assert builder.resize(100).build().canonical_path(IMAGE) == f"100x100/{IMAGE}"
    assert builder.resize((0, 200)).build().canonical_path(IMAGE) == f"0x200/{IMAGE}"
    flipped = Point(300, 200).flip_horizontally()
    assert builder.resize(flipped).build().canonical_path(IMAGE) == f"-300x200/{IMAGE}"


def test_crop_is_normalized(unsafe_server):
    settings = unsafe_server.settings_builder().crop(Rect((110, 120), (10, 20))).build()
    assert settings.canonical_path(IMAGE) == f"10x20:110x120/{IMAGE}"


def test_image_identifier_is_appended_verbatim(unsafe_server):
    image = "my.server.com/some path/image.jpg?v=1"
    settings = unsafe_server.settings_builder().smart().build()
    assert settings.canonical_path(image) == f"smart/{image}"


def test_settings_are_frozen(unsafe_server):
    settings = unsafe_server.settings_builder().build()
    with pytest.raises(ValidationError):
        settings.smart = True


def test_settings_reject_wrong_types(unsafe_server):
    with pytest.raises(ValidationError):
        Settings(server=unsafe_server, filters=("brightness(10)",))


if __name__ == "__main__":
    pytest.main()
