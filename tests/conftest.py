"""共用測試資料：顏色、文字樣式、資源集合與圖層."""
import pytest

from zeplin_xaml.models import (
    Border,
    Color,
    ColorResource,
    Context,
    Fill,
    Layer,
    Options,
    Rect,
    ResourceCollection,
    Shadow,
    TextStyle,
)
from zeplin_xaml.renderer import configure_project_templates

RED = Color(255, 0, 0, 1.0)
BLACK = Color(0, 0, 0, 1.0)
BRAND = Color(0, 122, 255, 1.0)


@pytest.fixture(autouse=True)
def _reset_templates():
    # CLI 測試可能改過樣板目錄，每個測試前還原
    configure_project_templates(None)
    yield
    configure_project_templates(None)


@pytest.fixture
def heading_style():
    return TextStyle(
        name="Heading",
        font_family="Roboto-Bold",
        font_weight=700,
        font_size=24,
        color=BLACK,
        text_align="center",
    )


@pytest.fixture
def collection(heading_style):
    return ResourceCollection(
        colors=(
            ColorResource("Primary Red", RED),
            ColorResource("Brand Blue 2", BRAND),
        ),
        text_styles=(heading_style,),
    )


@pytest.fixture
def options():
    return Options(duplicate_suffix=" 2", text_alignment_mode="style")


@pytest.fixture
def context(options, collection):
    return Context.from_host(options, project=collection)


def make_layer(**kwargs):
    base = {
        "name": "Card View",
        "type": "shape",
        "rect": Rect(width=100, height=50),
    }
    base.update(kwargs)
    return Layer(**base)


def solid(color):
    return Fill(type="color", color=color)


def border(color, thickness=2):
    return Border(fill=solid(color), thickness=thickness)


def shadow():
    return Shadow(offset_y=2, blur_radius=4, color=Color(0, 0, 0, 0.25))
