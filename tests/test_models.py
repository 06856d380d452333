"""Context / Options / Code 模型測試."""
from typing import Tuple, get_type_hints

from zeplin_xaml.models import (
    Border,
    Code,
    ColorResource,
    Context,
    Fill,
    Layer,
    Options,
    ResourceCollection,
    Shadow,
    TextStyle,
)


def test_options_from_camel_case():
    options = Options.from_dict({
        "duplicateSuffix": " copy",
        "ignoreFontFamily": True,
        "textAlignmentMode": "label",
        "sortResources": True,
    })
    assert options == Options(
        duplicate_suffix=" copy",
        ignore_font_family=True,
        text_alignment_mode="label",
        sort_resources=True,
    )


def test_options_defaults():
    options = Options.from_dict(None)
    assert options.duplicate_suffix is None
    assert options.text_alignment_mode == "style"
    assert options.sort_resources is False


def test_empty_suffix_is_disabled():
    assert Options.from_dict({"duplicateSuffix": ""}).duplicate_suffix is None


def test_context_prefers_project():
    project = ResourceCollection()
    styleguide = ResourceCollection(colors=())
    context = Context.from_host(project=project, styleguide=styleguide)
    assert context.container.kind == "project"
    assert context.collection is project


def test_context_styleguide_only():
    styleguide = ResourceCollection()
    context = Context.from_host(styleguide=styleguide)
    assert context.container.kind == "styleguide"


def test_context_without_container():
    context = Context.from_host()
    assert context.container is None
    assert context.collection is None


def test_code_to_dict():
    assert Code("x", "css").to_dict() == {"code": "x", "language": "css"}
    assert Code("x", "xml", "Colors.xaml").to_dict() == {
        "code": "x", "language": "xml", "filename": "Colors.xaml",
    }


def test_sequence_fields_declare_element_types():
    hints = get_type_hints(Layer)
    assert hints["fills"] == Tuple[Fill, ...]
    assert hints["borders"] == Tuple[Border, ...]
    assert hints["shadows"] == Tuple[Shadow, ...]
    assert hints["text_styles"] == Tuple[TextStyle, ...]
    assert hints["layers"] == Tuple[Layer, ...]
    collection_hints = get_type_hints(ResourceCollection)
    assert collection_hints["colors"] == Tuple[ColorResource, ...]
    assert collection_hints["text_styles"] == Tuple[TextStyle, ...]
