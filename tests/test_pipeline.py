import pytest

from typeshape import UNDEFINED, infer_declaration, infer_type
from typeshape.core.exceptions import NoSamplesError, UnsupportedValueKindError
from typeshape.inference.types import NUMBER, STRING, InferredType
from typeshape.models.render_options import RenderOptions


def test_shared_property_with_different_kinds_becomes_union():
    out = infer_declaration([{"a": 1}, {"a": "x"}])
    assert out == "export type Data = {\n\ta : number | string\n};"


def test_properties_missing_from_some_samples_become_optional():
    out = infer_declaration([{"a": 1}, {"b": 2}])
    assert out == "export type Data = {\n\ta? : number,\n\tb? : number\n};"


def test_empty_array_placeholder_is_eliminated_across_samples():
    assert infer_declaration([[], [1, 2]]) == "export type Data = number[];"


def test_null_only_property_renders_as_unknown():
    out = infer_declaration([{"a": None}, {"a": None}])
    assert out == "export type Data = {\n\ta : unknown\n};"


def test_zipcode_records():
    samples = [
        {"zipcode": 501},
        {
            "zipcode": "00601",
            "lat": 18.18,
            "lng": -66.75,
            "median_household_income": 12041,
            "state": "PR",
            "major_city": "Adjuntas",
        },
        {
            "zipcode": "00602",
            "lat": 18.36,
            "lng": -67.18,
            "median_household_income": None,
            "state": "PR",
            "major_city": "Aguada",
        },
    ]
    assert infer_declaration(samples) == (
        "export type Data = {\n"
        "\tzipcode : number | string,\n"
        "\tlat? : number,\n"
        "\tlng? : number,\n"
        "\tmedian_household_income? : number | null,\n"
        "\tstate? : string,\n"
        "\tmajor_city? : string\n"
        "};"
    )


def test_object_elements_are_merged_across_samples():
    out = infer_declaration([{"items": [{"a": 1}]}, {"items": [{"b": "x"}]}])
    assert out == "export type Data = {\n\titems : {\n\t\ta? : number,\n\t\tb? : string\n\t}[]\n};"


def test_optional_array_property():
    out = infer_declaration([{"id": 1, "tags": ["a"]}, {"id": 2}])
    assert out == "export type Data = {\n\tid : number,\n\ttags? : string[]\n};"


def test_empty_object_sample_renders_string_map():
    assert infer_declaration([{}]) == "export type Data = {\n\t[k:string] : unknown\n};"


def test_single_primitive_sample():
    assert infer_declaration(["x"]) == "export type Data = string;"


def test_null_sample_renders_unknown():
    assert infer_declaration([None]) == "export type Data = unknown;"
    assert infer_declaration([[None]]) == "export type Data = unknown[];"


def test_undefined_values_make_properties_optional():
    out = infer_declaration([{"a": 1}, {"a": UNDEFINED}])
    assert out == "export type Data = {\n\ta? : number\n};"


def test_render_options_are_applied():
    out = infer_declaration([1], RenderOptions(type_name="Count", export=False))
    assert out == "type Count = number;"


def test_infer_type_returns_normalized_structure():
    t = infer_type([{"a": 1, "n": None}, {"a": "x", "n": None}])
    assert isinstance(t, InferredType)
    assert t.property_map()["a"].markers == (NUMBER, STRING)
    assert t.property_map()["n"].markers == ("unknown",)


def test_no_samples_is_an_error():
    with pytest.raises(NoSamplesError):
        infer_declaration([])


def test_unsupported_value_aborts_the_whole_batch():
    with pytest.raises(UnsupportedValueKindError) as excinfo:
        infer_declaration([{"a": 1}, {"a": object()}])
    assert excinfo.value.path == "$[1].a"
