import dataclasses

import pytest

from product_writer.domain import GenerationRequest, ProductDetails, ValidationError


def test_prompt_contains_fields_verbatim(details):
    request = GenerationRequest.from_details(details)
    assert request.prompt.startswith(
        "Write a compelling, SEO-friendly product description for the following product:"
    )
    assert "Product Name: Ultra Comfort Pro Chair\n" in request.prompt
    assert "Key Features: Ergonomic design, Memory foam padding\n" in request.prompt
    assert "Benefits: Reduces back pain, Improves posture\n" in request.prompt
    assert "Target Audience: office professionals\n" in request.prompt
    assert request.prompt.endswith("End with a strong call to action.")


def test_prompt_is_deterministic(details):
    assert GenerationRequest.from_details(details) == GenerationRequest.from_details(details)


def test_prompt_does_not_escape_input():
    details = ProductDetails(
        name="<Chair> {v2} & \"Pro\"",
        features="a",
        benefits="b",
        target_audience="c",
    )
    assert "Product Name: <Chair> {v2} & \"Pro\"" in GenerationRequest.from_details(details).prompt


def test_request_is_immutable(details):
    request = GenerationRequest.from_details(details)
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.prompt = "other"


@pytest.mark.parametrize("field_name", ["name", "features", "benefits", "target_audience"])
def test_missing_field_fails_validation(details, field_name):
    incomplete = dataclasses.replace(details, **{field_name: ""})
    with pytest.raises(ValidationError) as exc_info:
        GenerationRequest.from_details(incomplete)
    assert exc_info.value.missing_fields == [field_name]
    assert str(exc_info.value) == "Please fill in all fields"


def test_whitespace_only_field_counts_as_missing(details):
    assert dataclasses.replace(details, benefits="   \n").missing_fields() == ["benefits"]


def test_all_missing_fields_reported():
    assert ProductDetails().missing_fields() == [
        "name", "features", "benefits", "target_audience",
    ]
