import json

import pytest
import requests

from product_writer.domain import ProductDetails
from product_writer.infrastructure.config import GeminiSettings


def make_response(status_code=200, payload=None, body=None, reason="OK"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        body = json.dumps(payload) if payload is not None else ""
    response._content = body.encode("utf-8")
    return response


def envelope(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeHttpSession:
    """Stands in for requests.Session; records every post()."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


class FakeGenerator:
    def __init__(self, text="Generated text", exc=None):
        self.text = text
        self.exc = exc
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.exc is not None:
            raise self.exc
        return self.text


@pytest.fixture
def gemini_settings():
    return GeminiSettings(
        api_key="test-key",
        api_base="https://gemini.example/v1beta",
        model="gemini-test",
    )


@pytest.fixture
def details():
    return ProductDetails(
        name="Ultra Comfort Pro Chair",
        features="Ergonomic design, Memory foam padding",
        benefits="Reduces back pain, Improves posture",
        target_audience="office professionals",
    )
