import json
import time

import pytest

from menuviz import create_app
from menuviz.config.settings import TestingConfig
from menuviz.errors import CapabilityError
from menuviz.services.menu_parsing.menu_parser import MenuParser
from menuviz.services.menu_processing.menu_processor import MenuProcessor
from menuviz.services.shared.capability.menu_capability import MenuCapability
from menuviz.services.shared.menu_store import MenuStore
from menuviz.utils.helpers import slugify


def menu_json(*names):
    return json.dumps([{"name": n, "description": f"House {n.lower()}"} for n in names])


class FakeCapability(MenuCapability):
    """In-process capability returning canned text, or raising `error`."""

    provider = "fake"

    def __init__(self, text_response=None, image_response=None, error=None,
                 api_key="test-key", delay=0.0, timeout_s=5.0):
        super().__init__(api_key, "fake-model", timeout_s)
        self.text_response = text_response
        self.image_response = image_response
        self.error = error
        self.delay = delay
        self.prompts = []

    def _respond(self, prompt, response):
        self.prompts.append(prompt)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return response

    def _understand_text(self, prompt):
        return self._respond(prompt, self.text_response)

    def _understand_image(self, image_bytes, mime_type, prompt):
        return self._respond(prompt, self.image_response)

    def translate_error(self, error):
        return CapabilityError(f"fake failure: {error}")


class FlakyResolver:
    """Resolver that raises for the dish names in `fail_on`."""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.calls = []

    def resolve(self, name, description=""):
        self.calls.append(name)
        if name in self.fail_on:
            raise RuntimeError("image service unavailable")
        return f"https://img.test/{slugify(name)}.jpg"


@pytest.fixture
def store():
    return MenuStore()


@pytest.fixture
def make_processor(store):
    def _make(capability=None, resolver=None):
        capability = capability or FakeCapability(text_response=menu_json("Margherita Pizza"))
        resolver = resolver or FlakyResolver()
        return MenuProcessor(MenuParser(capability), resolver, store)
    return _make


@pytest.fixture
def capability():
    return FakeCapability(text_response=menu_json("Grilled Salmon", "Caesar Salad"))


@pytest.fixture
def app(store, capability):
    return create_app(TestingConfig, store=store, capability=capability)


@pytest.fixture
def client(app):
    return app.test_client()
