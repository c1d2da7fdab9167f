import pytest

from menuviz.errors import CapabilityRateLimitError, MenuProcessingError
from menuviz.graphs.menu_processing import build_menu_processing_graph, run_menu_processing
from menuviz.models.menu import ImageMenuInput, TextMenuInput

from .conftest import FakeCapability, FlakyResolver, menu_json


def test_graph_builds():
    assert build_menu_processing_graph() is not None


def test_blocking_run_with_fallback(make_processor, store):
    processor = make_processor(FakeCapability(api_key=None))
    result = run_menu_processing(TextMenuInput("Grilled Salmon\n$12.99\nCaesar Salad"), processor)

    assert result["success"] is True
    assert result["sessionId"] == 1
    assert [i["name"] for i in result["menuItems"]] == ["Grilled Salmon", "Caesar Salad"]
    assert store.get_session(1).original_text == "Grilled Salmon\n$12.99\nCaesar Salad"


def test_blocking_run_empty_input(make_processor, store):
    with pytest.raises(MenuProcessingError) as exc:
        run_menu_processing(TextMenuInput(""), make_processor())
    assert exc.value.status_code == 400
    assert exc.value.message == "No valid food items found in the menu"
    assert store.list_sessions() == []


def test_blocking_run_rejects_empty_image(make_processor):
    with pytest.raises(MenuProcessingError) as exc:
        run_menu_processing(ImageMenuInput(image_bytes=b"", mime_type="image/png"), make_processor())
    assert exc.value.status_code == 400


def test_blocking_run_tolerates_item_failure(make_processor, store):
    capability = FakeCapability(text_response=menu_json("Pizza", "Taco", "Soup"))
    processor = make_processor(capability, FlakyResolver(fail_on={"Taco"}))
    result = run_menu_processing(TextMenuInput("x"), processor)

    assert [i["name"] for i in result["menuItems"]] == ["Pizza", "Soup"]
    assert len(store.list_items_by_session(result["sessionId"])) == 2


def test_blocking_run_image_rate_limit(make_processor):
    processor = make_processor(FakeCapability(error=CapabilityRateLimitError()))
    with pytest.raises(MenuProcessingError) as exc:
        run_menu_processing(ImageMenuInput(image_bytes=b"\xff\xd8", mime_type="image/jpeg"), processor)
    assert exc.value.status_code == 429
