import pytest

from menuviz.errors import CapabilityRateLimitError, MenuParseError
from menuviz.models.menu_candidate import MenuCandidate, title_case, validate_candidates
from menuviz.services.menu_parsing import MenuParser, parse_menu_text_simple
from menuviz.utils.helpers import first_json_array

from .conftest import FakeCapability, menu_json


def pairs(candidates):
    return [(c.name, c.description) for c in candidates]


def test_fallback_drops_price_lines():
    result = parse_menu_text_simple("Grilled Salmon\n$12.99\nCaesar Salad")
    assert pairs(result) == [
        ("Grilled Salmon", "Delicious grilled salmon prepared fresh"),
        ("Caesar Salad", "Delicious caesar salad prepared fresh"),
    ]


def test_fallback_skips_metadata_only_input():
    text = "$5.00\nPrice list\nMario's Restaurant\nDRINKS\nDesserts\nMenu Category: Mains\nAppetizers"
    assert parse_menu_text_simple(text) == []


def test_fallback_strips_ordinal_prefix_and_title_cases():
    result = parse_menu_text_simple("12. pad thai\n3.Green curry")
    assert pairs(result) == [
        ("Pad Thai", "Delicious 12. pad thai prepared fresh"),
        ("Green Curry", "Delicious 3.green curry prepared fresh"),
    ]


def test_fallback_line_length_bounds():
    long_line = "x" * 100
    result = parse_menu_text_simple(f"Tea\nSoup\n{long_line}\n" + "y" * 99)
    assert [c.name for c in result] == ["Soup", "Y" + "y" * 98]


def test_fallback_caps_at_ten_in_input_order():
    text = "\n".join(f"Dish number {i}" for i in range(1, 16))
    result = parse_menu_text_simple(text)
    assert len(result) == 10
    assert [c.name for c in result] == [f"Dish Number {i}" for i in range(1, 11)]


def test_fallback_blank_input():
    assert parse_menu_text_simple("") == []
    assert parse_menu_text_simple("\n   \n") == []


def test_parse_text_uses_capability_response():
    response = (
        "Sure! Here you go:\n```json\n"
        '[{"name": "  margherita pizza ", "description": "Tomato, mozzarella, basil"},'
        ' {"name": "", "description": "no name"},'
        ' {"name": "Tiramisu"},'
        ' {"name": 42, "description": "numeric"},'
        ' "junk"]\n```'
    )
    parser = MenuParser(FakeCapability(text_response=response))
    result = parser.parse_text("Margherita Pizza $12\nTiramisu")
    assert pairs(result) == [("Margherita Pizza", "Tomato, mozzarella, basil")]


def test_parse_text_prompt_contains_menu():
    capability = FakeCapability(text_response=menu_json("Pho"))
    MenuParser(capability).parse_text("Pho Bo")
    assert len(capability.prompts) == 1
    assert "Pho Bo" in capability.prompts[0]
    assert "JSON array" in capability.prompts[0]


def test_parse_text_falls_back_when_capability_unconfigured():
    capability = FakeCapability(text_response=menu_json("Ignored"), api_key=None)
    result = MenuParser(capability).parse_text("Grilled Salmon\n$12.99\nCaesar Salad")
    assert capability.prompts == []
    assert [c.name for c in result] == ["Grilled Salmon", "Caesar Salad"]


@pytest.mark.parametrize("capability", [
    FakeCapability(error=CapabilityRateLimitError()),
    FakeCapability(error=RuntimeError("connection reset")),
    FakeCapability(text_response="I could not find any dishes."),
    FakeCapability(text_response='[{"name": "Broken", '),
    FakeCapability(text_response=menu_json("Slow"), delay=0.5, timeout_s=0.05),
])
def test_parse_text_falls_back_on_any_capability_failure(capability):
    result = MenuParser(capability).parse_text("Beef Taco\nChicken Soup")
    assert pairs(result) == [
        ("Beef Taco", "Delicious beef taco prepared fresh"),
        ("Chicken Soup", "Delicious chicken soup prepared fresh"),
    ]


def test_parse_text_empty_array_is_not_a_failure():
    result = MenuParser(FakeCapability(text_response="[]")).parse_text("Beef Taco")
    assert result == []


def test_parse_text_blank_input_skips_capability():
    capability = FakeCapability(text_response=menu_json("Anything"))
    assert MenuParser(capability).parse_text("   ") == []
    assert capability.prompts == []


def test_parse_image_success():
    capability = FakeCapability(image_response=menu_json("Pork Ramen", "Gyoza"))
    result = MenuParser(capability).parse_image(b"\xff\xd8jpeg", "image/jpeg")
    assert [c.name for c in result] == ["Pork Ramen", "Gyoza"]


def test_parse_image_without_json_raises():
    capability = FakeCapability(image_response="This looks like a photo of a cat.")
    with pytest.raises(MenuParseError):
        MenuParser(capability).parse_image(b"\x89PNG", "image/png")


def test_parse_image_propagates_rate_limit():
    capability = FakeCapability(error=CapabilityRateLimitError())
    with pytest.raises(CapabilityRateLimitError):
        MenuParser(capability).parse_image(b"\x89PNG", "image/png")


def test_first_json_array_skips_non_json_brackets():
    assert first_json_array('See [note] below: [1, 2] and [3]') == [1, 2]
    assert first_json_array(b'["a"]') == ["a"]
    assert first_json_array("no array here") is None
    assert first_json_array(None) is None


def test_title_case_keeps_acronyms_and_inner_capitals():
    assert title_case("bbq ribs") == "Bbq Ribs"
    assert title_case("BBQ  ribs") == "BBQ Ribs"
    assert title_case("McRib deluxe") == "McRib Deluxe"


def test_title_case_normalises_shouted_names():
    assert title_case("GRILLED SALMON") == "Grilled Salmon"
    assert title_case("BLT SANDWICH") == "BLT Sandwich"
    assert MenuCandidate(name="CAESAR SALAD", description="Romaine").name == "Caesar Salad"


def test_validate_candidates_strips_fields():
    result = validate_candidates([{"name": " fish tacos", "description": " crispy cod "}])
    assert result == [MenuCandidate(name="Fish Tacos", description="crispy cod")]
