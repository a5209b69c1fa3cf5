from estimator.logic.prompt import NO_DESCRIPTION, RESPONSE_FORMAT, RESPONSE_SCHEMA, build_prompt
from estimator.models import PropertyCondition, PropertyDescription, PropertyType


def test_prompt_embeds_property_attributes():
    details = PropertyDescription(
        property_type=PropertyType.HOUSE,
        location="Львів, Сихів",
        area=120,
        room_count=4,
        condition=PropertyCondition.EURO_REPAIR,
        description="гараж на дві машини",
    )

    prompt = build_prompt(details)

    assert "експерт з нерухомості в Україні" in prompt
    assert "DIM.RIA" in prompt and "ЛУН" in prompt
    assert "Тип: Будинок" in prompt
    assert "Місцезнаходження (місто, район): Львів, Сихів" in prompt
    assert "Площа: 120 кв.м." in prompt
    assert "Кількість кімнат: 4" in prompt
    assert "Стан: Євроремонт" in prompt
    assert "Додатковий опис: гараж на дві машини" in prompt


def test_empty_description_uses_placeholder():
    prompt = build_prompt(PropertyDescription(location="Київ", description=""))

    assert f"Додатковий опис: {NO_DESCRIPTION}" in prompt


def test_fractional_area_is_kept():
    prompt = build_prompt(PropertyDescription(location="Київ", area=52.5))

    assert "Площа: 52.5 кв.м." in prompt


def test_schema_requires_three_fields():
    assert RESPONSE_SCHEMA["required"] == [
        "estimated_price_uah",
        "price_range_uah",
        "justification",
    ]
    assert RESPONSE_SCHEMA["properties"]["estimated_price_uah"]["type"] == "number"
    assert RESPONSE_SCHEMA["properties"]["price_range_uah"]["type"] == "string"
    assert RESPONSE_FORMAT["type"] == "json_schema"
    assert RESPONSE_FORMAT["json_schema"]["schema"] is RESPONSE_SCHEMA
