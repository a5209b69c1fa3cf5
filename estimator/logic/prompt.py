# logic/prompt.py

from estimator.models import PropertyDescription, format_number

NO_DESCRIPTION = "Немає"

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "estimated_price_uah": {
            "type": "number",
            "description": "Розрахункова вартість об'єкта в українських гривнях (UAH).",
        },
        "price_range_uah": {
            "type": "string",
            "description": 'Діапазон можливих цін, наприклад "1450000 - 1550000".',
        },
        "justification": {
            "type": "string",
            "description": (
                "Коротке обґрунтування ціни на основі ринкових даних "
                "та наданих характеристик."
            ),
        },
    },
    "required": ["estimated_price_uah", "price_range_uah", "justification"],
    "additionalProperties": False,
}

RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "property_estimate",
        "strict": True,
        "schema": RESPONSE_SCHEMA,
    },
}


def build_prompt(details: PropertyDescription) -> str:
    return f"""
        Ти — досвідчений експерт з нерухомості в Україні. Твоє завдання — оцінити ринкову вартість нерухомості на основі наданих даних.

        Для оцінки використовуй актуальні дані з провідних українських сайтів нерухомості, таких як DIM.RIA та ЛУН. Проаналізуй ринок для вказаного міста/регіону.

        **Дані про об'єкт:**
        - Тип: {details.property_type.value}
        - Місцезнаходження (місто, район): {details.location}
        - Площа: {format_number(details.area)} кв.м.
        - Кількість кімнат: {format_number(details.room_count)}
        - Стан: {details.condition.value}
        - Додатковий опис: {details.description.strip() or NO_DESCRIPTION}

        **Вимоги до відповіді:**
        Надай відповідь у форматі JSON, що відповідає наданій схемі.
        Відповідь повинна містити орієнтовну вартість в гривнях (UAH), діапазон цін та коротке обґрунтування цієї ціни, враховуючи поточну ситуацію на ринку нерухомості України для даного типу об'єкта та регіону.
        """
