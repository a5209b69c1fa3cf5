# errors.py

VALIDATION_MESSAGE = (
    "Будь ласка, заповніть обов'язкові поля: "
    "місцезнаходження, площа та кількість кімнат."
)
PARSE_MESSAGE = (
    "Не вдалося обробити відповідь від сервісу. Спробуйте уточнити ваш запит."
)
SERVICE_MESSAGE = (
    "Не вдалося отримати оцінку. Будь ласка, спробуйте ще раз пізніше."
)


class EstimationError(Exception):
    """
    Base for every failure shown to the user.
    `message` is the user-facing text and is displayed verbatim.
    """

    default_message = SERVICE_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(EstimationError):
    default_message = VALIDATION_MESSAGE


class ConfigurationError(EstimationError):
    default_message = "OPENAI_API_KEY environment variable is not set"


class ResponseParseError(EstimationError):
    default_message = PARSE_MESSAGE


class ServiceError(EstimationError):
    default_message = SERVICE_MESSAGE
