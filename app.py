import logging
import math
import os

from flask import Flask, jsonify, render_template, request, session
from flask_session import Session

from estimator.config import load_settings
from estimator.controller import EstimationController
from estimator.errors import ValidationError
from estimator.logic.estimation_client import EstimationClient
from estimator.models import (
    PropertyCondition,
    PropertyType,
    SessionState,
    format_number,
)

logger = logging.getLogger(__name__)

STATE_KEY = "estimation_state"


def format_uah(value) -> str:
    # uk-UA grouping: no-break spaces, no fraction digits
    return f"{value:,.0f}".replace(",", "\u00a0") + "\u00a0₴"


def json_safe_form(form: dict) -> dict:
    # NaN from unparseable numeric input is not valid JSON
    return {
        name: None if isinstance(value, float) and not math.isfinite(value) else value
        for name, value in form.items()
    }


def create_app(settings=None, estimator=None) -> Flask:
    """
    Builds the Flask application.
    Raises ConfigurationError when the API key or SECRET_KEY is missing.
    """

    settings = settings or load_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug_mode else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    estimator = estimator or EstimationClient.from_settings(settings)

    app = Flask(__name__)
    app.secret_key = settings.secret_key

    # -----------------------
    # Server-side Session Config
    # -----------------------
    app.config["SESSION_TYPE"] = "filesystem"
    app.config["SESSION_PERMANENT"] = False
    app.config["SESSION_USE_SIGNER"] = True
    app.config["SESSION_FILE_DIR"] = settings.session_file_dir
    app.config["SESSION_FILE_THRESHOLD"] = 100
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SECURE"] = False  # Set to True when using HTTPS

    os.makedirs(app.config["SESSION_FILE_DIR"], exist_ok=True)

    Session(app)

    logger.info("Estimator configured with model %s", settings.model)

    app.jinja_env.filters["uah"] = format_uah
    app.jinja_env.filters["number"] = format_number

    def render(controller):
        state = controller.state
        return render_template(
            "index.html",
            form=state.form,
            result=state.result,
            error=state.error,
            loading=state.loading,
            view=controller.view(),
            property_types=list(PropertyType),
            conditions=list(PropertyCondition),
        )

    @app.route("/", methods=["GET", "POST"])
    async def index():

        # -----------------------
        # FIRST LOAD
        # -----------------------
        if request.method == "GET":
            session.clear()
            controller = EstimationController(estimator)
            session[STATE_KEY] = controller.state.to_dict()
            return render(controller)

        # -----------------------
        # SUBMIT
        # -----------------------
        state = SessionState.from_dict(session.get(STATE_KEY))
        controller = EstimationController(estimator, state)

        is_ajax = request.headers.get("X-Requested-With") == "XMLHttpRequest"

        try:
            controller.update_fields(request.form)
        except ValidationError as e:
            controller.state.error = e.message
        else:
            await controller.submit()

        session[STATE_KEY] = controller.state.to_dict()

        if is_ajax:
            payload = controller.state.to_dict()
            return jsonify({
                "state": controller.view(),
                "error": payload["error"],
                "result": payload["result"],
                "form": json_safe_form(payload["form"]),
            })

        return render(controller)

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
