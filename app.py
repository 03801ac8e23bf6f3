import os

import click
from flask import Flask, render_template, request, jsonify, abort, get_template_attribute

from models import check_unique_cities
from checklist import run_checklist
import weather_lookup as weather_lookup
import widget as widget

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


# Reads a query parameter that must be present; 400 otherwise.
def _required_arg(name):
    value = request.args.get(name)
    if value is None:
        abort(400, description=f"Missing '{name}' parameter")
    return value


# App factory — sets configuration, checks the data table, and registers routes.
def create_app(config=None):
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret")
    # Unset means the checklist inspects the page as this app renders it.
    app.config["WIDGET_TEMPLATE"] = os.environ.get("WIDGET_TEMPLATE")
    app.config["WIDGET_STYLESHEET"] = os.environ.get(
        "WIDGET_STYLESHEET", os.path.join(BASE_DIR, "static", "style.css")
    )
    if config:
        app.config.update(config)

    duplicates = check_unique_cities()
    if duplicates:
        app.logger.warning("Duplicate cities in weather table, first entry wins: %s", ", ".join(duplicates))

    # Page — renders the widget; ?city= submits without JavaScript.
    @app.route("/", methods=["GET"])
    def index():
        state = widget.WidgetState()
        city = request.args.get("city")
        if city is not None:
            state.query_text = city
            widget.submit(state)
        return render_template("index.html", state=state)

    # Suggestion list for the current fragment; hidden when nothing matches.
    @app.route("/suggest", methods=["GET"])
    def suggest():
        state = widget.on_keystroke(widget.WidgetState(), request.args.get("q", ""))
        return jsonify(
            query=state.query_text,
            visible=state.suggestions_visible,
            cities=state.suggestions,
        )

    # weatherInfo fragment for the submitted city.
    @app.route("/weather", methods=["GET"])
    def weather():
        state = widget.WidgetState(query_text=_required_arg("city"))
        widget.submit(state)
        weather_info = get_template_attribute("_weather_info.html", "weather_info")
        return weather_info(state.result_view)

    @app.route("/api/weather", methods=["GET"])
    def api_weather():
        record = weather_lookup.lookup_city(_required_arg("city"))
        if record is None:
            return jsonify(error=weather_lookup.NOT_FOUND_MESSAGE), 404
        return jsonify(record.to_dict())

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify(error=error.description), 400

    # Runs the structural checklist against the rendered page and the stylesheet.
    @app.cli.command("check-layout")
    def check_layout():
        template_path = app.config["WIDGET_TEMPLATE"]
        if template_path:
            with open(template_path, encoding="utf-8") as handle:
                html = handle.read()
        else:
            with app.test_request_context("/"):
                html = render_template("index.html", state=widget.WidgetState())
        with open(app.config["WIDGET_STYLESHEET"], encoding="utf-8") as handle:
            css = handle.read()

        failures = run_checklist(html, css)
        for message in failures:
            click.echo(f"FAIL {message}", err=True)
        if failures:
            app.logger.error("Layout checklist failed with %d problem(s).", len(failures))
            raise SystemExit(1)
        click.echo("All checks completed.")

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
