"""
Structural checklist for the widget page.

Inspects rendered markup and the stylesheet for the elements and CSS rules the
page is expected to carry. Each check that fails contributes one message.
"""
import logging
import re

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

SEMANTIC_TAGS = ("header", "main", "section")

# (selector, property pattern, failure message)
CSS_RULES = [
    ("body", r"background", "Missing body background style."),
    ("body", r"font-family", "Missing body font-family."),
    ("body", r"display:\s*flex", "Body is not using flex layout."),
    ("input", r"border", "Input missing border styling."),
    ("input", r"padding", "Input missing padding."),
    ("input", r"border-radius", "Input missing border-radius."),
    ("button", r"background", "Button missing background color."),
    ("button", r"color", "Button missing text color."),
    ("button", r"border-radius", "Button missing border-radius."),
    ("button", r"cursor:\s*pointer", "Button missing pointer cursor."),
    ("#suggestions", r"position:\s*absolute", "#suggestions missing absolute positioning."),
    ("#suggestions", r"z-index", "#suggestions missing z-index."),
    ("#suggestions", r"overflow-y:\s*auto", "#suggestions missing scroll behavior."),
    (".weather", r"margin", ".weather section missing margin."),
    (".container", r"box-shadow", ".container missing box-shadow for card effect."),
]


def _has_text(tag, word):
    return word in tag.get_text().lower()


def check_markup(html: str):
    soup = BeautifulSoup(html, "html.parser")
    failures = []

    if not any(_has_text(h1, "weather") for h1 in soup.find_all("h1")):
        failures.append('Missing or incorrect <h1> with "Weather" in it.')
    if not soup.select('input[type="text"]'):
        failures.append("Missing input field of type text.")
    if not soup.select("input[placeholder]"):
        failures.append("Input missing a placeholder.")
    if not any(_has_text(button, "weather") for button in soup.find_all("button")):
        failures.append('Missing button with "Weather" text.')
    if not (soup.select("ul.suggestions") or soup.select("ul#suggestions")):
        failures.append("Missing <ul> for suggestions.")
    if not soup.select("#weatherInfo"):
        failures.append("Missing #weatherInfo container.")
    if not any(soup.find(tag) for tag in SEMANTIC_TAGS):
        failures.append("Missing semantic HTML elements like <header>, <main>, or <section>.")
    if not (soup.select(".container") or soup.find("main")):
        failures.append("Main layout should be wrapped in a container or <main>.")
    return failures


# A rule passes when some block for the selector declares the property.
def _rule_declares(css, selector, prop):
    pattern = re.escape(selector) + r"\s*{[^}]*" + prop + r"[^}]*}"
    return re.search(pattern, css) is not None


def check_stylesheet(css: str):
    return [message for selector, prop, message in CSS_RULES if not _rule_declares(css, selector, prop)]


def run_checklist(html: str, css: str):
    failures = check_markup(html) + check_stylesheet(css)
    for message in failures:
        logger.warning("checklist: %s", message)
    return failures
