from checklist import check_markup, check_stylesheet, run_checklist

GOOD_HTML = """
<main class="container">
  <header><h1>Weather Now</h1></header>
  <input type="text" placeholder="City">
  <ul id="suggestions"></ul>
  <button>Get Weather</button>
  <section id="weatherInfo" class="weather"></section>
</main>
"""

def test_markup_passes():
    assert check_markup(GOOD_HTML) == []

def test_markup_reports_missing_elements():
    failures = check_markup("<div><h1>Hello</h1><button>Go</button></div>")
    assert 'Missing or incorrect <h1> with "Weather" in it.' in failures
    assert 'Missing button with "Weather" text.' in failures
    assert "Missing #weatherInfo container." in failures
    assert "Missing <ul> for suggestions." in failures
    assert "Main layout should be wrapped in a container or <main>." in failures

def test_stylesheet_reports_missing_rules():
    failures = check_stylesheet("body { background: blue; font-family: serif; }")
    assert "Body is not using flex layout." in failures
    assert "Missing body background style." not in failures
    assert ".container missing box-shadow for card effect." in failures

def test_rule_must_be_in_selector_block():
    css = "#suggestions li { position: absolute; }"
    assert "#suggestions missing absolute positioning." in check_stylesheet(css)

def test_run_checklist_combines(app):
    failures = run_checklist("<p></p>", "")
    assert len(failures) > 8

def test_shipped_page_passes(app, client):
    html = client.get("/").data.decode("utf-8")
    with open(app.config["WIDGET_STYLESHEET"], encoding="utf-8") as handle:
        css = handle.read()
    assert run_checklist(html, css) == []

def test_check_layout_command(runner):
    result = runner.invoke(args=["check-layout"])
    assert result.exit_code == 0
    assert "All checks completed." in result.output

def test_check_layout_command_fails(runner, app, tmp_path):
    page = tmp_path / "index.html"
    page.write_text("<p>nothing</p>", encoding="utf-8")
    app.config["WIDGET_TEMPLATE"] = str(page)
    result = runner.invoke(args=["check-layout"])
    assert result.exit_code == 1
    assert "FAIL" in result.output
