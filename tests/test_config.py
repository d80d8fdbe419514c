from review_harvester.core.config import ScraperConfig


def test_environment_supplies_defaults(monkeypatch):
    monkeypatch.setenv("USE_FIXTURE_DATA", "1")
    monkeypatch.setenv("MAX_PAGES", "4")
    monkeypatch.setenv("HEADLESS", "false")
    monkeypatch.setenv("OUTPUT_DIR", "/tmp/reviews")

    config = ScraperConfig()

    assert config.use_fixture_data
    assert config.max_pages == 4
    assert not config.headless
    assert config.output_dir == "/tmp/reviews"


def test_constructor_values_beat_environment(monkeypatch):
    monkeypatch.setenv("USE_FIXTURE_DATA", "1")
    monkeypatch.setenv("MAX_PAGES", "4")

    config = ScraperConfig(use_fixture_data=False, max_pages=2)

    assert not config.use_fixture_data
    assert config.max_pages == 2


def test_defaults_without_environment(monkeypatch):
    for name in ("USE_FIXTURE_DATA", "MAX_PAGES", "HEADLESS", "OUTPUT_DIR", "DEBUG_SCREENSHOTS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MAX_PAGES", "many")

    config = ScraperConfig()

    assert config.max_pages == 10
    assert config.headless
    assert not config.use_fixture_data
    assert config.output_dir == "output"
    assert config.validate()


def test_validate_reports_bad_values():
    assert not ScraperConfig(max_pages=0).validate()
    assert not ScraperConfig(selector_timeout=-1).validate()
