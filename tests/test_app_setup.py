import json
import logging

import pytest
from fastapi.testclient import TestClient

from reading_list_api.app.core.config import Settings
from reading_list_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging
from reading_list_api.app.core.store import BookStore, SeedError
from reading_list_api.app.main import build_store, create_app


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def test_settings_defaults():
    settings = Settings(log_file=None, books_seed_file=None, api_prefix="", book_id_strategy="length")
    assert settings.project_name
    assert settings.port > 0


def test_setup_logging_adds_console_and_file_handler(package_logger, tmp_path):
    logfile = tmp_path / "api.log"
    setup_logging(Settings(log_level="debug", log_file=str(logfile), log_format="%(levelname)s|%(name)s|%(message)s"))
    assert package_logger.level == logging.DEBUG
    kinds = {type(h) for h in package_logger.handlers}
    assert kinds == {logging.StreamHandler, logging.FileHandler}

    logging.getLogger("reading_list_api.app.services.book_service").info("hello")
    for handler in package_logger.handlers:
        handler.flush()
    assert "INFO|reading_list_api.app.services.book_service|hello" in logfile.read_text(encoding="utf-8")


def test_setup_logging_replaces_its_own_handlers(package_logger, tmp_path):
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    setup_logging(Settings(log_level="INFO", log_file=str(tmp_path / "api.log")))
    setup_logging(Settings(log_level="WARNING", log_file=None))
    assert package_logger.level == logging.WARNING
    assert foreign in package_logger.handlers
    assert len(package_logger.handlers) == 2


def test_setup_logging_leaves_root_alone(package_logger):
    root = logging.getLogger()
    before = root.handlers[:]
    setup_logging(Settings(log_level="INFO", log_file=None))
    assert root.handlers == before


def test_setup_logging_unknown_level(package_logger):
    setup_logging(Settings(log_level="chatty", log_file=None))
    assert package_logger.level == logging.INFO


def test_create_app_configures_logging(package_logger):
    create_app(Settings(log_level="DEBUG", log_file=None, books_seed_file=None), store=BookStore())
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_app_loads_seed_file(tmp_path):
    seed = tmp_path / "books.json"
    seed.write_text(json.dumps([{"title": "Dune", "author": "Frank Herbert"}]), encoding="utf-8")

    client = TestClient(create_app(Settings(books_seed_file=str(seed))))
    books = client.get("/books/").json()
    assert len(books) == 1
    assert books[0]["id"] == 1
    assert books[0]["finished"] is False

    created = client.post("/books/", json={"title": "Emma", "author": "Jane Austen"}).json()
    assert created["id"] == 2


def test_bad_seed_file_stops_startup(tmp_path):
    with pytest.raises(SeedError):
        build_store(Settings(books_seed_file=str(tmp_path / "missing.json")))


def test_store_uses_configured_id_strategy():
    store = build_store(Settings(books_seed_file=None, book_id_strategy="counter"))
    assert store.id_strategy == "counter"
    assert len(store) == 0
