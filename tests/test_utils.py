"""Tests for Sangria utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from sangria.utils.logger import get_logger

        assert get_logger("mymodule").name == "sangria.mymodule"

    def test_keeps_package_names(self) -> None:
        from sangria.utils.logger import get_logger

        assert get_logger("sangria").name == "sangria"
        assert get_logger("sangria.renderers.text").name == "sangria.renderers.text"

    def test_returns_stdlib_logger(self) -> None:
        from sangria.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_no_handlers_installed(self) -> None:
        import sangria  # noqa: F401

        assert logging.getLogger("sangria").handlers == []
