"""Verify package imports work correctly."""


def test_import_sangria() -> None:
    """Test that sangria can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import sangria

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert sangria.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from sangria import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    """Everything in __all__ resolves."""
    import sangria

    for name in sangria.__all__:
        assert hasattr(sangria, name), name
