"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import pancheck

    assert pancheck.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from pancheck.config import (
        BatchConfig,
        InputConfig,
        LoggingConfig,
        OutputConfig,
        PipelineConfig,
        load_config,
    )

    assert PipelineConfig is not None
    assert InputConfig is not None
    assert BatchConfig is not None
    assert OutputConfig is not None
    assert LoggingConfig is not None
    assert load_config is not None


def test_core_api_imports() -> None:
    """Verify the core API is exported."""
    from pancheck.batch import process_batch
    from pancheck.normalization import normalize
    from pancheck.validation import validate

    assert callable(normalize)
    assert callable(validate)
    assert callable(process_batch)
