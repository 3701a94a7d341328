def test_import_cyoa_package() -> None:
    import importlib

    module = importlib.import_module("cyoa")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from cyoa.core.rng import RNG

    rng = RNG(42)
    value = rng.randbelow(2)
    assert value in (0, 1)


def test_import_cli_entry_point() -> None:
    from cyoa.main import main

    assert callable(main)
