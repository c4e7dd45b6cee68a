def test_import_relicbar_package() -> None:
    import importlib

    module = importlib.import_module("relicbar")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from relicbar.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_controller_exports_game() -> None:
    from relicbar.services.controllers import RogueliteGame

    assert RogueliteGame(seed=1).phase == "awaiting_command"
