"""EE Toolbox — interactive electrical-engineering calculators."""

__version__ = "1.0.0"

_LAZY_IMPORTS = {
    "encode": "eetoolbox.color_code",
    "decode": "eetoolbox.color_code",
    "ResistorReading": "eetoolbox.color_code",
    "DecodedBands": "eetoolbox.color_code",
    "format_resistance": "eetoolbox.notation",
    "read_int": "eetoolbox.prompts",
    "read_positive_real": "eetoolbox.prompts",
    "ResultLog": "eetoolbox.result_log",
    "solve_ohm": "eetoolbox.circuits",
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        import importlib

        module = importlib.import_module(_LAZY_IMPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'eetoolbox' has no attribute {name}")


__all__ = [*_LAZY_IMPORTS]
