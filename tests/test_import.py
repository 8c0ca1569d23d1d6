import importlib
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))


def test_importable() -> None:
    module = importlib.import_module("tle_parser")
    assert hasattr(module, "parse")
    assert hasattr(module, "TLEError")
    assert module.__version__
