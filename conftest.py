# Ensure src/ is on sys.path for tests run from a plain checkout
import sys, pathlib
src = pathlib.Path(__file__).resolve().parent / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))
