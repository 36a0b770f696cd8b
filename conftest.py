import os
import sys

# `apps` and `buket` live under backend/; make them importable when pytest
# is started from the repository root without an editable install.
BACKEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)
