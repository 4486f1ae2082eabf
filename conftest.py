"""Root pytest configuration (kept intentionally minimal).

The application package lives in `receipt_processor/` next to this file.
Because the pytest rootdir is the project root, tests can import it without
path manipulation, and an editable install (`pip install -e .[test]`) works
the same way.
"""
