"""Top-level package for the receipt points API.

This package contains everything required to run the FastAPI service
that scores receipts: Pydantic schemas, the points engine, the
in-memory receipt store and the API routers.

To run the API locally you can execute:

```bash
python -m receipt_processor
```

This serves the application on http://127.0.0.1:8080.  You can
override configuration values using environment variables or a
``.env`` file at the project root.
"""

__all__: list[str] = []  # explicit for linters
