"""HTTP front ends for the recipe store.

Same routes three times over:

- `app.app`: Starlette.
- `app.router`: a Werkzeug url map.
- `app.mux`: `http.server` and a handful of regexes.
"""
