"""Describes the recipes domain. Centres around the `RecipeStore`.

What actually matters here?

- Recipes are opaque. A name, plus whatever the client sent along.
- Ids are slugs of the name, so the name decides the identity on create.
- One store per process, handed to whichever router is serving.
- Only two ways to fail: the id is missing, or it is already taken.

Everything HTTP lives in `app`.
"""
