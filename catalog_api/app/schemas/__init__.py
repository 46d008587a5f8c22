"""
Pydantic schema definitions.

Each domain (employees, books, products, users) defines its stored
entity together with the request bodies the API accepts.  Request
schemas only check the shape of a payload; domain rules live in the
entity's ``ensure_valid`` and in the services.
"""
