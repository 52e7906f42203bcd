"""Shared fixtures for toonify tests"""

import pytest


@pytest.fixture
def users_json():
    """Two-user record collection with mixed value types"""
    return {
        "users": [
            {"id": 1, "name": "Alice", "role": "admin"},
            {"id": 2, "name": "Bob", "role": "user"},
        ]
    }


@pytest.fixture
def users_toon():
    """TOON text produced from users_json"""
    return "users[2]{id,name,role}:\n1,Alice,admin\n2,Bob,user"
