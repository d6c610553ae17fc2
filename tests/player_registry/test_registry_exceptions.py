"""
Unit tests for the registry exception hierarchy
"""

from player_registry.registry_exceptions import (
    RegistryException,
    PersonNotFoundException,
    CapacityExceededException,
    DuplicateIdentityException,
    InconsistentEditException
)


def test_all_inherit_from_base():
    for exc in (
        PersonNotFoundException("Alice"),
        CapacityExceededException(100),
        DuplicateIdentityException("name", "Alice"),
        InconsistentEditException("Alice"),
    ):
        assert isinstance(exc, RegistryException)


def test_message_includes_code_and_context():
    exc = DuplicateIdentityException("jersey_number", 7, holder="Alice")
    text = str(exc)
    assert text.startswith("[REGISTRY_DUPLICATE_003] Jersey number '7' is already taken")
    assert "held_by=Alice" in text


def test_to_dict():
    data = CapacityExceededException(100, name="Extra").to_dict()
    assert data['error_code'] == "REGISTRY_CAPACITY_002"
    assert data['message'] == "Registry is full (100 players)"
    assert data['context'] == {"capacity": 100, "name": "Extra"}
    assert 'timestamp' in data


def test_not_found_message():
    exc = PersonNotFoundException("Zed")
    assert exc.message == "Player 'Zed' is not registered"
    assert exc.error_code == "REGISTRY_NOT_FOUND_001"
