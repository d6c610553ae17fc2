"""
Unit tests for Person and its value types
"""

import pytest
from roster.person import Person, Name, JerseyNumber, Height, Weight


class TestName:
    """Test suite for Name"""

    def test_strips_whitespace(self):
        assert Name("  Alice Smith ").value == "Alice Smith"

    def test_equal_names_hash_equal(self):
        assert Name("Alice") == Name("Alice")
        assert hash(Name("Alice")) == hash(Name("Alice"))

    @pytest.mark.parametrize("bad", ["", "   ", "Alice_", "Bob!", "A  B"])
    def test_invalid_names_rejected(self, bad):
        with pytest.raises(ValueError, match="Name must"):
            Name(bad)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            Name(42)


class TestJerseyNumber:
    """Test suite for JerseyNumber"""

    def test_bounds(self):
        assert JerseyNumber(0).value == 0
        assert JerseyNumber(99).value == 99
        with pytest.raises(ValueError, match="between 0 and 99"):
            JerseyNumber(100)
        with pytest.raises(ValueError):
            JerseyNumber(-1)

    def test_parse_string(self):
        assert JerseyNumber.parse(" 7 ") == JerseyNumber(7)
        assert JerseyNumber.parse(12) == JerseyNumber(12)

    def test_parse_rejects_non_numeric(self):
        with pytest.raises(ValueError, match="numeric"):
            JerseyNumber.parse("seven")

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            JerseyNumber(True)

    def test_ordering(self):
        assert JerseyNumber(3) < JerseyNumber(10)


class TestMeasurements:
    """Test suite for Height and Weight"""

    def test_positive_required(self):
        with pytest.raises(ValueError, match="Height"):
            Height(0)
        with pytest.raises(ValueError, match="Weight"):
            Weight(-5)

    def test_str(self):
        assert str(Height(190)) == "190cm"
        assert str(Weight(85)) == "85kg"


class TestPerson:
    """Test suite for Person"""

    def test_create_wraps_values(self):
        person = Person.create("Alice", "7", 175, 65)
        assert person.name == Name("Alice")
        assert person.jersey_number == JerseyNumber(7)
        assert person.height == Height(175)
        assert person.weight == Weight(65)

    def test_immutable(self):
        person = Person.create("Alice", 7, 175, 65)
        with pytest.raises(AttributeError):
            person.weight = Weight(70)

    def test_value_equality(self):
        assert Person.create("Alice", 7, 175, 65) == Person.create("Alice", 7, 175, 65)
        assert Person.create("Alice", 7, 175, 65) != Person.create("Alice", 7, 175, 66)

    def test_with_changes_returns_new_value(self):
        person = Person.create("Alice", 7, 175, 65)
        edited = person.with_changes(jersey_number="23", weight=70)

        assert edited is not person
        assert edited.name == person.name
        assert edited.jersey_number == JerseyNumber(23)
        assert edited.weight == Weight(70)
        assert person.weight == Weight(65)

    def test_with_changes_accepts_value_types(self):
        person = Person.create("Alice", 7, 175, 65)
        edited = person.with_changes(name=Name("Alicia"))
        assert edited.name == Name("Alicia")

    def test_with_changes_unknown_field(self):
        person = Person.create("Alice", 7, 175, 65)
        with pytest.raises(ValueError, match="Unknown person field"):
            person.with_changes(position="PG")

    def test_to_dict(self):
        data = Person.create("Alice", 7, 175, 65).to_dict()
        assert data == {'name': "Alice", 'jersey_number': 7, 'height': 175, 'weight': 65}
