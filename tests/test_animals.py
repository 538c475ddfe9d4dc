# tests/test_animals.py
"""
Unit tests for the Animal contract.
"""

import pytest

from oopconcepts import animals
from oopconcepts.animals import Animal, Bird, Cat, Dog


class TestAnimals:
    """Test default and required operations."""

    def test_variants(self, capsys):
        for animal in (Dog("Husky"), Cat("Orange"), Bird("Parrot")):
            animal.describe()
            animal.make_sound()
            animal.move()

        assert capsys.readouterr().out.splitlines() == [
            "I am a Husky dog", "Woof! Woof!", "Running on four legs",
            "I am a Orange cat", "Meow! Meow!", "Walking silently on four legs",
            "I am a Parrot", "Tweet! Tweet!", "Flying in the sky",
        ]

    def test_default_sound(self, capsys):
        """Test that a variant without make_sound inherits the default."""
        class Fish(Animal):
            def move(self):
                print("Swimming")

            def describe(self):
                print("I am a fish")

        Fish().make_sound()
        assert capsys.readouterr().out == "Generic animal sound\n"

    def test_missing_operation(self):
        class Rock(Animal):
            def describe(self):
                print("I am a rock")

        with pytest.raises(TypeError):
            Rock()


def test_main_output(capsys):
    assert animals.main() == 0
    out = capsys.readouterr().out

    for heading in ("All Animals Making Sounds", "All Animals Moving",
                    "All Animals Describing", "Full Interaction"):
        assert f"=== {heading} ===" in out
    assert out.count("Woof! Woof!") == 4
    assert out.count("I am a Black cat") == 2
