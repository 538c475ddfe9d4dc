# examples/advanced_examples.py
"""
Advanced examples: generic driver, sealed methods and the example registry
"""

from oopconcepts import (
    Concept,
    ExampleConfig,
    ExampleRegistry,
    exercise,
    required_operations,
)
from oopconcepts.employees import Designer, Employee, Engineer, Manager
from oopconcepts.shapes import Circle, Rectangle, Shape, Triangle
from oopconcepts.vehicles import Vehicle


def generic_driver_example():
    """Drive two unrelated contracts with the same function."""
    print("=== Generic Driver ===")

    shapes = [Circle("c", 1.0), Rectangle("r", 2.0, 3.0), Triangle("t", 3.0, 4.0, 5.0)]
    print(f"Shape operations: {required_operations(Shape)}")
    for outcome in exercise(shapes, Shape):
        print(f"  {outcome.variant.name}.{outcome.operation}() = {outcome.result:.3f}")

    staff = [Engineer("Ada"), Manager("Grace"), Designer("Linus")]
    print(f"\nEmployee operations: {required_operations(Employee)}")
    exercise(staff, Employee)

    try:
        exercise(shapes + staff, Shape)
    except TypeError as e:
        print(f"\n✗ Mixed list rejected: {e}")


def sealed_method_example():
    """Redefining a sealed method fails when the class is created."""
    print("\n=== Sealed Methods ===")
    try:
        class Truck(Vehicle):
            def print_info(self):
                print("Truck info")
    except TypeError as e:
        print(f"✗ {e}")


def registry_example():
    """Run every polymorphism example through the registry."""
    print("\n=== Registry ===")
    registry = ExampleRegistry()
    for info in registry.examples:
        print(f"  [{info.concept.value:<13}] {info.name}: {info.description}")

    config = ExampleConfig(currency_symbol="€", verbose=True)
    registry.run_all(config, concept=Concept.POLYMORPHISM)


if __name__ == "__main__":
    print("oopconcepts Advanced Examples")
    print("=" * 50)

    generic_driver_example()
    sealed_method_example()
    registry_example()
