"""
Unit tests for region mapping.
"""

import unittest
from models import FunctionDefinition
from region_mapper import create_functions_by_region_map, flatten_region_map


class TestCreateFunctionsByRegionMap(unittest.TestCase):
    """Test projection of definitions onto regions."""

    def test_default_region(self):
        """Test definitions without regions go to us-central1."""
        region_map = create_functions_by_region_map(
            "my-project", [FunctionDefinition(name="api")]
        )
        self.assertEqual(list(region_map), ["us-central1"])
        fn = region_map["us-central1"][0]
        self.assertEqual(
            fn.name, "projects/my-project/locations/us-central1/functions/api"
        )
        self.assertIsNone(fn.regions)

    def test_empty_regions_uses_default(self):
        """Test an empty region list falls back to the default region."""
        region_map = create_functions_by_region_map(
            "my-project", [FunctionDefinition(name="api", regions=[])]
        )
        self.assertEqual(list(region_map), ["us-central1"])

    def test_custom_default_region(self):
        """Test the default region can be overridden."""
        region_map = create_functions_by_region_map(
            "my-project",
            [FunctionDefinition(name="api")],
            default_region="europe-west2",
        )
        self.assertEqual(list(region_map), ["europe-west2"])

    def test_multiple_regions_produce_independent_copies(self):
        """Test N regions give N distinct, unaliased records."""
        definition = FunctionDefinition(
            name="a",
            regions=["us-east1", "us-west1"],
            labels={"team": "core"},
            event_trigger={"resource": "x"},
        )
        region_map = create_functions_by_region_map("p", [definition])

        east = region_map["us-east1"][0]
        west = region_map["us-west1"][0]
        self.assertEqual(east.name, "projects/p/locations/us-east1/functions/a")
        self.assertEqual(west.name, "projects/p/locations/us-west1/functions/a")

        east.event_trigger["resource"] = "changed"
        east.labels["team"] = "other"
        self.assertEqual(west.event_trigger["resource"], "x")
        self.assertEqual(west.labels["team"], "core")
        self.assertEqual(definition.event_trigger["resource"], "x")

    def test_input_not_mutated(self):
        """Test the source definition keeps its name and regions."""
        definition = FunctionDefinition(name="a", regions=["us-east1"])
        create_functions_by_region_map("p", [definition])
        self.assertEqual(definition.name, "a")
        self.assertEqual(definition.regions, ["us-east1"])

    def test_order_preserved_within_region(self):
        """Test input order is kept in each region's list."""
        definitions = [
            FunctionDefinition(name="first"),
            FunctionDefinition(name="second", regions=["us-east1", "us-central1"]),
            FunctionDefinition(name="third"),
        ]
        region_map = create_functions_by_region_map("p", definitions)

        central = [fn.name.split("/")[-1] for fn in region_map["us-central1"]]
        self.assertEqual(central, ["first", "second", "third"])
        self.assertEqual(len(region_map["us-east1"]), 1)

    def test_every_record_names_its_region(self):
        """Test each record's name contains the region it is filed under."""
        definitions = [
            FunctionDefinition(name="a", regions=["us-east1", "europe-west1"]),
            FunctionDefinition(name="b"),
        ]
        region_map = create_functions_by_region_map("p", definitions)
        for region, functions in region_map.items():
            for fn in functions:
                self.assertIn(f"/locations/{region}/", fn.name)
                self.assertIsNone(fn.regions)


class TestFlattenRegionMap(unittest.TestCase):
    """Test flattening of a RegionMap."""

    def test_flatten(self):
        """Test all regional records are concatenated."""
        region_map = create_functions_by_region_map(
            "p",
            [
                FunctionDefinition(name="a", regions=["us-east1", "us-west1"]),
                FunctionDefinition(name="b"),
            ],
        )
        names = sorted(fn.name for fn in flatten_region_map(region_map))
        self.assertEqual(
            names,
            [
                "projects/p/locations/us-central1/functions/b",
                "projects/p/locations/us-east1/functions/a",
                "projects/p/locations/us-west1/functions/a",
            ],
        )

    def test_flatten_empty(self):
        """Test flattening an empty map."""
        self.assertEqual(flatten_region_map({}), [])


if __name__ == "__main__":
    unittest.main()
