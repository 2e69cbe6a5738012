import unittest
from pathlib import Path

from foldergen.core.planner import build_scaffold_plan
from foldergen.models import NO_CATEGORIES, Category


class TestPlanner(unittest.TestCase):
    def test_empty_selection_plans_nothing(self):
        self.assertEqual(build_scaffold_plan("C:/proj/Assets", "Client", NO_CATEGORIES, "x.txt"), [])

    def test_images_plan_order(self):
        base = Path("/proj/Assets")
        plan = build_scaffold_plan(str(base), "Client", Category.IMAGES, "RemoveMe.txt")

        images = base / "Client" / "Images"
        expected = [
            ("dir", images),
            ("dir", images / "AppIcon"),
            ("placeholder", images / "AppIcon" / "RemoveMe.txt"),
            ("dir", images / "Ui"),
            ("placeholder", images / "Ui" / "RemoveMe.txt"),
            ("dir", images / "Ui/Sources"),
            ("placeholder", images / "Ui" / "Sources" / "RemoveMe.txt"),
        ]
        self.assertEqual([(p.kind, Path(p.path)) for p in plan], expected)
        self.assertTrue(all(p.category == Category.IMAGES for p in plan))

    def test_catalog_order_and_root_only(self):
        plan = build_scaffold_plan("/a", "Client", Category.SCRIPTS | Category.PLUGINS, None)
        self.assertEqual(
            [Path(p.path) for p in plan],
            [Path("/a/Plugins"), Path("/a/Client/Scripts")],
        )
        self.assertFalse(any(p.kind == "placeholder" for p in plan))

    def test_empty_root_collapses(self):
        plan = build_scaffold_plan("/a", "", Category.SCRIPTS, "x.txt")
        self.assertEqual([Path(p.path) for p in plan], [Path("/a/Scripts"), Path("/a/Scripts/x.txt")])

        plan_none = build_scaffold_plan("/a", None, Category.SCRIPTS, "x.txt")
        self.assertEqual([p.path for p in plan_none], [p.path for p in plan])


if __name__ == "__main__":
    unittest.main()
