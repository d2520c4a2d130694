from __future__ import annotations

import unittest


class TestPublicApiLockContract(unittest.TestCase):
    def test_api_module_exports_are_present(self) -> None:
        import datefilter.api as api

        self.assertTrue(hasattr(api, "__all__"))
        self.assertIsInstance(api.__all__, (list, tuple))
        self.assertEqual(len(api.__all__), len(api._PUBLIC_EXPORTS))

        for name in api.__all__:
            self.assertIsInstance(name, str)
            self.assertTrue(hasattr(api, name), f"datefilter.api missing public name: {name}")
            self.assertIsNotNone(getattr(api, name), f"datefilter.api {name} is None")

    def test_core_operations_are_public(self) -> None:
        import datefilter.api as api

        for name in ("classify", "project", "derive_window", "DegenerateWindowError", "InvalidInputError"):
            self.assertIn(name, api.__all__)

    def test_package_reexports_match_api_all(self) -> None:
        import datefilter
        import datefilter.api as api

        for name in api.__all__:
            self.assertTrue(hasattr(datefilter, name), f"datefilter package does not re-export: {name}")
            self.assertIs(getattr(datefilter, name), getattr(api, name), f"datefilter.{name} must be same object as datefilter.api.{name}")


if __name__ == "__main__":
    unittest.main(verbosity=2)
