import importlib
import pkgutil
import sys
import unittest

import salestrack


class PackageImportTest(unittest.TestCase):
    def test_every_module_imports(self):
        names = [info.name for info in pkgutil.walk_packages(salestrack.__path__, "salestrack.")]
        self.assertIn("salestrack.services.sale_service", names)
        for name in names:
            with self.subTest(module=name):
                importlib.import_module(name)

    def test_app_exposes_routes(self):
        from salestrack.main import app

        paths = {route.path for route in app.routes}
        for path in ("/health", "/account/login", "/api/sales", "/api/sales/{sale_id}", "/api/reports/pdf-report"):
            with self.subTest(path=path):
                self.assertIn(path, paths)

    def test_service_annotations_resolve(self):
        from typing import get_type_hints

        from salestrack.models.sale import Sale
        from salestrack.services.sale_service import SaleService

        self.assertGreaterEqual(sys.version_info[:2], (3, 10))
        self.assertEqual(get_type_hints(SaleService.report_sales)["return"], list[Sale])
        self.assertEqual(get_type_hints(SaleService.list)["return"], list[Sale])


if __name__ == "__main__":
    unittest.main()
