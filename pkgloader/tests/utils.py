"""
Helpers for building throwaway classpath trees
"""

import shutil
import tempfile
from pathlib import Path


class ClassPathTreeMixin:
    """Creates a temporary directory with one or more classpath roots"""

    def setUp(self):
        super().setUp()
        self.temp_dir = tempfile.mkdtemp()
        self.temp_path = Path(self.temp_dir)
        self.root = self.make_root('root')

    def tearDown(self):
        # Clean up temp directory
        shutil.rmtree(self.temp_dir)
        super().tearDown()

    def make_root(self, name: str) -> Path:
        root = self.temp_path / name
        root.mkdir(exist_ok=True)
        return root

    def create_package(self, package: str, content: str = None, root: Path = None,
                       suffix: str = '.py') -> Path:
        """
        Create the unit file for a package following the
        '<dirs>/<Unit>/<Unit><suffix>' convention.
        """
        root = root or self.root
        parts = package.split('.')
        unit = parts[-1]
        unit_dir = root.joinpath(*parts)
        unit_dir.mkdir(parents=True, exist_ok=True)

        if content is None:
            content = f'''
class {unit}:
    origin = {str(root)!r}
    package = {package!r}
'''

        unit_file = unit_dir / f"{unit}{suffix}"
        unit_file.write_text(content)
        return unit_file
