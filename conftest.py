"""
Root conftest.py for pytest configuration.
Automatically adds all package src directories to the Python path so the
packages can be tested without being installed.
"""
import sys
from pathlib import Path

# Get the project root directory
PROJECT_ROOT = Path(__file__).parent

packages_dir = PROJECT_ROOT / "packages"
if packages_dir.exists():
    for package_dir in sorted(packages_dir.iterdir()):
        src_dir = package_dir / "src"
        if package_dir.is_dir() and src_dir.exists():
            src_path = str(src_dir.absolute())
            if src_path not in sys.path:
                sys.path.insert(0, src_path)
