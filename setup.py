from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from src/lookup/__init__.py without importing it."""
    for line in (HERE / "src" / "lookup" / "__init__.py").read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found")


setup(
    name="lookup",
    version=_read_version(),
    description="Paragraph-wise search of entry files with comments and include directives",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["lookup=lookup.cli:main"]},
)
