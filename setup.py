from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "src" / "jsminify" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/jsminify/__init__.py")


setup(
    name="jsminify",
    version=_read_version(),
    description="Whitespace and comment minifier for JavaScript source text",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["jsminify=jsminify.cli:main"]},
)
