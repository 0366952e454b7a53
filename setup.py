from pathlib import Path
from setuptools import find_namespace_packages, setup


def _read_version() -> str:
    """Read __version__ from src/tplview/__init__.py without importing it."""
    init = Path(__file__).parent / "src" / "tplview" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/tplview/__init__.py")


setup(
    name="tplview",
    version=_read_version(),
    description="File-backed templates with layouts, render caching and fault-to-text rendering",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tplview", "tplview.*"]),
    install_requires=["jinja2>=3.0"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["tplview = tplview.cli:main"]},
)
