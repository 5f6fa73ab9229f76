from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "treeconcat" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/treeconcat/__init__.py")


setup(
    name="treeconcat",
    version=_read_version(),
    description="Concatenate a directory tree into one marker-delimited text stream",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["pathspec>=0.10"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["treeconcat = treeconcat.cli:main"]},
)
