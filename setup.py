from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "cmdflags" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    return "0.0.0"


setup(
    name="cmdflags",
    version=_read_version(),
    description="Typed command-line flag registry and parser with flag-file support",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["cmdflags = cmdflags.cli:main"]},
)
