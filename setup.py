from pathlib import Path

from setuptools import find_namespace_packages, setup

# Load packages from requirements.txt
BASE_DIR = Path(__file__).parent
with open(Path(BASE_DIR, "requirements.txt")) as file:
    required_packages = [ln.strip() for ln in file.readlines() if ln.strip()]

# Define our package
setup(
    name="powerpath",
    version="0.1",
    description="PowerPath 100 adaptive question engine with bounded mastery scoring",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["src", "src.*"]),
    install_requires=required_packages,
    extras_require={
        "dev": ["pre-commit==2.19.0"],
        "test": ["pytest>=7.0"],
    },
)
