from pathlib import Path
from setuptools import find_namespace_packages, setup


README = Path(__file__).parent / "README.md"

setup(
    name="postbuild",
    version="1.1.0",
    description="Injects css/js assets, git hashes and conditional removals into built HTML files",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["postbuild", "postbuild.*"]),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["postbuild = postbuild.cli:main"]},
)
