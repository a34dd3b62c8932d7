from setuptools import find_packages, setup

setup(
    name="selfmake",
    version="0.3.0",
    description="Include scanning, header resolution and self-rebuilding build helper",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["selfmake = selfmake.cli:main"]},
)
