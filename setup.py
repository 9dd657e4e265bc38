import os

from setuptools import find_packages, setup

_here = os.path.dirname(os.path.abspath(__file__))
_about: dict[str, str] = {}
with open(os.path.join(_here, "src", "json2msgpack", "__about__.py")) as f:
    exec(f.read(), _about)

if __name__ == "__main__":
    setup(
        name="json2msgpack",
        version=_about["__version__"],
        description="Single-pass JSON to MessagePack converter with minimal encodings",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[
            "pydantic>=2",
            "pydantic-settings>=2",
        ],
        extras_require={
            "test": [
                "pytest",
                "msgpack>=1.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "json2msgpack = json2msgpack.cli:main",
            ],
        },
    )
