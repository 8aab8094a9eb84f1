import runpy

from setuptools import setup

# const.py has no imports
const = runpy.run_path("argctx/const.py")

setup(
    name="argctx",
    version=const["VERSION_STR"],
    python_requires='>=3.10',
    description=const["DESCRIPTION"],
    packages=["argctx"],
    install_requires=[
        "dataclasses-json",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "argctx = argctx:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
