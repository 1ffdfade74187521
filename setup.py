from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

INSTALL_REQUIRES = [
    "numpy",
    "msgspec>=0.18",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
    ],
}


setup(
    name="opbench",
    version="0.1.0",
    description="Micro-benchmark harness for data-processing operators",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "opbench = opbench.cli:main",
        ],
    },
)
