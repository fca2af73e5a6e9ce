from setuptools import setup, find_packages

setup(
    name="check-oneview",
    version="1.0.0",
    description="Nagios check for uncleared HPE OneView alerts",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests",
        "pyyaml",
        "colorama",
    ],
    entry_points={
        "console_scripts": [
            "check_oneview=oneview_check.cli:run",
        ],
    },
    python_requires=">=3.8",
)
