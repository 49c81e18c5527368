# Imports:
from setuptools import setup

setup(
    name="toroidz",
    # Version scheme is last date updated in YYYY.MM.DDv format
    # where 'v' may increment [a...z] for multiple releases on the same day
    version="2026.10.16a",
    description="Ferrite toroid inductor impedance vs frequency",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    py_modules=[
        "cores",
        "errors",
        "ferrite_data",
        "physics",
        "plot_util",
        "toroid_sweep",
        "utilities",
    ],
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "toroid-impedance=toroid_sweep:main",
        ],
    },
    python_requires=">=3.11, <4",
)
